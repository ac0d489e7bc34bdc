# examples/rub_and_release.py
from static_sim import SimulationModel
from static_sim.logging_config import setup_logging

setup_logging()

model = SimulationModel()
balloon = model.yellow_balloon

# rub the balloon up and down over the sweater
balloon.set_dragged(True)
for i in range(120):
    balloon.drag_to((40 + (i * 13) % 200, (i * 37) % 283))
    model.step(16)

# let go to the right of the sweater and watch it drift back
balloon.drag_to((400, 150))
model.step(16)
balloon.set_dragged(False)

while not balloon.is_stopped and model.time < 20_000:
    model.step(16)

print("t:", model.time)
print("charge:", balloon.charge, "sweater:", model.sweater.net_charge)
print("pos:", balloon.position, "stuck to sweater:", balloon.center_in_sweater_charged_area())
