# examples/wall_toggle.py
import logging

from static_sim import SimulationModel
from static_sim.logging_config import setup_logging

setup_logging(logging.DEBUG)

model = SimulationModel()
balloon = model.yellow_balloon

# charge the balloon, then park it next to the wall
balloon.set_dragged(True)
for i in range(60):
    balloon.drag_to((40 + (i * 11) % 180, (i * 29) % 283))
    model.step(16)
balloon.jump_to("AT_NEAR_WALL")
model.step(16)
balloon.set_dragged(False)

for _ in range(300):
    model.step(16)
print("touching wall:", balloon.touching_wall(), "inducing charge:", balloon.inducing_charge())

closest = model.wall.closest_charge_to(balloon)
print("closest wall electron pushed by", closest.displacement, "px")

# remove the wall; the balloon is pulled back toward the sweater
model.wall.set_visible(False)
for _ in range(300):
    model.step(16)
print("pos after removing wall:", balloon.position)
