"""
Microbenchmark: time per model step with both balloons free and charged.
Run:
  python benchmarks/bench_steps.py
"""
import time
from static_sim import SimulationModel


def _charged_model(charge: int) -> SimulationModel:
    model = SimulationModel()
    model.green_balloon.set_visible(True)
    for balloon in model.balloons:
        balloon.set_dragged(True)
        i = 0
        while balloon.charge > -charge and i < 2000:
            balloon.drag_to((30 + (i * 17) % 220, (i * 41) % 283))
            model.step(16)
            i += 1
        balloon.set_dragged(False)
    return model


def run(charge: int, steps: int = 2000):
    model = _charged_model(charge)

    # warmup
    for _ in range(30):
        model.step(16)

    t0 = time.perf_counter()
    for _ in range(steps):
        model.step(16)
        # keep the balloons moving so the stopped fast path is not measured
        for balloon in model.balloons:
            balloon.is_stopped = False
    t1 = time.perf_counter()

    return (t1 - t0) / steps


if __name__ == "__main__":
    for charge in [0, 5, 15, 25]:
        per_step = run(charge)
        print(f"charge={charge:3d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
