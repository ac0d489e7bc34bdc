# MIT License (see LICENSE)
"""
Charge bookkeeping and model invariants.

Used for verifying simulation correctness and while debugging. Charge is
only ever moved from the sweater to a balloon, never created, so the sum of
all net charges in a model stays at zero.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any

from ..constants import MAX_BALLOON_CHARGE

if TYPE_CHECKING:
    from ..model import SimulationModel


def total_charge(model: "SimulationModel") -> int:
    """
    Sum of the net charges of the sweater and both balloons.

    Zero for any sequence of transfers and resets.
    """
    return model.sweater.net_charge + sum(b.charge for b in model.balloons)


def check_invariants(model: "SimulationModel") -> None:
    """
    Assert the model's structural invariants.

    Raises:
        AssertionError: On the first violated invariant.
    """
    sweater = model.sweater
    moved = sum(1 for c in sweater.minus_charges if c.moved)
    assert sweater.net_charge == moved, f"sweater net charge {sweater.net_charge} != {moved} moved charges"
    assert 0 <= moved <= len(sweater.minus_charges)

    for b in model.balloons:
        assert -MAX_BALLOON_CHARGE <= b.charge <= 0, f"{b.color.value} balloon charge {b.charge} out of range"
        if b.is_dragged:
            continue
        bounds = model.bounds
        x, y = b.position
        assert bounds.min_x <= x <= bounds.max_x - b.width, f"{b.color.value} balloon x={x} out of bounds"
        assert bounds.min_y <= y <= bounds.max_y - b.height, f"{b.color.value} balloon y={y} out of bounds"

    assert total_charge(model) == 0, "charge was created or destroyed"


def snapshot(model: "SimulationModel") -> dict[str, Any]:
    """
    Plain-Python copy of every piece of mutable model state.

    Two snapshots compare equal exactly when the models are in the same state.
    """
    return {
        "time": model.time,
        "show_charges": model.show_charges.value,
        "sweater": {
            "net_charge": model.sweater.net_charge,
            "moved": [c.moved for c in model.sweater.minus_charges],
        },
        "wall": {
            "is_visible": model.wall.is_visible,
            "positions": [tuple(c.position.tolist()) for c in model.wall.minus_charges],
        },
        "balloons": [
            {
                "position": tuple(b.position.tolist()),
                "velocity": tuple(b.velocity.tolist()),
                "charge": b.charge,
                "is_dragged": b.is_dragged,
                "is_visible": b.is_visible,
                "is_stopped": b.is_stopped,
                "direction": b.direction,
            }
            for b in model.balloons
        ],
    }
