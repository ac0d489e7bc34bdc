# MIT License (see LICENSE)
"""
Force law for the electrostatic model.

Every interaction in the model (balloon/sweater, balloon/balloon, balloon/wall
charge) uses the same inverse-power law:

    F = kqq * (p1 - p2) / |p1 - p2|^(power + 1)

i.e. a vector pointing from p2 towards p1 with magnitude kqq / r^power.
A positive kqq therefore pushes p1 away from p2 when used as the force on
p1, and a negative kqq pulls it closer. The sign conventions of the callers
follow from that.

Key concepts:
- Coincident points produce zero force instead of a singularity.
- Wall interactions use power 2.35, everything else the inverse square.
"""
from __future__ import annotations

import numpy as np

from ..constants import DEFAULT_FORCE_EXPONENT, MAX_FORCE
from ..util import f64, norm


def get_force(
    p1: np.ndarray | tuple[float, float],
    p2: np.ndarray | tuple[float, float],
    kqq: float,
    power: float = DEFAULT_FORCE_EXPONENT,
) -> np.ndarray:
    """
    Force between two point-like objects.

    Args:
        p1: Position of the object the force acts on.
        p2: Position of the source object.
        kqq: Coupling constant times the product of the charges.
        power: Distance exponent.

    Returns:
        Force vector [Fx, Fy] along (p1 - p2), zero if the points coincide.
    """
    difference = f64(p1) - f64(p2)
    r = norm(difference)
    if r == 0:
        return np.zeros(2, dtype=np.float64)
    return difference * (kqq / (r ** (power + 1)))


def cap_magnitude(force: np.ndarray, max_magnitude: float = MAX_FORCE) -> np.ndarray:
    """
    Scale a force down so its magnitude does not exceed max_magnitude.

    The direction is preserved. Forces already within the limit are returned
    unchanged.
    """
    mag = norm(force)
    if mag > max_magnitude:
        return force * (max_magnitude / mag)
    return force
