# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Small 2D helpers used by the model. Vectors are numpy arrays of shape (2,)
in screen coordinates (x to the right, y downward).
"""
from __future__ import annotations
import math
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase so that positions and velocities can be
    passed as tuples or lists.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def round_half_up(x: float) -> int:
    """Round to nearest integer, with halves rounded away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def point_in_polygon(point: np.ndarray | tuple[float, float], vertices: np.ndarray) -> bool:
    """
    Even-odd ray casting test.

    Args:
        point: Query point [x, y].
        vertices: Polygon vertices [N, 2], implicitly closed.

    Returns:
        True if the point lies inside the polygon.
    """
    px, py = float(point[0]), float(point[1])
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi > py) != (yj > py):
            x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < x_cross:
                inside = not inside
        j = i
    return inside


def env_log_level(default: str = "INFO") -> str:
    """Log level name requested via the STATIC_SIM_LOG_LEVEL environment variable."""
    return os.environ.get("STATIC_SIM_LOG_LEVEL", default).upper()
