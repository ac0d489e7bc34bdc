# MIT License (see LICENSE)
"""
Region map of the play area.

The play area (768 x 504 in the default layout) is split into named column
bands running left to right (sweater arm, sweater halves, play-area thirds,
right edge/wall) and row bands running top to bottom. Each column/row
intersection is a described region. Narrow landmark ranges mark x positions
such as "near the wall" or "at the wall".

All ranges are inclusive at both ends. Where two bands share an edge the
band that comes later wins, so a center exactly on a boundary belongs to
the band to its right (or below).

Classification uses balloon centers, not top-left positions.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math

import numpy as np

WIDTH = 768
HEIGHT = 504

LANDMARK_WIDTH = 20

# Threshold around the diagonals, in radians. A move within this angle of a
# diagonal is reported as diagonal, anything else snaps to the nearest axis.
DIAGONAL_MOVEMENT_THRESHOLD = 15 * math.pi / 180


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max]."""
    min: float
    max: float

    @property
    def length(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class BalloonDirection(str, Enum):
    """Direction of a balloon move, in screen coordinates (y grows downward)."""
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"
    UP_LEFT = "UP_LEFT"
    UP_RIGHT = "UP_RIGHT"
    DOWN_LEFT = "DOWN_LEFT"
    DOWN_RIGHT = "DOWN_RIGHT"

    @property
    def is_relative(self) -> bool:
        """True for the four axis-aligned directions."""
        return self in (BalloonDirection.LEFT, BalloonDirection.RIGHT, BalloonDirection.UP, BalloonDirection.DOWN)


def _next_range(width: float, previous: Range | None = None) -> Range:
    start = previous.max if previous else 0.0
    return Range(start, start + width)


def _landmark_range(x: float) -> Range:
    half = LANDMARK_WIDTH / 2
    return Range(x - half, x + half)


# Centers of landmark locations.
X_POSITIONS = {
    "AT_NEAR_SWEATER": 393,
    "AT_CENTER_PLAY_AREA": 507,
    "AT_NEAR_WALL": 596,
    "AT_WALL": 621,
    "AT_NEAR_RIGHT_EDGE": 676,
}

# Balloon centers when it is pressed against a boundary.
X_BOUNDARY_POSITIONS = {
    "AT_LEFT_EDGE": 67,
    "AT_RIGHT_EDGE": 701,
}

Y_BOUNDARY_POSITIONS = {
    "AT_TOP": 111,
    "AT_BOTTOM": 393,
}

_near_sweater = _landmark_range(X_POSITIONS["AT_NEAR_SWEATER"])
_near_wall = _landmark_range(X_POSITIONS["AT_NEAR_WALL"])
_near_right_edge = _landmark_range(X_POSITIONS["AT_NEAR_RIGHT_EDGE"])

LANDMARK_RANGES = {
    "AT_NEAR_SWEATER": _near_sweater,
    "AT_CENTER_PLAY_AREA": _landmark_range(X_POSITIONS["AT_CENTER_PLAY_AREA"]),
    "AT_NEAR_WALL": _near_wall,
    "AT_NEAR_RIGHT_EDGE": _near_right_edge,
    "AT_VERY_CLOSE_TO_SWEATER": Range(_near_sweater.min - LANDMARK_WIDTH, _near_sweater.min),
    "AT_VERY_CLOSE_TO_WALL": Range(_near_wall.max, X_POSITIONS["AT_WALL"] - 1),
    "AT_VERY_CLOSE_TO_RIGHT_EDGE": Range(_near_right_edge.max, X_BOUNDARY_POSITIONS["AT_RIGHT_EDGE"] - 1),
}


def _build_bands(widths: list[tuple[str, float]]) -> dict[str, Range]:
    bands: dict[str, Range] = {}
    previous = None
    for name, width in widths:
        previous = _next_range(width, previous)
        bands[name] = previous
    return bands


# The last column and row extend well beyond the play area on purpose.
COLUMN_RANGES = _build_bands([
    ("LEFT_ARM", 138),
    ("LEFT_SIDE_OF_SWEATER", 65),
    ("RIGHT_SIDE_OF_SWEATER", 67),
    ("RIGHT_ARM", 65),
    ("LEFT_PLAY_AREA", 132),
    ("CENTER_PLAY_AREA", 77),
    ("RIGHT_PLAY_AREA", 132),
    ("RIGHT_EDGE", 500),
])

ROW_RANGES = _build_bands([
    ("UPPER_PLAY_AREA", 172),
    ("CENTER_PLAY_AREA", 154),
    ("LOWER_PLAY_AREA", 500),
])


def _last_match(ranges: dict[str, Range], value: float) -> str | None:
    match = None
    for name, r in ranges.items():
        if r.contains(value):
            match = name
    return match


def column_of(point: np.ndarray | tuple[float, float], wall_visible: bool) -> str:
    """
    Name of the column band containing point.x.

    RIGHT_EDGE is reported as WALL while the wall is visible.
    """
    column = _last_match(COLUMN_RANGES, point[0])
    assert column is not None, f"x={point[0]} is outside every play area column"
    if wall_visible and column == "RIGHT_EDGE":
        column = "WALL"
    return column


def row_of(point: np.ndarray | tuple[float, float]) -> str:
    """Name of the row band containing point.y."""
    row = _last_match(ROW_RANGES, point[1])
    assert row is not None, f"y={point[1]} is outside every play area row"
    return row


def landmark_of(point: np.ndarray | tuple[float, float], wall_visible: bool) -> str | None:
    """
    Name of the landmark range containing point.x, or None.

    Landmarks are purely positional; wall_visible is accepted so callers can
    classify columns and landmarks the same way.
    """
    return _last_match(LANDMARK_RANGES, point[0])


def in_landmark_column(point: np.ndarray | tuple[float, float]) -> bool:
    """True if point.x falls in any landmark range."""
    return any(r.contains(point[0]) for r in LANDMARK_RANGES.values())


def direction_of(displacement: np.ndarray | tuple[float, float]) -> BalloonDirection | None:
    """
    Classify a displacement into one of eight directions.

    Moves within 45° - DIAGONAL_MOVEMENT_THRESHOLD of an axis are reported
    as that axis; moves within DIAGONAL_MOVEMENT_THRESHOLD of a diagonal are
    reported as the diagonal.

    Returns:
        The direction, or None for a zero displacement.
    """
    dx, dy = float(displacement[0]), float(displacement[1])
    if dx == 0 and dy == 0:
        return None
    angle = math.atan2(dy, dx)
    cardinal = math.pi / 4 - DIAGONAL_MOVEMENT_THRESHOLD

    if abs(angle) <= cardinal:
        return BalloonDirection.RIGHT
    if abs(angle) >= math.pi - cardinal:
        return BalloonDirection.LEFT
    if abs(angle - math.pi / 2) <= cardinal:
        return BalloonDirection.DOWN
    if abs(angle + math.pi / 2) <= cardinal:
        return BalloonDirection.UP

    if dy > 0:
        return BalloonDirection.DOWN_RIGHT if dx > 0 else BalloonDirection.DOWN_LEFT
    return BalloonDirection.UP_RIGHT if dx > 0 else BalloonDirection.UP_LEFT
