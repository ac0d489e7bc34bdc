# MIT License (see LICENSE)
"""
Point charges and rectangle bounds.

Defines the small value types shared by the sweater, wall and balloons:
- PointCharge: a discrete charge carrier with a default and current position.
- MovablePointCharge: a point charge that can be displaced (wall electrons).
- Rect: axis-aligned bounds in play-area coordinates.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from .util import f64, norm


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Attributes:
        min_x, min_y: Top-left corner (y grows downward).
        max_x, max_y: Bottom-right corner.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains_point(self, point: np.ndarray | tuple[float, float]) -> bool:
        """Inclusive containment test."""
        return self.min_x <= point[0] <= self.max_x and self.min_y <= point[1] <= self.max_y

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap or share an edge."""
        return (
            self.min_x <= other.max_x and other.min_x <= self.max_x
            and self.min_y <= other.max_y and other.min_y <= self.max_y
        )


@dataclass(eq=False)
class PointCharge:
    """
    A single discrete charge carrier.

    Sweater charges never move spatially; only their ``moved`` flag changes
    when they are handed to a balloon. Plus charges ignore ``moved``.

    Attributes:
        default_position: Top-left of the charge glyph at construction, [x, y].
        position: Current top-left position; reset to default_position.
        moved: True once the charge has been transferred to a balloon.
    """
    RADIUS: ClassVar[float] = 8.0
    CHARGE: ClassVar[float] = -1.754

    default_position: np.ndarray | tuple[float, float]
    position: np.ndarray = field(init=False)
    moved: bool = False

    def __post_init__(self) -> None:
        self.default_position = f64(self.default_position)
        self.default_position.setflags(write=False)
        self.position = self.default_position.copy()

    @property
    def center(self) -> np.ndarray:
        """Center of the charge glyph."""
        return self.position + self.RADIUS

    def reset(self) -> None:
        self.position = self.default_position.copy()
        self.moved = False


@dataclass(eq=False)
class MovablePointCharge(PointCharge):
    """Point charge whose position is displaced by nearby balloons."""

    @property
    def displacement(self) -> float:
        """Distance between the current and the default position."""
        return norm(self.position - self.default_position)
