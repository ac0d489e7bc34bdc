# MIT License (see LICENSE)
"""
The sweater: source of the balloons' charge.

The sweater starts neutral with 57 plus/minus charge pairs. Rubbing a balloon
over it moves minus charges, one at a time, onto the balloon; the sweater is
left with a net positive charge equal to the number of charges it gave away.

Charges never move spatially. A transferred minus charge simply has its
``moved`` flag set; the view hides it on the sweater and shows one more
minus charge on the balloon.
"""
from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from .charges import PointCharge, Rect
from .constants import MAX_BALLOON_CHARGE
from .util import f64, point_in_polygon

if TYPE_CHECKING:
    from .balloon import Balloon

logger = logging.getLogger(__name__)

# Charge pair layout, in play-area coordinates. Laid out by hand to follow
# the sweater artwork, roughly column by column.
CHARGE_PAIR_POSITIONS: list[tuple[float, float]] = [
    (104, 64), (94, 90), (85, 121), (80, 147), (76, 178),
    (74, 209), (71, 242), (67, 273), (67, 304), (61, 330),
    (140, 85), (142, 116), (145, 145), (145, 174), (143, 205),
    (140, 237), (138, 267), (132, 296), (128, 327),
    (170, 98), (171, 129), (171, 160), (172, 191), (171, 223),
    (169, 254), (167, 287), (163, 318), (163, 350),
    (208, 88), (208, 117), (206, 148), (205, 179), (203, 210),
    (202, 241), (200, 272), (197, 302), (196, 333),
    (239, 75), (236, 105), (234, 135), (233, 166), (232, 197),
    (231, 229), (230, 260), (227, 291), (226, 321), (224, 350),
    (266, 59), (283, 90), (292, 121), (292, 152), (292, 187),
    (290, 217), (295, 247), (296, 278), (295, 308), (290, 337),
]

# Activation rectangle margins relative to the balloon's top-left corner.
# Only the left strip of the balloon picks up charges.
ACTIVATION_LEFT = -5
ACTIVATION_RIGHT = 50
ACTIVATION_VERTICAL_MARGIN = 10

# Number of angular slices used to outline the charged area.
CHARGED_AREA_SLICES = 9


class Sweater:
    """
    Charged body that gives minus charges to balloons.

    Attributes:
        x, y: Top-left corner of the sweater.
        width, height: Sweater size.
        plus_charges: Fixed plus charges, one per pair.
        minus_charges: Minus charges, positionally paired with plus_charges.
        net_charge: Number of minus charges given away (>= 0).
        charged_area: Polygon [N, 2] enclosing the charges.
    """
    width = 305
    height = 385

    def __init__(
        self,
        x: float = 25,
        y: float = 20,
        charge_positions: list[tuple[float, float]] | None = None,
    ) -> None:
        positions = CHARGE_PAIR_POSITIONS if charge_positions is None else charge_positions
        assert len(positions) <= MAX_BALLOON_CHARGE, "sweater holds more charges than a balloon can take"

        self.x = x
        self.y = y
        self.center = f64((x + self.width / 2, y + self.height / 2))
        self.bounds = Rect(x, y, x + self.width, y + self.height)

        self.plus_charges: list[PointCharge] = []
        self.minus_charges: list[PointCharge] = []
        for px, py in positions:
            self.plus_charges.append(PointCharge((px, py)))
            self.minus_charges.append(PointCharge((px + PointCharge.RADIUS, py + PointCharge.RADIUS)))

        self.charged_area = self._outline(positions)
        self.net_charge = 0

    def _outline(self, positions: list[tuple[float, float]]) -> np.ndarray:
        """
        Polygon around the charges.

        The plane around the center is cut into CHARGED_AREA_SLICES equal
        angular slices; each vertex is the charge pair farthest from the
        center within its slice (or the center itself for an empty slice).
        """
        slice_width = 2 * math.pi / CHARGED_AREA_SLICES
        vertices = [self.center.copy() for _ in range(CHARGED_AREA_SLICES)]
        best = [0.0] * CHARGED_AREA_SLICES
        for p in positions:
            offset = f64(p) - self.center
            angle = math.atan2(offset[1], offset[0])
            if angle < 0:
                angle += 2 * math.pi
            index = min(int(angle // slice_width), CHARGED_AREA_SLICES - 1)
            distance = float(np.hypot(offset[0], offset[1]))
            if distance > best[index]:
                best[index] = distance
                vertices[index] = f64(p)
        return np.array(vertices, dtype=np.float64)

    def in_charged_area(self, point: np.ndarray | tuple[float, float]) -> bool:
        """True if point lies inside the outline of the sweater's charges."""
        return point_in_polygon(point, self.charged_area)

    @staticmethod
    def activation_rect(balloon: "Balloon") -> tuple[float, float, float, float]:
        """Balloon-relative pickup rectangle (x1, y1, x2, y2), bounds exclusive."""
        x, y = balloon.position
        return (
            x + ACTIVATION_LEFT,
            y - ACTIVATION_VERTICAL_MARGIN,
            x + ACTIVATION_RIGHT,
            y + balloon.height + ACTIVATION_VERTICAL_MARGIN,
        )

    def find_intersection(self, balloon: "Balloon") -> bool:
        """
        Move at most one minus charge from the sweater to the balloon.

        The first unmoved minus charge (in layout order) inside the balloon's
        activation rectangle is transferred and the scan stops there, so a
        single call never picks up more than one charge.

        Returns:
            True if a charge was transferred.
        """
        x1, y1, x2, y2 = self.activation_rect(balloon)
        for charge in self.minus_charges:
            if charge.moved:
                continue
            cx, cy = charge.position
            if x1 < cx < x2 and y1 < cy < y2:
                self.transfer_charge_to(charge, balloon)
                return True
        return False

    def transfer_charge_to(self, charge: PointCharge, balloon: "Balloon") -> None:
        """Hand one minus charge to the balloon."""
        assert not charge.moved, "charge was already transferred"
        assert balloon.charge > -MAX_BALLOON_CHARGE, "balloon is already fully charged"
        charge.moved = True
        balloon.charge -= 1
        self.net_charge += 1
        logger.debug("Charge moved to %s balloon (balloon=%d, sweater=%d)",
                     balloon.color.value, balloon.charge, self.net_charge)

    def closest_unmoved_charge(self, balloon: "Balloon") -> PointCharge | None:
        """
        Unmoved minus charge nearest the center of the balloon's activation rectangle.

        Returns None once every charge has been picked up.
        """
        x1, y1, x2, y2 = self.activation_rect(balloon)
        target = f64(((x1 + x2) / 2, (y1 + y2) / 2))
        closest = None
        min_distance = math.inf
        for charge in self.minus_charges:
            if charge.moved:
                continue
            distance = float(np.hypot(*(charge.position - target)))
            if distance < min_distance:
                min_distance = distance
                closest = charge
        return closest

    @property
    def moved_count(self) -> int:
        return sum(1 for c in self.minus_charges if c.moved)

    def reset(self) -> None:
        for charge in self.minus_charges:
            charge.reset()
        self.net_charge = 0
