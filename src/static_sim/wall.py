# MIT License (see LICENSE)
"""
The wall: a neutral body whose electrons are pushed around by balloons.

The wall holds a 3 x 18 grid of plus/minus pairs. Plus charges are fixed.
Each minus charge is displaced from its default position by the repulsion
of every visible charged balloon, which is how the view shows induced
charge. Displacements are recomputed from scratch every step and never
accumulate.

Hiding the wall widens the play area and removes its pull on the balloons;
interested parties (the simulation model) register a visibility listener.
"""
from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, Callable

import numpy as np

from .charges import MovablePointCharge, PointCharge, Rect
from .constants import (
    INDUCED_CHARGE_FORCE_THRESHOLD,
    K_COULOMB_WALL,
    WALL_FORCE_EXPONENT,
)
from .core.forces import get_force
from .util import f64, norm, round_half_up

if TYPE_CHECKING:
    from .balloon import Balloon
    from .model import SimulationModel

logger = logging.getLogger(__name__)

NUM_COLUMNS = 3
NUM_ROWS = 18


class Wall:
    """
    Charged body on the right side of the play area.

    Attributes:
        x: Left edge of the wall.
        width, height: Wall size; width equals the model's wall gap.
        is_visible: Whether the wall is present.
        plus_charges: Fixed plus charges.
        minus_charges: Displaceable minus charges, paired with plus_charges.
    """

    def __init__(self, x: float, width: float, height: float) -> None:
        self.x = x
        self.y = 0.0
        self.width = width
        self.height = height
        self.bounds = Rect(x, self.y, x + width, self.y + height)
        self.is_visible = True
        self._visibility_listeners: list[Callable[[bool], None]] = []

        self.dx = round_half_up(width / NUM_COLUMNS + 2)
        self.dy = height / NUM_ROWS

        self.plus_charges: list[PointCharge] = []
        self.minus_charges: list[MovablePointCharge] = []
        r = PointCharge.RADIUS
        for i in range(NUM_COLUMNS):
            for k in range(NUM_ROWS):
                px, py = self._grid_position(i, k)
                self.plus_charges.append(PointCharge((x + px, py)))
                self.minus_charges.append(MovablePointCharge((x + px - r, py - r)))

    def _grid_position(self, i: int, k: int) -> tuple[float, float]:
        # alternate columns are staggered vertically
        y0 = self.dy / 2 if i % 2 == 0 else 1
        return i * self.dx + PointCharge.RADIUS + 1, k * self.dy + y0

    def add_visibility_listener(self, listener: Callable[[bool], None]) -> None:
        """Call listener(is_visible) whenever the wall is shown or hidden."""
        self._visibility_listeners.append(listener)

    def set_visible(self, visible: bool) -> None:
        visible = bool(visible)
        if visible == self.is_visible:
            return
        self.is_visible = visible
        logger.debug("Wall %s", "shown" if visible else "hidden")
        for listener in self._visibility_listeners:
            listener(visible)

    def step(self, model: "SimulationModel") -> None:
        """
        Displace each minus charge away from the visible charged balloons.

        Uses the balloon positions as they stand, i.e. the positions at the
        end of the previous model step.
        """
        sources = [
            (b.charge_center - (0.0, 2 * PointCharge.RADIUS), K_COULOMB_WALL * PointCharge.CHARGE * b.charge)
            for b in model.balloons
            if b.is_visible
        ]
        for charge in self.minus_charges:
            displacement = np.zeros(2, dtype=np.float64)
            for source, kqq in sources:
                displacement += get_force(charge.default_position, source, kqq, WALL_FORCE_EXPONENT)
            charge.position = charge.default_position + displacement

    def closest_charge_to(self, balloon: "Balloon") -> MovablePointCharge:
        """Minus charge whose default position is closest to the balloon's charge center."""
        target = balloon.charge_center
        closest = None
        distance = math.inf
        for charge in self.minus_charges:
            d = norm(charge.default_position - target)
            if d < distance:
                distance = d
                closest = charge
        assert closest is not None, "wall has no charges"
        return closest

    @staticmethod
    def force_indicates_induced_charge(force: np.ndarray) -> bool:
        """True if the force is strong enough to visibly induce charge."""
        return norm(f64(force)) > INDUCED_CHARGE_FORCE_THRESHOLD

    def reset(self) -> None:
        self.set_visible(True)
        for charge in self.minus_charges:
            charge.reset()
