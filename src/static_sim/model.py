# MIT License (see LICENSE)
"""
The simulation model: sweater, wall and two balloons.

SimulationModel is the world container and the only entry point the view
layer needs to drive the simulation. It manages:
- The play-area dimensions and the bounds derived from wall visibility.
- The per-frame step: the wall first (using balloon positions from the end
  of the previous frame), then each visible balloon.
- Boundary clamping for both the physics and the drag handlers.
- Global reset.

Structure:
    - User creates a SimulationModel.
    - The input layer drags balloons via Balloon.set_dragged()/drag_to().
    - The animation loop calls model.step(dt_ms) once per frame.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np

from . import play_area
from .balloon import BALLOON_HEIGHT, BALLOON_WIDTH, Balloon, BalloonColor
from .charges import Rect
from .constants import MAX_DT_MS, NOMINAL_DT_MS
from .sweater import Sweater
from .util import f64, norm
from .wall import Wall

logger = logging.getLogger(__name__)


class ShowCharges(str, Enum):
    """Which charges the view draws. Has no effect on the physics."""
    ALL = "all"
    NONE = "none"
    DIFF = "diff"


@dataclass(eq=False)
class SimulationModel:
    """
    Electrostatics world.

    Attributes:
        width: Play-area width, including the wall gap.
        height: Play-area height.
        wall_gap_width: Horizontal space taken by the wall when visible.
        show_charges: Charge display mode for the view.
        time: Simulated time in milliseconds.
    """
    width: float = play_area.WIDTH
    height: float = play_area.HEIGHT
    wall_gap_width: float = 80
    show_charges: ShowCharges = ShowCharges.ALL
    time: float = 0.0

    def __post_init__(self) -> None:
        """Validate dimensions and build the sweater, wall and balloons."""
        if self.height < BALLOON_HEIGHT:
            raise ValueError(f"Play area height {self.height} is smaller than a balloon")
        if not 0 < self.wall_gap_width < self.width:
            raise ValueError(f"Wall gap {self.wall_gap_width} does not fit in width {self.width}")
        if self.width - self.wall_gap_width < BALLOON_WIDTH:
            raise ValueError("Play area is too narrow for a balloon next to the wall")
        self.show_charges = ShowCharges(self.show_charges)

        self.sweater = Sweater(25, 20)
        self.wall = Wall(self.wall_boundary_x, self.wall_gap_width, self.height)
        self.balloons = [
            Balloon(self, 0, 440, 100, BalloonColor.YELLOW, default_visible=True),
            Balloon(self, 1, 380, 130, BalloonColor.GREEN, default_visible=False),
        ]
        self.wall.add_visibility_listener(self._on_wall_visibility_changed)
        self.reset()

    @property
    def yellow_balloon(self) -> Balloon:
        return self.balloons[0]

    @property
    def green_balloon(self) -> Balloon:
        return self.balloons[1]

    @property
    def wall_boundary_x(self) -> float:
        """Right bound of the play area while the wall is visible."""
        return self.width - self.wall_gap_width

    @property
    def bounds(self) -> Rect:
        """Region balloons may occupy; widens when the wall is hidden."""
        max_x = self.wall_boundary_x if self.wall.is_visible else self.width
        return Rect(0.0, 0.0, max_x, self.height)

    def clamp_to_bounds(
        self,
        position: np.ndarray | tuple[float, float],
        obj_width: float,
        obj_height: float,
    ) -> tuple[np.ndarray, bool]:
        """
        Keep an object of the given size inside the play area.

        Args:
            position: Requested top-left corner [x, y].
            obj_width, obj_height: Object size.

        Returns:
            (clamped position, True if the request was out of bounds).
        """
        p = f64(position)
        right = self.bounds.max_x
        out_of_bounds = False

        if p[0] + obj_width > right:
            p[0] = right - obj_width
            out_of_bounds = True
        if p[1] < 0:
            p[1] = 0.0
            out_of_bounds = True
        elif p[1] + obj_height > self.height:
            p[1] = self.height - obj_height
            out_of_bounds = True
        if p[0] < 0:
            p[0] = 0.0
            out_of_bounds = True

        if out_of_bounds:
            logger.debug("Clamped %s to %s", position, p)
        return p, out_of_bounds

    def _on_wall_visibility_changed(self, visible: bool) -> None:
        for balloon in self.balloons:
            # a charged balloon resting against the wall must be free to drift
            # once the wall goes away (and again when it comes back)
            if balloon.at_wall_position() and balloon.charge != 0:
                balloon.is_stopped = False
            if visible:
                clamped, out_of_bounds = self.clamp_to_bounds(balloon.position, balloon.width, balloon.height)
                if out_of_bounds:
                    balloon.set_position(clamped)
                    balloon.is_stopped = False

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Elapsed time in milliseconds. Non-positive frames are ignored;
                frames longer than MAX_DT_MS count as one nominal frame.
        """
        dt = float(dt)
        if dt <= 0:
            return
        if dt > MAX_DT_MS:
            dt = NOMINAL_DT_MS

        self.wall.step(self)
        for balloon in self.balloons:
            if balloon.is_visible:
                balloon.step(self, dt)
        self.time += dt

    def reset(self) -> None:
        """Reset the sweater, wall and balloons, then the display settings."""
        self.sweater.reset()
        self.wall.reset()
        for balloon in self.balloons:
            balloon.reset()
        self.show_charges = ShowCharges.ALL
        self.time = 0.0
        logger.debug("Model reset")

    def any_charged_balloon_touching_wall(self) -> bool:
        return any(b.touching_wall() and b.charge < 0 for b in self.balloons)

    def both_balloons_visible(self) -> bool:
        return all(b.is_visible for b in self.balloons)

    def balloons_adjacent(self) -> bool:
        """True if both balloons are visible and their centers are within one balloon width."""
        distance = norm(self.yellow_balloon.center - self.green_balloon.center)
        return distance < BALLOON_WIDTH and self.both_balloons_visible()
