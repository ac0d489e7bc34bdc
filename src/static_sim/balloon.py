# MIT License (see LICENSE)
"""
Balloon model.

A balloon has a position (top-left corner), a velocity in pixels per
millisecond, and an integer charge between -MAX_BALLOON_CHARGE and 0. It
only ever gains negative charge, by being rubbed on the sweater.

Two modes own the balloon's position:
- Dragged: the input layer moves the balloon (set_position/drag_to). Each
  step measures the drag speed and, while the balloon is moving, asks the
  sweater to hand over a charge. Physics is skipped.
- Free: each step sums the forces from the sweater, the wall and the other
  balloon, integrates velocity and position, and clamps to the play area.
  A balloon that stops moving is marked stopped and is left alone until
  something disturbs it (a drag, a wall toggle, a visibility change).
"""
from __future__ import annotations
from enum import Enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from . import play_area
from .charges import PointCharge, Rect
from .constants import (
    FORCE_CONSTANT,
    K_COULOMB_WALL,
    WALL_FORCE_EXPONENT,
    WALL_PULL_CHARGE_DIVISOR,
    WALL_PULL_CHARGE_THRESHOLD,
    WALL_PULL_DISTANCE,
    WALL_PULL_FORCE,
    WALL_PULL_FORCE_DIVISOR,
)
from .core.forces import cap_magnitude, get_force
from .play_area import BalloonDirection
from .util import f64

if TYPE_CHECKING:
    from .model import SimulationModel

logger = logging.getLogger(__name__)

BALLOON_WIDTH = 134
BALLOON_HEIGHT = 222

# Number of drag-velocity samples averaged to decide whether the balloon is
# being rubbed.
VELOCITY_SAMPLES = 5

# Neutral plus/minus pairs always drawn on the balloon, relative to its
# top-left corner.
NEUTRAL_PAIR_POSITIONS: list[tuple[float, float]] = [(44, 50), (88, 50), (44, 140), (88, 140)]

# Where each picked-up minus charge is drawn, in pick-up order, relative to
# the balloon's top-left corner. Hugs the left side of the balloon.
PICKUP_POSITIONS: list[tuple[float, float]] = [
    (14, 70), (18, 60), (14, 90), (24, 130), (22, 120), (14, 79),
    (25, 140), (18, 108), (19, 50), (44, 150), (16, 100), (20, 80),
    (50, 160), (34, 140), (50, 20), (30, 30), (22, 72), (24, 105),
    (20, 110), (40, 150), (26, 110), (30, 115), (24, 87), (24, 60),
    (24, 40), (38, 24), (30, 80), (30, 50), (34, 82), (32, 130),
    (30, 108), (30, 50), (40, 94), (30, 100), (35, 90), (24, 95),
    (34, 100), (35, 40), (30, 60), (32, 72), (30, 105), (34, 140),
    (30, 120), (30, 130), (30, 85), (34, 77), (35, 90), (40, 85),
    (34, 90), (35, 50), (46, 34), (32, 72), (30, 105), (34, 140),
    (34, 120), (30, 60), (30, 85), (34, 77),
]

# Mean y of the picked-up charges; the balloon's charge is treated as
# sitting at this height when it pushes on the wall.
AVERAGE_CHARGE_Y = sum(p[1] for p in PICKUP_POSITIONS) / len(PICKUP_POSITIONS)

JUMP_LANDMARKS = ("AT_WALL", "AT_NEAR_WALL", "AT_NEAR_SWEATER", "AT_CENTER_PLAY_AREA")


class BalloonColor(str, Enum):
    YELLOW = "yellow"
    GREEN = "green"


class Balloon:
    """
    One of the two balloons.

    Attributes:
        model: Owning simulation model (non-owning handle back to it).
        index: Position of this balloon in model.balloons.
        color: Yellow or green.
        position: Top-left corner [x, y].
        velocity: [vx, vy] in pixels per millisecond.
        charge: Number of elementary charges held, in [-57, 0].
        is_dragged: True while the input layer owns the position.
        is_visible: Hidden balloons are not stepped and exert no force.
        is_stopped: True once a free balloon has come to rest.
        direction: Direction of the last position change, or None.
        drag_velocity: Instantaneous velocity during the last drag step.
        time_since_release: Milliseconds of free motion since the last drag.
    """
    width = BALLOON_WIDTH
    height = BALLOON_HEIGHT

    def __init__(
        self,
        model: "SimulationModel",
        index: int,
        x: float,
        y: float,
        color: BalloonColor,
        default_visible: bool = True,
    ) -> None:
        self.model = model
        self.index = index
        self.color = color
        self.default_position = f64((x, y))
        self.default_position.setflags(write=False)
        self.default_visible = default_visible

        r = PointCharge.RADIUS
        self.plus_charges = [PointCharge(p) for p in NEUTRAL_PAIR_POSITIONS]
        self.minus_charges = [PointCharge((px + r, py + r)) for px, py in NEUTRAL_PAIR_POSITIONS]
        self.minus_charges += [PointCharge(p) for p in PICKUP_POSITIONS]

        self.reset()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def other(self) -> "Balloon":
        return self.model.balloons[1 - self.index]

    @property
    def center(self) -> np.ndarray:
        return self.position + (self.width / 2, self.height / 2)

    @property
    def center_x(self) -> float:
        return float(self.position[0] + self.width / 2)

    @property
    def center_y(self) -> float:
        return float(self.position[1] + self.height / 2)

    @property
    def charge_center(self) -> np.ndarray:
        """Center x, and the mean height of the picked-up charges."""
        return f64((self.center_x, self.position[1] + AVERAGE_CHARGE_Y))

    @property
    def bounds(self) -> Rect:
        x, y = float(self.position[0]), float(self.position[1])
        return Rect(x, y, x + self.width, y + self.height)

    def is_charged(self) -> bool:
        return self.charge < 0

    def visible_minus_charges(self) -> list[PointCharge]:
        """Neutral minus charges plus one pick-up charge per unit of charge."""
        return self.minus_charges[:len(NEUTRAL_PAIR_POSITIONS) - self.charge]

    # ------------------------------------------------------------------
    # Input layer entry points
    # ------------------------------------------------------------------

    def set_position(self, position: np.ndarray | tuple[float, float]) -> None:
        """
        Move the balloon, recording the direction of the move.

        The caller is responsible for keeping the position in bounds; use
        drag_to() to clamp first.
        """
        new_position = f64(position)
        direction = play_area.direction_of(new_position - self.position)
        if direction is not None:
            self.direction = direction
        self.position = new_position

    def set_center(self, center: np.ndarray | tuple[float, float]) -> None:
        self.set_position(f64(center) - (self.width / 2, self.height / 2))

    def drag_to(self, position: np.ndarray | tuple[float, float]) -> bool:
        """
        Clamp position to the play area and move there.

        Returns:
            True if the requested position was out of bounds.
        """
        clamped, out_of_bounds = self.model.clamp_to_bounds(position, self.width, self.height)
        self.set_position(clamped)
        return out_of_bounds

    def jump_to(self, landmark: str) -> bool:
        """
        Move the balloon center horizontally to a named landmark.

        Args:
            landmark: One of JUMP_LANDMARKS.

        Returns:
            True if the target had to be clamped into the play area.
        """
        if landmark not in JUMP_LANDMARKS:
            raise ValueError(f"Unknown jump landmark: {landmark}")
        x = play_area.X_POSITIONS[landmark] - self.width / 2
        return self.drag_to((x, self.position[1]))

    def set_dragged(self, dragged: bool) -> None:
        dragged = bool(dragged)
        if dragged == self.is_dragged:
            return
        self.is_dragged = dragged
        if dragged:
            self.velocity = np.zeros(2, dtype=np.float64)
            self.is_stopped = False
        else:
            self.time_since_release = 0.0
            # released charge may push or pull on the other balloon too
            for balloon in self.model.balloons:
                balloon.is_stopped = False

    def set_visible(self, visible: bool) -> None:
        self.is_visible = bool(visible)
        self.is_stopped = False

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, model: "SimulationModel", dt: float) -> None:
        """
        Advance the balloon by dt milliseconds.

        Dragged balloons only collect charge; stopped balloons are left alone.
        """
        if self.is_dragged:
            self.drag_balloon(model, dt)
        elif not self.is_stopped:
            self.apply_force(dt)
            self.time_since_release += dt
        self.old_position = self.position.copy()

    def drag_balloon(self, model: "SimulationModel", dt: float) -> bool:
        """
        Record the drag speed and try to pick up a charge.

        The squared per-axis velocities of the last VELOCITY_SAMPLES steps are
        averaged; any movement in that window counts as rubbing.

        Returns:
            True if a charge was picked up.
        """
        velocity = (self.position - self.old_position) / dt
        self._speed_samples[self._sample_index] = velocity * velocity
        self._sample_index = (self._sample_index + 1) % VELOCITY_SAMPLES
        average = self._speed_samples.mean(axis=0)
        speed = float(np.hypot(average[0], average[1]))
        self.drag_velocity = velocity

        if speed > 0:
            return model.sweater.find_intersection(self)
        return False

    def apply_force(self, dt: float) -> None:
        """
        Integrate one free-motion step.

        Semi-explicit Euler: the position advances with the velocity from the
        start of the step. A balloon whose center sits on the sweater's
        charged area sticks to it.
        """
        model = self.model
        if model.sweater.in_charged_area(self.center):
            new_velocity = np.zeros(2, dtype=np.float64)
            new_position = self.position.copy()
        else:
            force = self.total_force()
            new_velocity = self.velocity + force * dt
            new_position = self.position + self.velocity * dt

        new_position, _ = model.clamp_to_bounds(new_position, self.width, self.height)
        bounds = model.bounds
        max_x = bounds.max_x - self.width
        max_y = bounds.max_y - self.height

        if new_position[0] >= max_x and new_velocity[0] > 0:
            new_velocity[0] = 0.0
            if model.wall.is_visible and new_position[0] + self.width == model.wall_boundary_x:
                new_velocity[1] = 0.0
        if new_position[0] <= bounds.min_x and new_velocity[0] < 0:
            new_velocity[0] = 0.0
        if new_position[1] >= max_y and new_velocity[1] > 0:
            new_velocity[1] = 0.0
        if new_position[1] <= bounds.min_y and new_velocity[1] < 0:
            new_velocity[1] = 0.0

        if np.array_equal(new_position, self.position) and not new_velocity.any():
            self.is_stopped = True
            logger.debug("%s balloon came to rest at %s", self.color.value, new_position)

        self.set_position(new_position)
        self.velocity = new_velocity

    def total_force(self) -> np.ndarray:
        """
        Net force on a free balloon.

        A strongly charged balloon close to the wall is simply pulled onto it
        with a fixed force. Otherwise the sweater and the other balloon act on
        it, capped at MAX_FORCE.
        """
        wall = self.model.wall
        if wall.is_visible and self.charge < WALL_PULL_CHARGE_THRESHOLD:
            gap = wall.x - self.position[0] - self.width
            if gap <= WALL_PULL_DISTANCE + self.charge / WALL_PULL_CHARGE_DIVISOR:
                return f64((-WALL_PULL_FORCE * self.charge / WALL_PULL_FORCE_DIVISOR, 0.0))

        return cap_magnitude(self.sweater_force() + self.other_balloon_force())

    def sweater_force(self) -> np.ndarray:
        """Attraction to the sweater, using its aggregate net charge."""
        sweater = self.model.sweater
        return get_force(sweater.center, self.center, -FORCE_CONSTANT * sweater.net_charge * self.charge)

    def other_balloon_force(self) -> np.ndarray:
        """Repulsion from the other balloon; zero while dragged or if either is hidden."""
        other = self.other
        if self.is_dragged or not self.is_visible or not other.is_visible:
            return np.zeros(2, dtype=np.float64)
        return get_force(self.center, other.center, FORCE_CONSTANT * self.charge * other.charge)

    def force_to_closest_wall_charge(self) -> np.ndarray:
        closest = self.model.wall.closest_charge_to(self)
        return get_force(
            closest.position,
            self.center,
            K_COULOMB_WALL * self.charge * PointCharge.CHARGE,
            WALL_FORCE_EXPONENT,
        )

    def inducing_charge(self) -> bool:
        """True if the balloon is visibly pushing electrons around in the wall."""
        if not (self.model.wall.is_visible and self.is_visible):
            return False
        return self.model.wall.force_indicates_induced_charge(self.force_to_closest_wall_charge())

    # ------------------------------------------------------------------
    # Region queries
    # ------------------------------------------------------------------

    def at_wall_position(self) -> bool:
        """Right edge flush with where the wall stands, whether or not it is shown."""
        return self.position[0] + self.width == self.model.wall_boundary_x

    def touching_wall(self) -> bool:
        return self.model.wall.is_visible and self.at_wall_position()

    def at_left_edge(self) -> bool:
        return self.position[0] == 0

    def at_right_edge(self) -> bool:
        """Pressed against the far right of the play area (wall hidden)."""
        return self.position[0] + self.width == self.model.width

    @property
    def left(self) -> float:
        return float(self.position[0])

    @property
    def right(self) -> float:
        return float(self.position[0] + self.width)

    def sweater_touching_center(self) -> np.ndarray:
        """
        Point where the balloon meets the sweater.

        The left edge (at center height) once the center is past the
        sweater's right side, otherwise the center.
        """
        sweater = self.model.sweater
        x = self.left if self.center_x > sweater.x + sweater.width else self.center_x
        return f64((x, self.center_y))

    def is_touching_boundary(self) -> bool:
        return (
            self.is_touching_right_boundary() or self.is_touching_left_boundary()
            or self.is_touching_bottom_boundary() or self.is_touching_top_boundary()
        )

    def is_touching_right_boundary(self) -> bool:
        """Against the wall when it is shown, otherwise against the right edge."""
        if self.model.wall.is_visible:
            return self.center_x == play_area.X_POSITIONS["AT_WALL"]
        return self.is_touching_right_edge()

    def is_touching_right_edge(self) -> bool:
        return self.center_x == play_area.X_BOUNDARY_POSITIONS["AT_RIGHT_EDGE"]

    def is_touching_left_boundary(self) -> bool:
        return self.center_x == play_area.X_BOUNDARY_POSITIONS["AT_LEFT_EDGE"]

    def is_touching_top_boundary(self) -> bool:
        return self.center_y == play_area.Y_BOUNDARY_POSITIONS["AT_TOP"]

    def is_touching_bottom_boundary(self) -> bool:
        return self.center_y == play_area.Y_BOUNDARY_POSITIONS["AT_BOTTOM"]

    def on_sweater(self) -> bool:
        return self.model.sweater.bounds.intersects(self.bounds)

    def center_in_sweater_charged_area(self) -> bool:
        return self.model.sweater.in_charged_area(self.center)

    def near_sweater(self) -> bool:
        return play_area.LANDMARK_RANGES["AT_NEAR_SWEATER"].contains(self.center_x)

    def near_wall(self) -> bool:
        return play_area.LANDMARK_RANGES["AT_NEAR_WALL"].contains(self.center_x)

    def near_right_edge(self) -> bool:
        return play_area.LANDMARK_RANGES["AT_NEAR_RIGHT_EDGE"].contains(self.center_x)

    def very_close_to_object(self) -> bool:
        x = self.center_x
        return any(
            play_area.LANDMARK_RANGES[name].contains(x)
            for name in ("AT_VERY_CLOSE_TO_SWEATER", "AT_VERY_CLOSE_TO_WALL", "AT_VERY_CLOSE_TO_RIGHT_EDGE")
        )

    def in_center_play_area(self) -> bool:
        return play_area.COLUMN_RANGES["CENTER_PLAY_AREA"].contains(self.center_x)

    @property
    def column(self) -> str:
        return play_area.column_of(self.center, self.model.wall.is_visible)

    @property
    def row(self) -> str:
        return play_area.row_of(self.center)

    @property
    def landmark(self) -> str | None:
        return play_area.landmark_of(self.center, self.model.wall.is_visible)

    def moving_horizontally(self) -> bool:
        return self.direction in (BalloonDirection.LEFT, BalloonDirection.RIGHT)

    def moving_vertically(self) -> bool:
        return self.direction in (BalloonDirection.UP, BalloonDirection.DOWN)

    def moving_diagonally(self) -> bool:
        return self.direction is not None and not self.direction.is_relative

    def moving_right(self) -> bool:
        return self.direction in (BalloonDirection.RIGHT, BalloonDirection.UP_RIGHT, BalloonDirection.DOWN_RIGHT)

    def moving_left(self) -> bool:
        return self.direction in (BalloonDirection.LEFT, BalloonDirection.UP_LEFT, BalloonDirection.DOWN_LEFT)

    def progress_through_region(self) -> float:
        """
        Fraction of the current column (or row) already crossed, in [0, 1].

        Measured in the direction of travel: horizontal and diagonal moves use
        the column, vertical moves the row. Returns 0 when not moving.
        """
        if self.moving_horizontally() or self.moving_diagonally():
            region = play_area.COLUMN_RANGES[play_area.column_of(self.center, wall_visible=False)]
            offset = self.center_x - region.min
        elif self.moving_vertically():
            region = play_area.ROW_RANGES[self.row]
            offset = self.center_y - region.min
        else:
            return 0.0

        progress = offset / region.length
        if self.direction in (BalloonDirection.LEFT, BalloonDirection.UP):
            progress = 1 - progress
        assert progress >= 0, "no progress through play area region was determined"
        return progress

    def reset(self, keep_visibility: bool = False) -> None:
        """Back to the default position, at rest and uncharged."""
        self.position = self.default_position.copy()
        self.velocity = np.zeros(2, dtype=np.float64)
        self.charge = 0
        self.is_dragged = False
        self.is_stopped = False
        if not keep_visibility:
            self.is_visible = self.default_visible
        self.direction: BalloonDirection | None = None
        self.drag_velocity = np.zeros(2, dtype=np.float64)
        self.old_position = self.position.copy()
        self.time_since_release = 0.0
        self._speed_samples = np.zeros((VELOCITY_SAMPLES, 2), dtype=np.float64)
        self._sample_index = 0
