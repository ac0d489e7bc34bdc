# MIT License (see LICENSE)
"""
Calibration constants for the electrostatic model.

These are not physical constants. They are tuned for on-screen motion at
play-area scale (pixels and milliseconds) and must not be "corrected" to
SI inverse-square physics.
"""
from __future__ import annotations

# Constant used for the wall-charge displacement and the induced-charge test.
K_COULOMB_WALL: float = 10000.0

# Exponent of the distance term for wall interactions, F ∝ 1 / r^2.35.
# Chosen empirically; the plain inverse-square law looks wrong at this scale.
WALL_FORCE_EXPONENT: float = 2.35

# Exponent used for balloon/sweater and balloon/balloon forces.
DEFAULT_FORCE_EXPONENT: float = 2.0

# Coupling constant for balloon/sweater and balloon/balloon forces.
FORCE_CONSTANT: float = 0.05

# Largest number of elementary charges a balloon can carry.
MAX_BALLOON_CHARGE: int = 57

# Cap on the total force magnitude so a balloon cannot cross the screen in
# a single step.
MAX_FORCE: float = 1e-2

# Short-range wall pull: a balloon with charge below WALL_PULL_CHARGE_THRESHOLD
# that comes within WALL_PULL_DISTANCE + charge / WALL_PULL_CHARGE_DIVISOR of
# the wall is pulled towards it with a fixed force.
WALL_PULL_CHARGE_THRESHOLD: int = -5
WALL_PULL_DISTANCE: float = 40.0
WALL_PULL_CHARGE_DIVISOR: float = 8.0
WALL_PULL_FORCE: float = 0.003
WALL_PULL_FORCE_DIVISOR: float = 20.0

# Force magnitude above which the balloon is considered to induce charge
# in the wall.
INDUCED_CHARGE_FORCE_THRESHOLD: float = 2.0

# Frame timing, in milliseconds. Any frame longer than MAX_DT_MS (tab switch,
# debugger pause) is replaced by one nominal 60 fps frame.
MAX_DT_MS: float = 500.0
NOMINAL_DT_MS: float = 1000.0 / 60.0
