# MIT License (see LICENSE)
"""
static_sim - electrostatic model of the "balloons and static electricity" lab.

Two balloons pick up charge by being rubbed on a sweater, then drift under
the electrostatic pull of the sweater, a neutral wall and each other.
Rendering, sound and input handling live outside this package; it only
exposes plain state and a per-frame step.

Main entry points:
    - SimulationModel: The world, owning the sweater, wall and balloons.
    - Balloon: A draggable, chargeable balloon.
    - Sweater, Wall: The two fixed charged bodies.
    - PointCharge: A single discrete charge.

Submodules:
    - core: Force law and charge-conservation checks.
    - play_area: Named regions and move directions.
    - logging_config: Optional logger setup for applications.

Example:
    from static_sim import SimulationModel

    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_dragged(True)
    balloon.drag_to((100, 100))
    model.step(16)
"""
from .model import SimulationModel, ShowCharges
from .balloon import Balloon, BalloonColor
from .sweater import Sweater
from .wall import Wall
from .charges import PointCharge, MovablePointCharge, Rect
from .play_area import BalloonDirection

__all__ = [
    # Simulation
    "SimulationModel",
    "ShowCharges",
    # Bodies
    "Balloon",
    "BalloonColor",
    "Sweater",
    "Wall",
    # Charges and geometry
    "PointCharge",
    "MovablePointCharge",
    "Rect",
    "BalloonDirection",
]
