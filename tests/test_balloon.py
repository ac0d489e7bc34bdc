import numpy as np
import pytest
from static_sim.model import SimulationModel
from static_sim.balloon import JUMP_LANDMARKS
from static_sim.constants import MAX_FORCE
from static_sim.play_area import BalloonDirection


def test_dragged_balloon_ignores_physics():
    """Step never touches the position or velocity of a dragged balloon."""
    model = SimulationModel()
    b = model.yellow_balloon
    b.charge = -10
    model.sweater.net_charge = 10
    b.set_dragged(True)
    b.drag_to((450, 120))
    pos = b.position.copy()
    vel = b.velocity.copy()

    for _ in range(10):
        model.step(16)

    np.testing.assert_array_equal(b.position, pos)
    np.testing.assert_array_equal(b.velocity, vel)


def test_drag_over_sweater_picks_up_charge():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_dragged(True)
    b.drag_to((30, 150))
    model.step(16)

    assert b.charge == -1
    assert model.sweater.net_charge == 1
    assert len(b.visible_minus_charges()) == 5


def test_still_drag_does_not_pick_up():
    """Holding the balloon still over the sweater collects nothing once the speed window drains."""
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_dragged(True)
    b.drag_to((30, 150))
    model.step(16)
    for _ in range(5):
        model.step(16)
    charge = b.charge

    for _ in range(20):
        model.step(16)
    assert b.charge == charge


def test_sweater_force_mirror_symmetry():
    """Two equal balloons mirrored about the sweater center feel mirrored forces."""
    model = SimulationModel()
    yellow, green = model.yellow_balloon, model.green_balloon
    model.sweater.net_charge = 20
    yellow.charge = -10
    green.charge = -10

    cx, cy = model.sweater.center
    yellow.set_center((cx + 200, cy + 50))
    green.set_center((cx - 200, cy + 50))

    fy = yellow.sweater_force()
    fg = green.sweater_force()
    assert fy[0] < 0, "attracted toward the sweater"
    assert fy[0] == pytest.approx(-fg[0])
    assert fy[1] == pytest.approx(fg[1])


def test_balloon_repulsion():
    model = SimulationModel()
    yellow, green = model.yellow_balloon, model.green_balloon
    green.set_visible(True)

    np.testing.assert_array_equal(yellow.other_balloon_force(), (0.0, 0.0))

    yellow.charge = -10
    green.charge = -10
    f = yellow.other_balloon_force()
    # yellow sits right of green
    assert f[0] > 0
    np.testing.assert_allclose(f, -green.other_balloon_force())

    green.set_visible(False)
    np.testing.assert_array_equal(yellow.other_balloon_force(), (0.0, 0.0))


def test_total_force_is_capped():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_position((200, 150))
    b.charge = -57
    model.sweater.net_charge = 57
    assert np.linalg.norm(b.total_force()) <= MAX_FORCE + 1e-12


def test_wall_pull():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_position((544, 100))
    b.charge = -20
    np.testing.assert_allclose(b.total_force(), (0.003, 0.0))

    # too weakly charged
    b.charge = -5
    assert b.total_force()[0] <= 0


def test_free_balloon_drifts_to_sweater():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_position((400, 100))
    b.charge = -20
    model.sweater.net_charge = 20

    for _ in range(10):
        model.step(16)

    print("x after drift", b.position[0])
    assert b.position[0] < 400
    assert not b.is_stopped


def test_uncharged_balloon_comes_to_rest():
    model = SimulationModel()
    b = model.yellow_balloon
    start = b.position.copy()
    model.step(16)

    assert b.is_stopped
    np.testing.assert_array_equal(b.position, start)


def test_charged_balloon_settles_on_wall():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_position((534, 100))
    b.charge = -30
    model.sweater.net_charge = 30

    for _ in range(100):
        model.step(16)

    assert b.touching_wall()
    assert b.is_stopped
    np.testing.assert_array_equal(b.velocity, (0.0, 0.0))
    assert model.any_charged_balloon_touching_wall()


def test_release_wakes_both_balloons():
    model = SimulationModel()
    yellow, green = model.yellow_balloon, model.green_balloon
    yellow.is_stopped = True
    green.is_stopped = True

    yellow.set_dragged(True)
    assert not yellow.is_stopped
    yellow.set_dragged(False)
    assert not yellow.is_stopped
    assert not green.is_stopped
    assert yellow.time_since_release == 0.0


def test_directions():
    model = SimulationModel()
    b = model.yellow_balloon
    assert b.direction is None

    b.set_position(b.position + (10, 0))
    assert b.direction == BalloonDirection.RIGHT
    assert b.moving_horizontally() and b.moving_right()

    b.set_position(b.position + (-10, -10))
    assert b.direction == BalloonDirection.UP_LEFT
    assert b.moving_diagonally() and b.moving_left()

    # no move keeps the last direction
    b.set_position(b.position)
    assert b.direction == BalloonDirection.UP_LEFT


def test_progress_through_region():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_center((400, 250))
    b.set_center((420, 250))
    assert b.column == "LEFT_PLAY_AREA"
    assert b.progress_through_region() == pytest.approx((420 - 335) / 132)

    b.set_center((410, 250))
    assert b.progress_through_region() == pytest.approx(1 - (410 - 335) / 132)


def test_jump_to_wall():
    model = SimulationModel()
    b = model.yellow_balloon
    assert "AT_WALL" in JUMP_LANDMARKS
    out_of_bounds = b.jump_to("AT_WALL")
    assert not out_of_bounds
    assert b.center_x == 621
    assert b.touching_wall()


def test_jump_to_unknown_landmark():
    model = SimulationModel()
    with pytest.raises(ValueError):
        model.yellow_balloon.jump_to("AT_THE_MOON")


def test_region_queries():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_center((393, 250))
    assert b.near_sweater()
    assert b.landmark == "AT_NEAR_SWEATER"

    b.set_position((0, 100))
    assert b.at_left_edge()
    assert b.on_sweater()

    b.set_center(model.sweater.center)
    assert b.center_in_sweater_charged_area()


def test_reset():
    model = SimulationModel()
    b = model.yellow_balloon
    b.set_position((100, 100))
    b.charge = -4
    b.velocity[:] = (0.1, 0.2)
    b.set_dragged(True)

    b.reset()

    np.testing.assert_array_equal(b.position, b.default_position)
    np.testing.assert_array_equal(b.velocity, (0.0, 0.0))
    assert b.charge == 0
    assert not b.is_dragged
    assert b.direction is None
    assert len(b.visible_minus_charges()) == 4


def test_landmark_with_wall_hidden():
    model = SimulationModel()
    b = model.yellow_balloon
    model.wall.set_visible(False)
    b.set_center((596, 250))
    assert b.near_wall()
    assert b.landmark == "AT_NEAR_WALL"


def test_right_boundary_follows_wall():
    """Right boundary is the wall while it is shown, the play-area edge otherwise."""
    model = SimulationModel()
    b = model.yellow_balloon

    b.drag_to((1000, 100))
    assert b.center_x == 621
    assert b.is_touching_right_boundary()
    assert not b.is_touching_right_edge()
    assert b.is_touching_boundary()

    model.wall.set_visible(False)
    assert not b.is_touching_right_boundary()
    b.drag_to((1000, 100))
    assert b.is_touching_right_boundary()
    assert b.is_touching_right_edge()
    assert b.right == 768


def test_other_boundaries():
    model = SimulationModel()
    b = model.yellow_balloon
    assert not b.is_touching_boundary()

    b.drag_to((-50, -50))
    assert b.is_touching_left_boundary()
    assert b.is_touching_top_boundary()
    assert not b.is_touching_bottom_boundary()
    assert b.left == 0

    b.drag_to((200, 1000))
    assert b.is_touching_bottom_boundary()
    assert not b.is_touching_left_boundary()
    assert b.is_touching_boundary()


def test_sweater_touching_center():
    model = SimulationModel()
    b = model.yellow_balloon
    # center right of the sweater: use the left edge
    b.set_position((300, 100))
    np.testing.assert_allclose(b.sweater_touching_center(), (300, 211))

    b.set_center((200, 250))
    np.testing.assert_allclose(b.sweater_touching_center(), (200, 250))
