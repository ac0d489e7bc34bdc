import numpy as np
from static_sim.model import SimulationModel
from static_sim.sweater import Sweater, CHARGE_PAIR_POSITIONS
from static_sim.core.invariants import total_charge, check_invariants


def _three_in_reach_layout():
    """
    57 charge pairs: three reachable from a balloon parked at (100, 100),
    the rest far off to the right.

    Activation rectangle for that balloon is x in (95, 150), y in (90, 332);
    minus charges sit at pair + (8, 8).
    """
    near = [(110, 120), (120, 200), (130, 300)]
    far = [(400 + (i % 9) * 10, 20 + (i // 9) * 10) for i in range(54)]
    return near + far


def test_default_layout_has_57_pairs():
    sweater = Sweater()
    assert len(CHARGE_PAIR_POSITIONS) == 57
    assert len(sweater.plus_charges) == len(sweater.minus_charges) == 57
    # minus charge is offset from its plus partner by one radius on each axis
    np.testing.assert_allclose(sweater.minus_charges[0].position, sweater.plus_charges[0].position + 8)
    assert sweater.net_charge == 0


def test_one_charge_per_call():
    """Three charges in reach, one call: exactly one moves."""
    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_position((100, 100))
    sweater = Sweater(charge_positions=_three_in_reach_layout())

    assert sweater.find_intersection(balloon)
    assert balloon.charge == -1
    assert sweater.net_charge == 1
    assert sweater.moved_count == 1
    assert sweater.minus_charges[0].moved, "first charge in layout order is picked"

    assert sweater.find_intersection(balloon)
    assert sweater.find_intersection(balloon)
    assert balloon.charge == -3
    assert sweater.net_charge == 3

    # nothing left in reach
    assert not sweater.find_intersection(balloon)
    assert balloon.charge == -3


def test_charges_do_not_move_spatially():
    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_position((100, 100))
    sweater = Sweater(charge_positions=_three_in_reach_layout())
    before = [c.position.copy() for c in sweater.minus_charges]

    sweater.find_intersection(balloon)

    for charge, pos in zip(sweater.minus_charges, before):
        np.testing.assert_array_equal(charge.position, pos)
        np.testing.assert_array_equal(charge.position, charge.default_position)


def test_rubbing_conserves_charge():
    """Scrub the balloon all over the sweater; charge is only ever moved."""
    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_dragged(True)

    for i in range(400):
        x = 20 + (i * 13) % 240
        y = (i * 37) % 283
        balloon.drag_to((x, y))
        model.step(16)

        assert -57 <= balloon.charge <= 0
        assert total_charge(model) == 0
        check_invariants(model)

    print("charge after rubbing:", balloon.charge)
    assert balloon.charge < 0
    assert model.sweater.net_charge == -balloon.charge


def test_reset_returns_all_charges():
    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_position((100, 100))
    sweater = Sweater(charge_positions=_three_in_reach_layout())
    sweater.find_intersection(balloon)
    sweater.find_intersection(balloon)

    sweater.reset()

    assert sweater.net_charge == 0
    assert not any(c.moved for c in sweater.minus_charges)


def test_charged_area():
    sweater = Sweater()
    assert sweater.charged_area.shape == (9, 2)
    assert sweater.in_charged_area(sweater.center)
    assert not sweater.in_charged_area((600.0, 200.0))
    assert not sweater.in_charged_area((177.5, 450.0))


def test_closest_unmoved_charge():
    model = SimulationModel()
    balloon = model.yellow_balloon
    balloon.set_position((100, 100))
    sweater = Sweater(charge_positions=_three_in_reach_layout())

    # activation rectangle center is (122.5, 211): the middle charge is nearest
    assert sweater.closest_unmoved_charge(balloon) is sweater.minus_charges[1]

    for c in sweater.minus_charges:
        c.moved = True
    assert sweater.closest_unmoved_charge(balloon) is None
