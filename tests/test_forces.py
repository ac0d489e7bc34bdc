import numpy as np
import pytest
from static_sim.core import get_force, cap_magnitude


def test_inverse_square():
    """|F| = kqq / r^2, pointing from p2 to p1."""
    f = get_force((3, 4), (0, 0), 50.0)
    np.testing.assert_allclose(f, (3 * 50 / 125, 4 * 50 / 125))
    assert np.linalg.norm(f) == pytest.approx(50 / 25)


def test_negative_kqq_attracts():
    f = get_force((10, 0), (0, 0), -1.0)
    assert f[0] < 0
    assert f[1] == 0


def test_custom_power():
    f = get_force((2, 0), (0, 0), 1.0, power=2.35)
    assert f[0] == pytest.approx(2 ** -2.35)


def test_coincident_points():
    np.testing.assert_array_equal(get_force((5, 5), (5, 5), 100.0), (0.0, 0.0))


def test_cap_magnitude():
    capped = cap_magnitude(np.array([0.03, 0.04]))
    assert np.linalg.norm(capped) == pytest.approx(1e-2)
    np.testing.assert_allclose(capped / np.linalg.norm(capped), (0.6, 0.8))

    small = np.array([1e-3, 0.0])
    np.testing.assert_array_equal(cap_magnitude(small), small)
