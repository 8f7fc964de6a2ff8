import numpy as np
import pytest

from hvengine.algorithms.beume3d import Beume3D
from hvengine.algorithms.native2d import Native2D
from hvengine.algorithms.wfg import WFG, wfg_hypervolume


def test_wfg_unit_hypercube():
    assert WFG().compute(np.zeros((1, 4)), np.ones(4)) == pytest.approx(1.0)


def test_wfg_two_overlapping_4d_boxes():
    points = np.array([[0.0, 0.0, 0.0, 1.0], [1.0, 1.0, 1.0, 0.0]])
    # 8 + 2 - 1 overlap
    assert WFG().compute(points, np.full(4, 2.0)) == pytest.approx(9.0)


def test_wfg_matches_native2d(linear_front_2d):
    ref = np.array([1.2, 1.3])
    expected = Native2D().compute(linear_front_2d.copy(), ref)
    assert WFG().compute(linear_front_2d, ref) == pytest.approx(expected)


def test_wfg_matches_beume3d(simplex_front_3d):
    ref = np.array([1.0, 1.0, 1.0])
    expected = Beume3D().compute(simplex_front_3d.copy(), ref)
    assert WFG().compute(simplex_front_3d, ref) == pytest.approx(expected)


@pytest.mark.parametrize("n_obj", [4, 5])
def test_wfg_matches_bruteforce(rng, brute_force_hv, n_obj):
    points = rng.random((7, n_obj))
    ref = np.full(n_obj, 1.0)
    assert wfg_hypervolume(points, ref) == pytest.approx(brute_force_hv(points, ref))


def test_wfg_leaves_input_untouched(rng):
    points = rng.random((6, 4))
    before = points.copy()
    WFG().compute(points, np.ones(4))
    np.testing.assert_array_equal(points, before)


def test_wfg_exclusive_matches_difference(rng, brute_force_hv):
    points = rng.random((6, 4))
    ref = np.ones(4)
    total = brute_force_hv(points, ref)
    algo = WFG()
    for i in range(points.shape[0]):
        expected = total - brute_force_hv(np.delete(points, i, axis=0), ref)
        assert algo.exclusive(i, points, ref) == pytest.approx(expected, abs=1e-12)


def test_wfg_exclusive_of_repeated_point_is_zero():
    points = np.array([[0.2, 0.3, 0.4, 0.5], [0.2, 0.3, 0.4, 0.5], [0.6, 0.1, 0.1, 0.1]])
    algo = WFG()
    ref = np.ones(4)
    assert algo.exclusive(0, points, ref) == pytest.approx(0.0)
    assert algo.exclusive(1, points, ref) == pytest.approx(0.0)
    assert algo.least_contributor(points, ref) == 0
    assert algo.greatest_contributor(points, ref) == 2
