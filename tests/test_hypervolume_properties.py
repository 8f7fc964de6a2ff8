from __future__ import annotations

import numpy as np
import pytest

from hvengine import Hypervolume
from hvengine.algorithms import WFG, Beume3D, Native2D


def _random_front(rng, n, d):
    raw = rng.random((n, d)) + 0.05
    return raw / raw.sum(axis=1, keepdims=True)


@pytest.mark.parametrize("n_obj", [2, 3, 4])
def test_contribution_consistency(rng, n_obj):
    points = _random_front(rng, 8, n_obj)
    ref = np.full(n_obj, 1.0)
    hv = Hypervolume(points)
    total = hv.compute(ref)
    for i in range(points.shape[0]):
        reduced = Hypervolume(np.delete(points, i, axis=0)).compute(ref)
        assert hv.exclusive(i, ref) == pytest.approx(total - reduced, abs=1e-12)


@pytest.mark.parametrize("n_obj", [2, 3, 4])
def test_extremum_agreement(rng, n_obj):
    points = _random_front(rng, 9, n_obj)
    ref = np.full(n_obj, 1.0)
    hv = Hypervolume(points)
    contrib = np.array([hv.exclusive(i, ref) for i in range(points.shape[0])])
    least = hv.least_contributor(ref)
    greatest = hv.greatest_contributor(ref)
    assert np.all(contrib[least] <= contrib + 1e-12)
    assert np.all(contrib[greatest] >= contrib - 1e-12)


@pytest.mark.parametrize("n_obj", [2, 3, 4])
def test_monotonicity_under_improvement(rng, n_obj):
    points = rng.random((10, n_obj))
    ref = np.full(n_obj, 1.0)
    before = Hypervolume(points).compute(ref)
    for i in range(points.shape[0]):
        improved = points.copy()
        improved[i] *= 0.9
        assert Hypervolume(improved).compute(ref) >= before - 1e-12


@pytest.mark.parametrize("epsilon", [0.0, 0.25, 3.0])
def test_nadir_domination(rng, epsilon):
    points = rng.random((12, 3)) * 10.0
    nadir = Hypervolume(points).get_nadir_point(epsilon)
    assert np.all(nadir >= points.max(axis=0) + epsilon - 1e-12)
    if epsilon > 0.0:
        assert np.all(nadir > points.max(axis=0))


def test_specialized_algorithms_agree_with_wfg(rng):
    pts2 = rng.random((25, 2))
    pts3 = rng.random((25, 3))
    hv2 = Hypervolume(pts2)
    hv3 = Hypervolume(pts3)
    assert hv2.compute([1.0, 1.0], Native2D()) == pytest.approx(hv2.compute([1.0, 1.0], WFG()))
    assert hv3.compute([1.0, 1.0, 1.0], Beume3D()) == pytest.approx(hv3.compute([1.0, 1.0, 1.0], WFG()))


def test_specialized_contributions_agree_with_wfg(rng):
    pts2 = _random_front(rng, 10, 2)
    pts3 = _random_front(rng, 10, 3)
    np.testing.assert_allclose(
        Hypervolume(pts2).contributions([1.0, 1.0]),
        Hypervolume(pts2).contributions([1.0, 1.0], WFG()),
        atol=1e-12,
    )
    np.testing.assert_allclose(
        Hypervolume(pts3).contributions([1.0, 1.0, 1.0]),
        Hypervolume(pts3).contributions([1.0, 1.0, 1.0], WFG()),
        atol=1e-12,
    )


def test_matches_bruteforce(rng, brute_force_hv):
    for n_obj in (2, 3, 4):
        points = rng.random((6, n_obj))
        ref = np.full(n_obj, 1.2)
        assert Hypervolume(points).compute(ref) == pytest.approx(brute_force_hv(points, ref))
