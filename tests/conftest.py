from __future__ import annotations

import numpy as np
import pytest


def _brute_force_hypervolume(points: np.ndarray, reference: np.ndarray) -> float:
    """Union volume by coordinate compression; only for tiny sets."""
    points = np.asarray(points, dtype=float)
    reference = np.asarray(reference, dtype=float)
    if points.shape[0] == 0:
        return 0.0
    edges = [np.unique(np.append(points[:, k], reference[k])) for k in range(points.shape[1])]
    lowers = np.meshgrid(*[e[:-1] for e in edges], indexing="ij")
    widths = np.meshgrid(*[np.diff(e) for e in edges], indexing="ij")
    corners = np.stack([g.ravel() for g in lowers], axis=1)
    cell_volume = np.prod(np.stack([w.ravel() for w in widths], axis=1), axis=1)
    covered = np.any(np.all(points[None, :, :] <= corners[:, None, :], axis=2), axis=1)
    return float(cell_volume[covered].sum())


@pytest.fixture
def brute_force_hv():
    return _brute_force_hypervolume


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def linear_front_2d():
    f1 = np.linspace(0.0, 1.0, 11)
    return np.column_stack([f1, 1.0 - f1])


@pytest.fixture
def simplex_front_3d(rng):
    raw = rng.random((12, 3))
    return raw / raw.sum(axis=1, keepdims=True)
