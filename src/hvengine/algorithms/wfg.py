"""
Exact hypervolume for any number of objectives (WFG).

The hypervolume is the sum of the exclusive volumes of the points taken in a
fixed order, each against the points after it:

    hv(S) = sum_k [ box(p_k) - hv(limit(S[k+1:], p_k)) ]

where ``limit(S, p)`` replaces every q in S by max(p, q) and drops dominated
points. Processing points in decreasing order of the last objective makes every
limit set share p_k's last coordinate, so the recursion continues one
dimension lower. Two objectives are handled by the 2D sweep.

Reference:
    L. While, L. Bradstreet, L. Barone,
    A Fast Way of Calculating Exact Hypervolumes,
    IEEE Transactions on Evolutionary Computation, 2012.
"""

from __future__ import annotations

import numpy as np

from ..pareto import nondominated
from .base import HVAlgorithm
from .native2d import hv2d


def _box(point: np.ndarray, reference: np.ndarray) -> float:
    return float(np.prod(reference - point))


def _limit_set(points: np.ndarray, bound: np.ndarray) -> np.ndarray:
    if points.shape[0] == 0:
        return points
    return nondominated(np.maximum(points, bound))


def _wfg(points: np.ndarray, reference: np.ndarray) -> float:
    n, d = points.shape
    if n == 0:
        return 0.0
    if n == 1:
        return _box(points[0], reference)
    if d == 2:
        return hv2d(points, reference)

    points = points[np.argsort(-points[:, -1], kind="stable")]
    total = 0.0
    for k in range(n):
        p = points[k]
        inner = _limit_set(points[k + 1 :], p)
        slab = float(reference[-1] - p[-1])
        total += _box(p, reference) - slab * _wfg(inner[:, :-1], reference[:-1])
    return total


def wfg_hypervolume(points: np.ndarray, reference: np.ndarray) -> float:
    """Exact hypervolume of ``points`` (any dimension >= 2); ``points`` is left untouched."""
    if points.shape[0] == 0:
        return 0.0
    return float(_wfg(nondominated(points), reference))


class WFG(HVAlgorithm):
    """General-dimension exact algorithm; cost grows exponentially with the number of objectives."""

    name = "wfg"

    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        return wfg_hypervolume(points, reference)

    def exclusive(self, index: int, points: np.ndarray, reference: np.ndarray) -> float:
        p = points[index]
        others = np.delete(points, index, axis=0)
        return _box(p, reference) - wfg_hypervolume(_limit_set(others, p), reference)

    def contributions(self, points: np.ndarray, reference: np.ndarray) -> np.ndarray:
        return np.array([self.exclusive(i, points, reference) for i in range(points.shape[0])], dtype=float)


__all__ = ["WFG", "wfg_hypervolume"]
