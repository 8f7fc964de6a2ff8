"""
Exact hypervolume for three objectives.

Dimension-sweep of Beume et al. (2009): points are visited in increasing order
of the third objective while a 2D staircase of the (f1, f2) projections is
maintained. Between consecutive f3 values the volume grows by the staircase
area times the slab height.

Reference:
    N. Beume, C. M. Fonseca, M. Lopez-Ibanez, L. Paquete, J. Vahrenhold,
    On the Complexity of Computing the Hypervolume Indicator,
    IEEE Transactions on Evolutionary Computation, 2009.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right

import numpy as np

from .base import HVAlgorithm


class _Staircase:
    """Non-dominated 2D points kept sorted by f1 (so f2 is strictly decreasing)."""

    def __init__(self, ref_x: float, ref_y: float) -> None:
        self.ref_x = ref_x
        self.ref_y = ref_y
        self.xs: list[float] = []
        self.ys: list[float] = []
        self.area = 0.0

    def insert(self, x: float, y: float) -> None:
        xs, ys = self.xs, self.ys
        # dominated by the last staircase point with f1 <= x
        pos_r = bisect_right(xs, x)
        if pos_r > 0 and ys[pos_r - 1] <= y:
            return

        pos = bisect_left(xs, x)
        cur_x = x
        cur_h = ys[pos - 1] if pos > 0 else self.ref_y
        gained = 0.0
        end = pos
        while end < len(xs) and ys[end] >= y:
            gained += (xs[end] - cur_x) * (cur_h - y)
            cur_x = xs[end]
            cur_h = ys[end]
            end += 1
        right = xs[end] if end < len(xs) else self.ref_x
        gained += (right - cur_x) * (cur_h - y)

        # points in [pos, end) are dominated by (x, y)
        xs[pos:end] = [x]
        ys[pos:end] = [y]
        self.area += gained


class Beume3D(HVAlgorithm):
    """Sweep over the third objective with an incrementally updated 2D front."""

    name = "beume3d"

    def validate(self, points: np.ndarray, reference: np.ndarray) -> None:
        self._require_dimension(reference, 3)
        super().validate(points, reference)

    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        n = points.shape[0]
        if n == 0:
            return 0.0
        # reorder the working copy in place by the third objective
        points[:] = points[np.argsort(points[:, 2], kind="stable")]

        front = _Staircase(float(reference[0]), float(reference[1]))
        volume = 0.0
        prev_z = float(points[0, 2])
        for x, y, z in points.tolist():
            volume += front.area * (z - prev_z)
            front.insert(x, y)
            prev_z = z
        volume += front.area * (float(reference[2]) - prev_z)
        return float(volume)


__all__ = ["Beume3D"]
