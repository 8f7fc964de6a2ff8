"""
Exact hypervolume for two objectives.

Sorting by the first objective turns the union of rectangles into a staircase
whose area is a single sweep, O(n log n).
"""

from __future__ import annotations

import numpy as np

from .base import HVAlgorithm


def _sweep_sorted(points: np.ndarray, reference: np.ndarray) -> float:
    # points sorted by (f1, f2); each point adds the strip below the running f2 minimum
    ys = points[:, 1]
    prev_min = np.minimum.accumulate(np.concatenate(([reference[1]], ys)))[:-1]
    widths = reference[0] - points[:, 0]
    heights = np.maximum(prev_min - ys, 0.0)
    return float(np.dot(widths, heights))


def hv2d(points: np.ndarray, reference: np.ndarray) -> float:
    """Hypervolume of a 2D point set; ``points`` is left untouched."""
    if points.shape[0] == 0:
        return 0.0
    order = np.lexsort((points[:, 1], points[:, 0]))
    return _sweep_sorted(points[order], reference)


class Native2D(HVAlgorithm):
    """Sweep-line algorithm for 2-dimensional fronts."""

    name = "native2d"

    def validate(self, points: np.ndarray, reference: np.ndarray) -> None:
        self._require_dimension(reference, 2)
        super().validate(points, reference)

    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        if points.shape[0] == 0:
            return 0.0
        # reorder the working copy in place
        points[:] = points[np.lexsort((points[:, 1], points[:, 0]))]
        return _sweep_sorted(points, reference)

    def contributions(self, points: np.ndarray, reference: np.ndarray) -> np.ndarray:
        n = points.shape[0]
        out = np.zeros(n, dtype=float)
        if n == 0:
            return out
        order = np.lexsort((points[:, 1], points[:, 0]))
        ys_sorted = points[order, 1]
        prev_min = np.minimum.accumulate(np.concatenate(([np.inf], ys_sorted)))[:-1]
        # dominated points and repeats contribute nothing
        front = order[ys_sorted < prev_min]

        fx = points[front, 0]
        fy = points[front, 1]
        right = np.append(fx[1:], reference[0])
        upper = np.insert(fy[:-1], 0, reference[1])

        xs = points[:, 0]
        ys = points[:, 1]
        for k, idx in enumerate(front):
            area = (right[k] - fx[k]) * (upper[k] - fy[k])
            if area <= 0.0:
                continue
            # points sharing this front member's exclusive cell, all weakly dominated by it
            inside = (xs < right[k]) & (ys < upper[k])
            inside[idx] = False
            if inside.any():
                local_ref = np.array([right[k], upper[k]])
                area -= hv2d(points[inside], local_ref)
            out[idx] = max(area, 0.0)
        return out

    def exclusive(self, index: int, points: np.ndarray, reference: np.ndarray) -> float:
        return float(self.contributions(points, reference)[index])


__all__ = ["Native2D", "hv2d"]
