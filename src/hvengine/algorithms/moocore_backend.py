"""
Hypervolume algorithm backed by the MooCore C library.

Requires the [compute] extra (moocore>=0.1.4). The registry imports this
module lazily so ``import hvengine`` works on a minimal install.
"""

from __future__ import annotations

import moocore
import numpy as np

from .base import HVAlgorithm


class MooCore(HVAlgorithm):
    """Delegates total and per-point hypervolume to ``moocore``."""

    name = "moocore"

    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        if points.shape[0] == 0:
            return 0.0
        return float(moocore.hypervolume(points, ref=reference))

    def contributions(self, points: np.ndarray, reference: np.ndarray) -> np.ndarray:
        if points.shape[0] == 0:
            return np.empty(0, dtype=float)
        return np.asarray(moocore.hv_contributions(points, ref=reference), dtype=float)

    def exclusive(self, index: int, points: np.ndarray, reference: np.ndarray) -> float:
        return float(self.contributions(points, reference)[index])


__all__ = ["MooCore"]
