"""
Approximate hypervolume by Monte Carlo sampling (Karp-Luby estimator).

A box is drawn with probability proportional to its volume and a point is
sampled uniformly inside it. With c(x) the number of boxes covering x, the
mean of 1 / c(x) times the total box volume is an unbiased estimate of the
hypervolume. Since hv >= W / n, Chernoff bounds give a relative error below
epsilon with probability 1 - delta after O(n log(1/delta) / epsilon^2) samples.

Reference:
    K. Bringmann, T. Friedrich,
    Approximating the volume of unions and intersections of high-dimensional
    geometric objects, Computational Geometry, 2010.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..config import FPRASConfig
from ..exceptions import UnsupportedOperationError
from ..pareto import nondominated
from .base import HVAlgorithm


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class FPRAS(HVAlgorithm):
    """Randomized approximation of the total hypervolume; derived queries are not supported."""

    name = "fpras"

    def __init__(self, config: FPRASConfig | None = None, **kwargs) -> None:
        if config is not None and kwargs:
            raise TypeError("Pass either an FPRASConfig or keyword parameters, not both.")
        self.config = config if config is not None else FPRASConfig(**kwargs)

    def required_samples(self, n_points: int) -> int:
        cfg = self.config
        bound = math.ceil(3.0 * n_points * math.log(2.0 / cfg.delta) / cfg.epsilon**2)
        return max(1, min(bound, cfg.max_samples))

    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        if points.shape[0] == 0:
            return 0.0
        boxes = nondominated(points)
        volumes = np.prod(reference - boxes, axis=1)
        total = float(volumes.sum())
        if total <= 0.0:
            return 0.0

        cfg = self.config
        rng = np.random.default_rng(cfg.seed)
        probs = volumes / total
        n = boxes.shape[0]
        n_samples = self.required_samples(n)
        _logger().debug("fpras: %d boxes, %d samples (epsilon=%g, delta=%g)", n, n_samples, cfg.epsilon, cfg.delta)

        acc = 0.0
        drawn = 0
        while drawn < n_samples:
            size = min(cfg.batch_size, n_samples - drawn)
            chosen = rng.choice(n, size=size, p=probs)
            lower = boxes[chosen]
            samples = lower + rng.random((size, boxes.shape[1])) * (reference - lower)
            covered = np.all(boxes[None, :, :] <= samples[:, None, :], axis=2).sum(axis=1)
            acc += float(np.sum(1.0 / covered))
            drawn += size
        return total * acc / drawn

    def exclusive(self, index: int, points: np.ndarray, reference: np.ndarray) -> float:
        raise UnsupportedOperationError(self.name, "exclusive")

    def contributions(self, points: np.ndarray, reference: np.ndarray) -> np.ndarray:
        raise UnsupportedOperationError(self.name, "contributions")

    def least_contributor(self, points: np.ndarray, reference: np.ndarray) -> int:
        raise UnsupportedOperationError(self.name, "least_contributor")

    def greatest_contributor(self, points: np.ndarray, reference: np.ndarray) -> int:
        raise UnsupportedOperationError(self.name, "greatest_contributor")

    def __repr__(self) -> str:
        cfg = self.config
        return f"FPRAS(epsilon={cfg.epsilon}, delta={cfg.delta}, seed={cfg.seed})"


__all__ = ["FPRAS"]
