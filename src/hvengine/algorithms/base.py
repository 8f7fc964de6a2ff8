from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..exceptions import InvalidInputError


class HVAlgorithm(ABC):
    """
    Interface for hypervolume algorithms.

    Algorithms work on minimization problems: every point must weakly
    dominate the reference point. ``compute`` may reorder or overwrite the
    ``points`` array it receives; the engine decides whether that array is a
    snapshot or its own storage.

    Subclasses implement ``compute`` and may override the derived queries
    (``exclusive``, ``contributions``, ``least_contributor`` and
    ``greatest_contributor``) with faster dedicated methods.
    """

    name: str = "base"

    # -------- Preconditions --------

    def validate(self, points: np.ndarray, reference: np.ndarray) -> None:
        """
        Verify algorithm-specific preconditions before computing.

        Raises:
            InvalidInputError: if the reference point is invalid for ``points``.
        """
        self.assert_minimisation(points, reference)

    @staticmethod
    def assert_minimisation(points: np.ndarray, reference: np.ndarray) -> None:
        """Every point must weakly dominate the reference point and differ from it."""
        outside = np.any(points > reference, axis=1)
        equal = np.all(points == reference, axis=1)
        bad = np.flatnonzero(outside | equal)
        if bad.size:
            idx = int(bad[0])
            raise InvalidInputError(
                "Reference point is invalid: another point seems to be outside the reference point boundary, or is equal to it.",
                suggestion="Use a reference point that is worse than every point in every objective, e.g. the nadir point",
                details={"index": idx, "point": points[idx].tolist(), "reference": reference.tolist()},
            )

    def _require_dimension(self, reference: np.ndarray, dim: int) -> None:
        if reference.shape[0] != dim:
            raise InvalidInputError(
                f"Algorithm '{self.name}' works only with {dim}-dimensional points.",
                details={"expected": dim, "actual": int(reference.shape[0]), "algorithm": self.name},
            )

    # -------- Queries --------

    @abstractmethod
    def compute(self, points: np.ndarray, reference: np.ndarray) -> float:
        """Return the hypervolume dominated by ``points`` and bounded by ``reference``."""

    def exclusive(self, index: int, points: np.ndarray, reference: np.ndarray) -> float:
        """
        Hypervolume contributed only by ``points[index]``.

        Computed as hv(points) - hv(points without index).
        """
        without = np.delete(points, index, axis=0)
        total = self.compute(points, reference)
        if without.shape[0] == 0:
            return total
        return total - self.compute(without, reference)

    def contributions(self, points: np.ndarray, reference: np.ndarray) -> np.ndarray:
        """Exclusive contribution of every point, in the order of ``points``."""
        n = points.shape[0]
        total = self.compute(points.copy(), reference)
        out = np.empty(n, dtype=float)
        for idx in range(n):
            without = np.delete(points, idx, axis=0)
            out[idx] = total - self.compute(without, reference) if without.shape[0] else total
        return out

    def least_contributor(self, points: np.ndarray, reference: np.ndarray) -> int:
        """Index of the point contributing the least (first one on ties)."""
        return int(np.argmin(self.contributions(points, reference)))

    def greatest_contributor(self, points: np.ndarray, reference: np.ndarray) -> int:
        """Index of the point contributing the most (first one on ties)."""
        return int(np.argmax(self.contributions(points, reference)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = ["HVAlgorithm"]
