"""
Hypervolume engine facade.

``Hypervolume`` owns a point set and answers hypervolume queries for a
reference point supplied per call. The actual geometry is delegated to an
``HVAlgorithm`` chosen by the caller or by the dimension-based selection
policy.

Example:
    hv = Hypervolume([[1.0, 2.0], [2.0, 1.0]])
    hv.compute([3.0, 3.0])            # 3.0
    hv.least_contributor([3.0, 3.0])  # 0
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence
from typing import Any, Callable, TypeVar

import numpy as np

from .algorithms.base import HVAlgorithm
from .algorithms.registry import expected_operations, resolve_algorithm, select_best_algorithm
from .config import DEFAULT_COPY_POINTS, DEFAULT_VERIFY
from .exceptions import InvalidInputError, OutOfRangeError
from .points import (
    as_point_matrix,
    as_reference_point,
    nadir_point,
    verify_point_set,
    verify_reference_dimension,
)
from .population import PopulationLike, first_front_points

AlgorithmArg = HVAlgorithm | str | None
T = TypeVar("T")


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Hypervolume:
    """
    Hypervolume of a fixed point set (minimization).

    Two settings control each query and can be changed at any time:

    - ``copy_points`` (default True): algorithms receive a fresh snapshot of
      the points, since they may reorder their input. When False they work on
      the engine's own storage, so the engine should be treated as single use.
    - ``verify`` (default True): check the reference point dimension and let
      the algorithm validate the reference point before computing.

    Args:
        points: Collection of equal-length objective vectors, or None for an
            empty engine populated later with ``set_points``.
        verify: Validate the points now and enable per-query validation.
    """

    def __init__(self, points: Any = None, verify: bool = DEFAULT_VERIFY) -> None:
        self._points: np.ndarray | None = None
        self._copy_points = DEFAULT_COPY_POINTS
        self._verify = bool(verify)
        if points is not None:
            self.set_points(points, verify=verify)

    @classmethod
    def from_population(cls, population: PopulationLike, verify: bool = DEFAULT_VERIFY) -> "Hypervolume":
        """Build an engine from the first Pareto front of ``population``."""
        front = first_front_points(population)
        _logger().debug("Extracted first front with %d points from population", len(front))
        return cls(front, verify=verify)

    # -------- Point set --------

    def set_points(self, points: Any, verify: bool = DEFAULT_VERIFY) -> None:
        """Replace the point set (copied) and the verify setting."""
        arr = as_point_matrix(points)
        if verify:
            verify_point_set(arr)
        self._points = arr
        self._verify = bool(verify)

    @property
    def points(self) -> np.ndarray:
        """Copy of the point set as a (n_points, n_objectives) array."""
        return self._require_points().copy()

    @property
    def copy_points(self) -> bool:
        return self._copy_points

    @copy_points.setter
    def copy_points(self, value: bool) -> None:
        self._copy_points = bool(value)

    @property
    def verify(self) -> bool:
        return self._verify

    @verify.setter
    def verify(self, value: bool) -> None:
        self._verify = bool(value)

    def set_copy_points(self, copy_points: bool) -> None:
        self.copy_points = copy_points

    def get_copy_points(self) -> bool:
        return self._copy_points

    def set_verify(self, verify: bool) -> None:
        self.verify = verify

    def get_verify(self) -> bool:
        return self._verify

    def __len__(self) -> int:
        return 0 if self._points is None else int(self._points.shape[0])

    def _require_points(self) -> np.ndarray:
        if self._points is None:
            raise InvalidInputError(
                "Hypervolume object has no points.",
                suggestion="Populate it with set_points() before querying",
            )
        return self._points

    # -------- Dispatch --------

    def _prepare(self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg) -> tuple[np.ndarray, HVAlgorithm]:
        points = self._require_points()
        ref = as_reference_point(reference)
        if isinstance(algorithm, str):
            algo = resolve_algorithm(algorithm)
        elif algorithm is None:
            algo = select_best_algorithm(ref.shape[0])
        else:
            algo = algorithm
        if self._verify:
            verify_reference_dimension(points, ref)
            algo.validate(points, ref)
        return ref, algo

    def _run(
        self,
        query: str,
        reference: Sequence[float] | np.ndarray,
        algorithm: AlgorithmArg,
        call: Callable[[HVAlgorithm, np.ndarray, np.ndarray], T],
    ) -> T:
        ref, algo = self._prepare(reference, algorithm)
        points = self._require_points()
        working = points.copy() if self._copy_points else points
        _logger().debug("%s: %s on %d points in %d objectives", query, algo.name, working.shape[0], ref.shape[0])
        return call(algo, working, ref)

    # -------- Queries --------

    def compute(self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None) -> float:
        """Hypervolume dominated by the point set and bounded by ``reference``."""
        return float(self._run("compute", reference, algorithm, lambda a, p, r: a.compute(p, r)))

    def exclusive(self, index: int, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None) -> float:
        """
        Hypervolume contributed only by the point at ``index``.

        Raises:
            OutOfRangeError: if ``index`` is not in [0, len(points)).
        """
        idx = operator.index(index)
        size = len(self._require_points())
        if not 0 <= idx < size:
            raise OutOfRangeError(idx, size)
        return float(self._run("exclusive", reference, algorithm, lambda a, p, r: a.exclusive(idx, p, r)))

    def contributions(self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None) -> np.ndarray:
        """Exclusive contribution of every point, indexed like ``points``."""
        return np.asarray(self._run("contributions", reference, algorithm, lambda a, p, r: a.contributions(p, r)), dtype=float)

    def least_contributor(self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None) -> int:
        """Index of the point with the smallest exclusive contribution."""
        return int(self._run("least_contributor", reference, algorithm, lambda a, p, r: a.least_contributor(p, r)))

    def greatest_contributor(self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None) -> int:
        """Index of the point with the largest exclusive contribution."""
        return int(self._run("greatest_contributor", reference, algorithm, lambda a, p, r: a.greatest_contributor(p, r)))

    def compute_and_release(
        self, reference: Sequence[float] | np.ndarray, algorithm: AlgorithmArg = None
    ) -> tuple[float, np.ndarray]:
        """
        Compute the hypervolume using the engine's own storage as the working
        buffer and hand that storage back to the caller.

        The returned array may have been reordered by the algorithm. The
        engine is left empty and must be repopulated with ``set_points``.
        """
        ref, algo = self._prepare(reference, algorithm)
        points = self._require_points()
        value = float(algo.compute(points, ref))
        self._points = None
        return value, points

    def get_nadir_point(self, epsilon: float = 0.0) -> np.ndarray:
        """
        Componentwise maximum of the point set plus ``epsilon``.

        With epsilon > 0 every point strictly dominates the result, which makes
        it a valid reference point.
        """
        return nadir_point(self._require_points(), epsilon)

    @staticmethod
    def get_expected_operations(n: int, d: int) -> int:
        """Expected number of operations for ``n`` points in ``d`` objectives (planning only)."""
        return expected_operations(n, d)

    def clone(self) -> "Hypervolume":
        """Deep copy of the point set and settings."""
        other = Hypervolume(verify=self._verify)
        other._copy_points = self._copy_points
        other._points = None if self._points is None else self._points.copy()
        return other

    def __repr__(self) -> str:
        shape = None if self._points is None else tuple(self._points.shape)
        return f"Hypervolume(shape={shape}, copy_points={self._copy_points}, verify={self._verify})"


__all__ = ["Hypervolume"]
