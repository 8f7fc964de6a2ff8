"""
Dominance helpers (minimization).

Assumes F is float64 of shape (N, M).
"""

from __future__ import annotations

from typing import Literal, overload

import numpy as np


def fast_non_dominated_sort(F: np.ndarray) -> tuple[list[list[int]], np.ndarray]:
    """
    Classic O(N^2) fast non-dominated sort.
    Args:
        F: objective matrix (N, M), float64.
    Returns:
      - fronts: list of lists with indices per front (0, 1, ...)
      - rank: array with the front rank for each solution
    """
    N = F.shape[0]
    if N == 0:
        return [], np.empty(0, dtype=int)

    less_equal = F[:, None, :] <= F[None, :, :]
    strictly_less = F[:, None, :] < F[None, :, :]
    dom_matrix = np.logical_and(
        np.all(less_equal, axis=2),
        np.any(strictly_less, axis=2),
    )

    dominated_count = dom_matrix.sum(axis=0).astype(np.int64)
    rank = np.empty(N, dtype=int)
    fronts = []

    current = np.flatnonzero(dominated_count == 0)
    level = 0
    while current.size > 0:
        fronts.append(current.tolist())
        rank[current] = level
        dom_contrib = dom_matrix[current].sum(axis=0)
        dominated_count -= dom_contrib
        dominated_count[current] = -1
        dom_matrix[current] = False
        level += 1
        current = np.flatnonzero(dominated_count == 0)

    return fronts, rank


def nondominated_mask(F: np.ndarray) -> np.ndarray:
    """
    Boolean mask of the points that are neither dominated nor a repeat of an
    earlier point. Weak dominance is used, so of several identical points
    only the first one is kept.
    """
    n = F.shape[0]
    if n <= 1:
        return np.ones(n, dtype=bool)
    # weak[i, j]: F[i] <= F[j] componentwise
    weak = np.all(F[:, None, :] <= F[None, :, :], axis=2)
    equal = weak & weak.T
    strict = weak & ~equal
    dominated = strict.any(axis=0)
    # drop every copy of a point except the first occurrence
    repeated = np.triu(equal, k=1).any(axis=0)
    return ~(dominated | repeated)


def nondominated(F: np.ndarray) -> np.ndarray:
    """Return the non-dominated, duplicate-free subset of F (row order kept)."""
    return F[nondominated_mask(F)]


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[False] = False) -> np.ndarray | None: ...


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[True]) -> tuple[np.ndarray, np.ndarray]: ...


def pareto_filter(F: np.ndarray | None, *, return_indices: bool = False) -> np.ndarray | tuple[np.ndarray, np.ndarray] | None:
    """
    Return the non-dominated subset of points (first Pareto front).

    Args:
        F: Objective values array (n_solutions, n_objectives) or None.
        return_indices: When True, also return indices of the front in F.

    Returns:
        Front array, or (front, indices) when return_indices is True.
    """
    if F is None:
        if return_indices:
            return np.empty((0, 0)), np.array([], dtype=int)
        return None
    F = np.asarray(F, dtype=float)
    if F.size == 0 or F.ndim < 2:
        if return_indices:
            n = int(F.shape[0]) if F.ndim > 0 else 0
            return F, np.arange(n, dtype=int)
        return F
    fronts, _ = fast_non_dominated_sort(F)
    idx = np.asarray(fronts[0], dtype=int)
    front = F[idx]
    return (front, idx) if return_indices else front


__all__ = ["fast_non_dominated_sort", "nondominated_mask", "nondominated", "pareto_filter"]
