"""
Point-set coercion and validation shared by the engine and the algorithms.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .exceptions import InvalidInputError


def as_point_matrix(points: Any) -> np.ndarray:
    """
    Copy ``points`` into a float64 matrix of shape (n, d).

    Ragged input cannot be stored as a matrix, so non-uniform dimensions are
    rejected here regardless of any verify flag.
    """
    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=float, copy=True)
    else:
        rows = [np.asarray(p, dtype=float).ravel() for p in points]
        if not rows:
            return np.empty((0, 0), dtype=float)
        dims = {row.shape[0] for row in rows}
        if len(dims) > 1:
            raise InvalidInputError(
                "All point set dimensions must be equal.",
                details={"dimensions": sorted(dims)},
            )
        arr = np.vstack(rows)
    if arr.ndim == 1:
        if arr.size == 0:
            return np.empty((0, 0), dtype=float)
        raise InvalidInputError(
            "Points must be a 2D collection of shape (n_points, n_objectives).",
            suggestion="Wrap a single point in a list: [[f1, f2, ...]]",
            details={"shape": arr.shape},
        )
    if arr.ndim != 2:
        raise InvalidInputError(
            "Points must be a 2D collection of shape (n_points, n_objectives).",
            details={"shape": arr.shape},
        )
    return arr


def as_reference_point(reference: Sequence[float] | np.ndarray) -> np.ndarray:
    ref = np.array(reference, dtype=float, copy=True)
    if ref.ndim != 1:
        raise InvalidInputError(
            "Reference point must be a 1D sequence of floats.",
            details={"shape": ref.shape},
        )
    return ref


def verify_point_set(points: np.ndarray) -> None:
    """
    Verify the basic requirements of a point set.

    Raises:
        InvalidInputError: if the set is empty or its points have dimension <= 1.
    """
    if points.shape[0] == 0:
        raise InvalidInputError(
            "Point set cannot be empty.",
            suggestion="Provide at least one point",
            details={"size": 0},
        )
    dim = points.shape[1]
    if dim <= 1:
        raise InvalidInputError(
            "Points of dimension > 1 required.",
            details={"dimension": dim},
        )


def verify_reference_dimension(points: np.ndarray, reference: np.ndarray) -> None:
    expected = points.shape[1]
    actual = reference.shape[0]
    if expected != actual:
        raise InvalidInputError(
            "Point set dimensions and reference point dimension must be equal.",
            suggestion=f"Pass a reference point with {expected} coordinates",
            details={"expected": expected, "actual": actual},
        )


def nadir_point(points: np.ndarray, epsilon: float = 0.0) -> np.ndarray:
    """Componentwise maximum of the set plus ``epsilon`` (minimization)."""
    if points.shape[0] == 0:
        raise InvalidInputError("Cannot derive a nadir point from an empty point set.")
    return points.max(axis=0) + float(epsilon)


__all__ = [
    "as_point_matrix",
    "as_reference_point",
    "verify_point_set",
    "verify_reference_dimension",
    "nadir_point",
]
