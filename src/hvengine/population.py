"""
Population collaborator used to build a hypervolume engine from the first
Pareto front of an optimizer's population.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from .pareto import fast_non_dominated_sort
from .points import as_point_matrix


@runtime_checkable
class PopulationLike(Protocol):
    def compute_pareto_fronts(self) -> Sequence[Sequence[int]]: ...

    def get_fitness(self, index: int) -> Sequence[float]: ...


class ArrayPopulation:
    """Adapter exposing an objective matrix F (n_solutions, n_objectives) as a population."""

    def __init__(self, F) -> None:
        self.F = as_point_matrix(F)

    def __len__(self) -> int:
        return int(self.F.shape[0])

    def compute_pareto_fronts(self) -> list[list[int]]:
        fronts, _ = fast_non_dominated_sort(self.F)
        return fronts

    def get_fitness(self, index: int) -> np.ndarray:
        return self.F[index]


def first_front_points(population: PopulationLike) -> list[np.ndarray]:
    """Fitness vectors of the population's first (non-dominated) front, in front order."""
    fronts = population.compute_pareto_fronts()
    if not fronts:
        return []
    return [np.asarray(population.get_fitness(int(idx)), dtype=float) for idx in fronts[0]]


__all__ = ["PopulationLike", "ArrayPopulation", "first_front_points"]
