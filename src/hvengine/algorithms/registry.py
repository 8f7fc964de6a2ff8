"""
Hypervolume algorithm registry.

Maps algorithm names to factories so callers can resolve algorithms without
hard-coding if/elif chains, and holds the dimension-based selection policy.
Algorithms relying on optional dependencies (moocore) are lazy-loaded so
`import hvengine` remains safe on a minimal install.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from difflib import get_close_matches
from importlib import import_module
from typing import Any, cast

from ..exceptions import DependencyError, InvalidInputError, UnknownAlgorithmError
from .base import HVAlgorithm
from .beume3d import Beume3D
from .fpras import FPRAS
from .native2d import Native2D
from .wfg import WFG


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _load_moocore(**kwargs: Any) -> HVAlgorithm:
    try:
        module = import_module("hvengine.algorithms.moocore_backend")
    except ImportError as exc:
        raise DependencyError(
            "moocore",
            "the 'moocore' hypervolume algorithm",
            install_cmd='pip install -e ".[compute]"',
        ) from exc
    return cast(HVAlgorithm, module.MooCore(**kwargs))


ALGORITHMS: dict[str, Callable[..., HVAlgorithm]] = {
    "native2d": Native2D,
    "beume3d": Beume3D,
    "wfg": WFG,
    "fpras": FPRAS,
    "moocore": _load_moocore,
}


def _suggest_names(name: str, options: list[str]) -> list[str]:
    if not name or not options:
        return []
    lookup = {option.lower(): option for option in options}
    matches = get_close_matches(name.lower(), lookup.keys(), n=3, cutoff=0.6)
    return [lookup[match] for match in matches]


def resolve_algorithm(name: str, **kwargs: Any) -> HVAlgorithm:
    """Instantiate a registered algorithm by name, forwarding ``kwargs`` to its constructor."""
    key = name.lower()
    try:
        factory = ALGORITHMS[key]
    except KeyError:
        available = sorted(ALGORITHMS)
        raise UnknownAlgorithmError(name, available, _suggest_names(name, available)) from None
    return factory(**kwargs)


def select_best_algorithm(dimension: int) -> HVAlgorithm:
    """
    Pick the algorithm expected to perform best for ``dimension`` objectives.

    Heuristic based on the asymptotic cost of each method; callers may always
    pass an explicit algorithm instead.
    """
    if dimension < 2:
        raise InvalidInputError(
            "Points of dimension > 1 required.",
            details={"dimension": dimension},
        )
    if dimension == 2:
        return Native2D()
    if dimension == 3:
        return Beume3D()
    _logger().debug("Selected wfg for %d objectives; cost grows exponentially with the dimension.", dimension)
    return WFG()


def expected_operations(n: int, d: int) -> int:
    """
    Expected number of elementary operations for a front of ``n`` points in
    ``d`` objectives under the selection policy. For planning only.
    """
    if n <= 1:
        return 0
    log_n = math.log(n)
    if d == 2:
        return int(2.0 * n * log_n)
    if d == 3:
        return int(3.0 * n * log_n)
    return int(n * log_n * math.pow(n, d // 2))


def available_algorithms() -> list[str]:
    return sorted(ALGORITHMS)


__all__ = [
    "ALGORITHMS",
    "resolve_algorithm",
    "select_best_algorithm",
    "expected_operations",
    "available_algorithms",
]
