from .base import HVAlgorithm
from .beume3d import Beume3D
from .fpras import FPRAS
from .native2d import Native2D, hv2d
from .registry import (
    ALGORITHMS,
    available_algorithms,
    expected_operations,
    resolve_algorithm,
    select_best_algorithm,
)
from .wfg import WFG, wfg_hypervolume

__all__ = [
    "HVAlgorithm",
    "Native2D",
    "Beume3D",
    "WFG",
    "FPRAS",
    "hv2d",
    "wfg_hypervolume",
    "ALGORITHMS",
    "available_algorithms",
    "expected_operations",
    "resolve_algorithm",
    "select_best_algorithm",
]
