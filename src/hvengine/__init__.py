from .algorithms import (
    FPRAS,
    WFG,
    Beume3D,
    HVAlgorithm,
    Native2D,
    available_algorithms,
    expected_operations,
    resolve_algorithm,
    select_best_algorithm,
)
from .config import FPRASConfig
from .exceptions import (
    DependencyError,
    HVEngineError,
    InvalidInputError,
    OutOfRangeError,
    UnknownAlgorithmError,
    UnsupportedOperationError,
)
from .hypervolume import Hypervolume
from .logging import configure_hvengine_logging
from .pareto import pareto_filter
from .population import ArrayPopulation, PopulationLike

__version__ = "0.1.0"

__all__ = [
    "Hypervolume",
    "HVAlgorithm",
    "Native2D",
    "Beume3D",
    "WFG",
    "FPRAS",
    "FPRASConfig",
    "available_algorithms",
    "expected_operations",
    "resolve_algorithm",
    "select_best_algorithm",
    "ArrayPopulation",
    "PopulationLike",
    "pareto_filter",
    "configure_hvengine_logging",
    "HVEngineError",
    "InvalidInputError",
    "OutOfRangeError",
    "UnknownAlgorithmError",
    "UnsupportedOperationError",
    "DependencyError",
]
