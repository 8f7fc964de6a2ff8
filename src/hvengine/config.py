from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .exceptions import InvalidInputError

# Engine defaults
DEFAULT_COPY_POINTS = True
DEFAULT_VERIFY = True
DEFAULT_NADIR_EPSILON = 1.0

# Names resolvable through hvengine.algorithms.registry
EXACT_ALGORITHMS = ("native2d", "beume3d", "wfg")
APPROXIMATE_ALGORITHMS = ("fpras",)
OPTIONAL_ALGORITHMS = ("moocore",)

# FPRAS defaults
FPRAS_EPSILON = 1e-2
FPRAS_DELTA = 1e-2
FPRAS_BATCH_SIZE = 4096
FPRAS_MAX_SAMPLES = 5_000_000


@dataclass(frozen=True)
class FPRASConfig:
    """
    Parameters of the Monte Carlo hypervolume approximation.

    With probability at least 1 - delta the estimate is within a relative
    error of epsilon, unless max_samples caps the sample count first.
    """

    epsilon: float = FPRAS_EPSILON
    delta: float = FPRAS_DELTA
    batch_size: int = FPRAS_BATCH_SIZE
    max_samples: int = FPRAS_MAX_SAMPLES
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 0.0 < self.epsilon < 1.0:
            raise InvalidInputError("epsilon must be in (0, 1)")
        if not 0.0 < self.delta < 1.0:
            raise InvalidInputError("delta must be in (0, 1)")
        if self.batch_size <= 0:
            raise InvalidInputError("batch_size must be > 0")
        if self.max_samples <= 0:
            raise InvalidInputError("max_samples must be > 0")


def default_log_level() -> int:
    """
    Resolve the CLI log level from HVENGINE_LOG_LEVEL (name or number).
    Unknown values fall back to WARNING.
    """
    raw = os.environ.get("HVENGINE_LOG_LEVEL", "").strip()
    if not raw:
        return logging.WARNING
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


__all__ = [
    "DEFAULT_COPY_POINTS",
    "DEFAULT_VERIFY",
    "DEFAULT_NADIR_EPSILON",
    "EXACT_ALGORITHMS",
    "APPROXIMATE_ALGORITHMS",
    "OPTIONAL_ALGORITHMS",
    "FPRAS_EPSILON",
    "FPRAS_DELTA",
    "FPRAS_BATCH_SIZE",
    "FPRAS_MAX_SAMPLES",
    "FPRASConfig",
    "default_log_level",
]
