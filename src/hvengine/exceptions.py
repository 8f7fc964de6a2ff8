"""
hvengine exception hierarchy.

All hvengine exceptions inherit from HVEngineError. Each concrete error also
derives from the matching builtin (ValueError, IndexError, ...) so callers that
only know the builtin contract still catch them.

Example:
    try:
        hv = Hypervolume(points).compute(ref)
    except HVEngineError as e:
        print(f"Hypervolume failed: {e}")
        print(f"Details: {e.details}")
"""

from __future__ import annotations

from typing import Any


class HVEngineError(Exception):
    """
    Base exception for all hvengine errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Input Errors
# =============================================================================


class InvalidInputError(HVEngineError, ValueError):
    """Raised when a point set, reference point or parameter violates an invariant."""

    pass


class OutOfRangeError(HVEngineError, IndexError):
    """Raised when a point index falls outside the point set."""

    def __init__(self, index: int, size: int) -> None:
        message = f"Index of the point is out of bounds: {index} (point set has {size} points)."
        suggestion = f"Use an index in [0, {size})." if size > 0 else "Populate the point set first."
        super().__init__(message, suggestion, {"index": index, "size": size})


# =============================================================================
# Algorithm Errors
# =============================================================================


class UnknownAlgorithmError(HVEngineError, ValueError):
    """Raised when an unregistered hypervolume algorithm is requested."""

    def __init__(self, name: str, available: list[str], matches: list[str] | None = None) -> None:
        message = f"Unknown hypervolume algorithm '{name}'."
        if matches:
            suggestion = "Did you mean " + " or ".join(f"'{m}'" for m in matches) + "?"
        else:
            suggestion = f"Available algorithms: {', '.join(available)}"
        super().__init__(message, suggestion, {"algorithm": name, "available": available})


class UnsupportedOperationError(HVEngineError, NotImplementedError):
    """Raised when an algorithm cannot answer a given query."""

    def __init__(self, algorithm: str, operation: str) -> None:
        message = f"Algorithm '{algorithm}' does not support '{operation}'."
        suggestion = "Pass an exact algorithm (native2d, beume3d or wfg) for this query"
        super().__init__(message, suggestion, {"algorithm": algorithm, "operation": operation})


# =============================================================================
# Dependency Errors
# =============================================================================


class DependencyError(HVEngineError, ImportError):
    """Raised when an optional dependency is missing."""

    def __init__(self, package: str, feature: str, install_cmd: str | None = None) -> None:
        message = f"'{package}' is required for {feature} but not installed."
        install_cmd = install_cmd or f"pip install {package}"
        suggestion = f"Install with: {install_cmd}"
        super().__init__(message, suggestion, {"package": package, "feature": feature})


__all__ = [
    "HVEngineError",
    "InvalidInputError",
    "OutOfRangeError",
    "UnknownAlgorithmError",
    "UnsupportedOperationError",
    "DependencyError",
]
