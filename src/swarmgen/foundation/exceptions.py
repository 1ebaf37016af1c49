"""
swarmgen exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All swarmgen-specific exceptions inherit from SwarmGenError for easy catching.

Only invalid configuration is an error. Degenerate goal values (NaN/Inf) are
ordinary data, and a run that never produced a valid solution returns None.

Example:
    try:
        optimizer = build_pso_optimizer(config, goal)
    except SwarmGenError as e:
        print(f"Bad configuration: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class SwarmGenError(Exception):
    """
    Base exception for all swarmgen errors.

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
# Configuration Errors
# =============================================================================


class ConfigurationError(SwarmGenError):
    """Raised when configuration is invalid or incomplete."""

    pass


class DimensionMismatchError(ConfigurationError):
    """Raised when vectors that must share a dimensionality do not."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        message = f"{what}: expected dimension {expected}, got {actual}."
        suggestion = "Use one list of intervals for every strategy of a run"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class InvalidParameterError(ConfigurationError):
    """Raised when a numeric parameter is outside its valid range."""

    def __init__(self, name: str, value: Any, requirement: str) -> None:
        message = f"Invalid value for '{name}': {value!r}."
        super().__init__(message, f"'{name}' {requirement}", {"name": name, "value": value})


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown strategy is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
        matches: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} strategy '{operator_name}'."
        if matches:
            suggestion = f"Did you mean '{matches[0]}'?"
        elif available:
            suggestion = f"Available {operator_type} strategies: {', '.join(available)}"
        else:
            suggestion = None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, fields: list[str], config_class: str | None = None) -> None:
        joined = ", ".join(fields)
        message = f"Missing required configuration: {joined}."
        suggestion = f"Set {joined}"
        if config_class:
            suggestion += f" on the {config_class} builder before calling fixed()"
        super().__init__(message, suggestion, {"fields": fields})


__all__ = [
    "SwarmGenError",
    "ConfigurationError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "InvalidOperatorError",
    "MissingConfigError",
]
