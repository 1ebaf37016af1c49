"""Search-space helpers shared by the PSO and GA strategies."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .exceptions import ConfigurationError, DimensionMismatchError, InvalidParameterError

IntervalsLike = Sequence[tuple[float, float]] | np.ndarray


def as_intervals(intervals: IntervalsLike) -> np.ndarray:
    """Normalize a list of ``(min, max)`` pairs into an ``(n, 2)`` float array."""
    arr = np.asarray(intervals, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ConfigurationError(
            "Intervals must be a sequence of (min, max) pairs.",
            "Pass e.g. [(-100.0, 100.0)] * dimension",
            {"shape": arr.shape},
        )
    if arr.shape[0] == 0:
        raise ConfigurationError("Intervals must not be empty.")
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError("Interval bounds must be finite.")
    bad = np.flatnonzero(arr[:, 0] > arr[:, 1])
    if bad.size:
        raise ConfigurationError(
            f"Interval {int(bad[0])} has min > max.",
            "Ensure min <= max for all dimensions",
            {"index": int(bad[0])},
        )
    return arr


def check_dimension(what: str, vector: np.ndarray, expected: int) -> None:
    actual = int(np.shape(vector)[-1]) if np.ndim(vector) else 0
    if actual != expected:
        raise DimensionMismatchError(what, expected, actual)


def require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidParameterError(name, value, "must be positive")


def require_non_negative(name: str, value: float) -> None:
    if not value >= 0:
        raise InvalidParameterError(name, value, "must be >= 0")


def require_probability(name: str, value: float, upper: float = 1.0) -> None:
    if not 0.0 <= value <= upper:
        raise InvalidParameterError(name, value, f"must lie in [0, {upper:g}]")


__all__ = [
    "IntervalsLike",
    "as_intervals",
    "check_dimension",
    "require_positive",
    "require_non_negative",
    "require_probability",
]
