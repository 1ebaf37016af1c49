"""
Run observers.

Loggers are notified at the start of a run, after every iteration and at the
end of a run. They only read optimizer state; nothing they do influences the
search.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from swarmgen.engine.base import Optimizer


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Logger:
    """Base observer; every hook is a no-op."""

    def start(self, optimizer: "Optimizer") -> None:
        return None

    def next_iteration(self, optimizer: "Optimizer") -> None:
        return None

    def finish(self, optimizer: "Optimizer") -> None:
        return None


def format_solution(solution: np.ndarray | None, precision: int) -> str:
    if solution is None:
        return "None"
    return "[" + ", ".join(f"{x:.{precision}f}" for x in solution) + "]"


def format_goal(goal: float | None, precision: int) -> str:
    if goal is None:
        return "None"
    return f"{goal:.{precision}f}"


class _FormattingLogger(Logger):
    def __init__(
        self,
        precision: int = 5,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.precision = int(precision)
        self.logger = logger or _logger()
        self.level = level

    def _emit(self, prefix: str, optimizer: "Optimizer") -> None:
        self.logger.log(
            self.level,
            "%s  solution: %s  goal: %s",
            prefix,
            format_solution(optimizer.get_best_solution(), self.precision),
            format_goal(optimizer.get_best_goal(), self.precision),
        )


class VerboseLogger(_FormattingLogger):
    """Log the best solution and goal value at every iteration."""

    def start(self, optimizer: "Optimizer") -> None:
        self._emit("Initial", optimizer)

    def next_iteration(self, optimizer: "Optimizer") -> None:
        self._emit(f"Iteration {optimizer.get_iteration():<8}", optimizer)

    def finish(self, optimizer: "Optimizer") -> None:
        self._emit(f"Result after {optimizer.get_iteration()} iterations", optimizer)


class ResultOnlyLogger(_FormattingLogger):
    """Log the final best solution and goal value."""

    def finish(self, optimizer: "Optimizer") -> None:
        self._emit(f"Result after {optimizer.get_iteration()} iterations", optimizer)


class TimeStartStopLogger(Logger):
    """Log the wall-clock duration of a run."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or _logger()
        self.level = level
        self._start: float | None = None
        self.elapsed: float | None = None

    def start(self, optimizer: "Optimizer") -> None:
        self._start = time.perf_counter()
        self.elapsed = None
        self.logger.log(self.level, "%s started", type(optimizer).__name__)

    def finish(self, optimizer: "Optimizer") -> None:
        if self._start is None:
            return
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(
            self.level,
            "%s finished: %d iterations in %.3f s",
            type(optimizer).__name__,
            optimizer.get_iteration(),
            self.elapsed,
        )


__all__ = [
    "Logger",
    "VerboseLogger",
    "ResultOnlyLogger",
    "TimeStartStopLogger",
    "format_solution",
    "format_goal",
]
