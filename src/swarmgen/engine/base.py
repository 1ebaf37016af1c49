"""
Shared iteration skeleton for the swarm and genetic optimizers.

Both algorithms follow the same lifecycle::

    reset stop checker -> initialize -> loggers.start
    while state is not empty and stop checker does not fire:
        iteration += 1; next_iteration(); loggers.next_iteration
    loggers.finish -> result

Subclasses implement the initialization, one iteration step and the
best-known state accessors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import numpy as np

from swarmgen.foundation.goal import Goal, as_goal

if TYPE_CHECKING:
    from swarmgen.engine.loggers import Logger
    from swarmgen.engine.stopping import StopChecker


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


RunResult = tuple[np.ndarray, float] | None


def is_better(candidate: float, current: float | None) -> bool:
    """Strict minimization comparison; NaN never wins over a comparable value."""
    if np.isnan(candidate):
        return False
    if current is None or np.isnan(current):
        return True
    return candidate < current


class Optimizer(ABC):
    """Base class for iterative optimizers with stop checking and loggers."""

    def __init__(
        self,
        goal: Goal | Callable[[np.ndarray], float],
        stop_checker: "StopChecker",
        loggers: Iterable["Logger"] | None = None,
    ) -> None:
        self._goal = as_goal(goal)
        self._stop_checker = stop_checker
        self._loggers: list["Logger"] = list(loggers or [])
        self._iteration = 0

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_loggers(self, loggers: Iterable["Logger"]) -> None:
        self._loggers = list(loggers)

    def add_logger(self, logger: "Logger") -> None:
        self._loggers.append(logger)

    def get_loggers(self) -> list["Logger"]:
        return list(self._loggers)

    def set_stop_checker(self, stop_checker: "StopChecker") -> None:
        self._stop_checker = stop_checker

    @property
    def goal(self) -> Goal:
        return self._goal

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------

    def get_iteration(self) -> int:
        return self._iteration

    @abstractmethod
    def get_best_solution(self) -> np.ndarray | None:
        raise NotImplementedError

    @abstractmethod
    def get_best_goal(self) -> float | None:
        raise NotImplementedError

    def get_result(self) -> RunResult:
        """Current best ``(solution, goal)`` or None when nothing valid exists."""
        solution = self.get_best_solution()
        goal = self.get_best_goal()
        if solution is None or goal is None or np.isnan(goal):
            return None
        return solution.copy(), float(goal)

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def find_min(self) -> RunResult:
        """Run the optimization until the stop checker fires.

        Returns
        -------
        tuple or None
            ``(solution, goal_value)`` of the best point found, or None if
            the run never produced a valid candidate.
        """
        self._stop_checker.reset()
        self._iteration = 0
        self._initialize()
        _logger().debug("%s initialized, best goal %s", type(self).__name__, self.get_best_goal())

        for logger in self._loggers:
            logger.start(self)

        while not self._is_empty() and not self._stop_checker.can_stop(self):
            self._iteration += 1
            self._next_iteration()
            for logger in self._loggers:
                logger.next_iteration(self)

        for logger in self._loggers:
            logger.finish(self)

        result = self.get_result()
        if result is None:
            _logger().debug("%s finished without a valid result", type(self).__name__)
        else:
            _logger().debug(
                "%s finished after %d iterations, best goal %s",
                type(self).__name__,
                self._iteration,
                result[1],
            )
        return result

    @abstractmethod
    def _initialize(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _next_iteration(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _is_empty(self) -> bool:
        raise NotImplementedError


__all__ = ["Optimizer", "RunResult", "is_better"]
