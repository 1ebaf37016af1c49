"""
Stop criteria for the optimizers.

A stop checker is queried once after initialization and once after every
iteration. Checkers may keep history between calls; the optimizer calls
``reset()`` at the beginning of every run and never in the middle of one.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from swarmgen.foundation.exceptions import ConfigurationError
from swarmgen.foundation.space import require_non_negative, require_positive

if TYPE_CHECKING:
    from swarmgen.engine.base import Optimizer


class StopChecker(ABC):
    """Predicate over the optimizer state deciding whether to halt."""

    @abstractmethod
    def can_stop(self, optimizer: "Optimizer") -> bool:
        raise NotImplementedError

    def reset(self) -> None:
        return None


class Threshold(StopChecker):
    """Stop when the best goal value is at or below ``threshold``."""

    def __init__(self, threshold: float) -> None:
        self.threshold = float(threshold)

    def can_stop(self, optimizer: "Optimizer") -> bool:
        goal = optimizer.get_best_goal()
        if goal is None or math.isnan(goal):
            return False
        return goal <= self.threshold


class MaxIterations(StopChecker):
    """Stop once the iteration counter reaches ``max_iter``."""

    def __init__(self, max_iter: int) -> None:
        require_non_negative("max_iter", max_iter)
        self.max_iter = int(max_iter)

    def can_stop(self, optimizer: "Optimizer") -> bool:
        return optimizer.get_iteration() >= self.max_iter


class GoalNotChange(StopChecker):
    """Stop when the best goal has not moved by more than ``delta`` for ``max_iter`` iterations.

    The checker remembers the goal value observed when it last changed by
    more than ``delta`` and the iteration at which that happened.
    """

    def __init__(self, max_iter: int, delta: float) -> None:
        require_positive("max_iter", max_iter)
        require_non_negative("delta", delta)
        self.max_iter = int(max_iter)
        self.delta = float(delta)
        self._old_goal: float | None = None
        self._change_iteration = 0

    def reset(self) -> None:
        self._old_goal = None
        self._change_iteration = 0

    def can_stop(self, optimizer: "Optimizer") -> bool:
        goal = optimizer.get_best_goal()
        iteration = optimizer.get_iteration()
        if goal is None or math.isnan(goal):
            return False

        if self._old_goal is None or abs(goal - self._old_goal) > self.delta:
            self._old_goal = goal
            self._change_iteration = iteration
            return False

        return iteration - self._change_iteration >= self.max_iter


class _Composite(StopChecker):
    def __init__(self, checkers: Iterable[StopChecker]) -> None:
        self.checkers = list(checkers)
        if not self.checkers:
            raise ConfigurationError(
                f"{type(self).__name__} needs at least one stop checker.",
                "Combine e.g. Threshold(1e-6) with MaxIterations(3000)",
            )

    def reset(self) -> None:
        for checker in self.checkers:
            checker.reset()

    def _results(self, optimizer: "Optimizer") -> list[bool]:
        # Every child is queried so history-based checkers see each iteration.
        return [checker.can_stop(optimizer) for checker in self.checkers]


class CompositeAny(_Composite):
    """Stop when any of the child checkers fires."""

    def can_stop(self, optimizer: "Optimizer") -> bool:
        return any(self._results(optimizer))


class CompositeAll(_Composite):
    """Stop only when all child checkers fire at the same time."""

    def can_stop(self, optimizer: "Optimizer") -> bool:
        return all(self._results(optimizer))


__all__ = [
    "StopChecker",
    "Threshold",
    "MaxIterations",
    "GoalNotChange",
    "CompositeAny",
    "CompositeAll",
]
