"""Goal function wrappers.

A goal maps a candidate solution (a 1-D float array) to a scalar value that
the optimizers minimize. NaN and Inf are legal results; selection strategies
decide what to do with them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

import numpy as np


class Goal(ABC):
    """Base class for goal functions."""

    @abstractmethod
    def get(self, solution: np.ndarray) -> float:
        raise NotImplementedError

    def calculate(self, solution: np.ndarray) -> float:
        return self.get(solution)

    def __call__(self, solution: np.ndarray) -> float:
        return self.get(solution)


class GoalFromFunction(Goal):
    """Adapts a plain callable ``f(x) -> float`` to the Goal interface."""

    def __init__(self, function: Callable[[np.ndarray], float]) -> None:
        if not callable(function):
            raise TypeError("function must be callable.")
        self.function = function

    def get(self, solution: np.ndarray) -> float:
        return float(self.function(solution))


def as_goal(goal: Goal | Callable[[np.ndarray], float]) -> Goal:
    """Return ``goal`` unchanged if it is a Goal, otherwise wrap it."""
    if isinstance(goal, Goal):
        return goal
    return GoalFromFunction(goal)


__all__ = ["Goal", "GoalFromFunction", "as_goal"]
