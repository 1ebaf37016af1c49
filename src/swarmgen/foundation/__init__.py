"""Foundation layer: goals, search-space helpers, registries, exceptions and logging setup."""

from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidOperatorError,
    InvalidParameterError,
    MissingConfigError,
    SwarmGenError,
)
from .goal import Goal, GoalFromFunction, as_goal
from .logging import configure_swarmgen_logging
from .registry import Registry
from .space import as_intervals

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "InvalidOperatorError",
    "InvalidParameterError",
    "MissingConfigError",
    "SwarmGenError",
    "Goal",
    "GoalFromFunction",
    "as_goal",
    "configure_swarmgen_logging",
    "Registry",
    "as_intervals",
]
