import logging

import numpy as np
import pytest

from swarmgen.foundation import configure_swarmgen_logging
from swarmgen.foundation.exceptions import ConfigurationError, DimensionMismatchError, InvalidParameterError
from swarmgen.foundation.goal import Goal, GoalFromFunction, as_goal
from swarmgen.foundation.space import (
    as_intervals,
    check_dimension,
    require_non_negative,
    require_positive,
    require_probability,
)


class Paraboloid(Goal):
    def get(self, solution):
        return float(np.sum(solution**2))


def test_goal_call_and_calculate_delegate_to_get():
    goal = Paraboloid()
    x = np.array([1.0, 2.0])
    assert goal(x) == goal.calculate(x) == goal.get(x) == 5.0


def test_goal_from_function_converts_to_float():
    goal = GoalFromFunction(lambda x: np.float32(x[0]))
    value = goal.get(np.array([1.5]))
    assert isinstance(value, float)
    assert value == 1.5


def test_goal_from_function_rejects_non_callable():
    with pytest.raises(TypeError):
        GoalFromFunction(42)


def test_as_goal_keeps_goal_instances():
    goal = Paraboloid()
    assert as_goal(goal) is goal
    assert isinstance(as_goal(np.sum), GoalFromFunction)


def test_nan_goal_value_is_returned_as_data():
    goal = as_goal(lambda x: float("nan"))
    assert np.isnan(goal(np.zeros(2)))


def test_as_intervals_normalizes_pairs():
    arr = as_intervals([(-1, 1), (0, 5)])
    assert arr.shape == (2, 2)
    assert arr.dtype == float


@pytest.mark.parametrize(
    "intervals",
    [[], [(1.0, -1.0)], [(0.0, np.inf)], [(0.0, 1.0, 2.0)], [1.0, 2.0]],
)
def test_as_intervals_rejects_invalid(intervals):
    with pytest.raises(ConfigurationError):
        as_intervals(intervals)


def test_check_dimension():
    check_dimension("vector", np.zeros(3), 3)
    with pytest.raises(DimensionMismatchError):
        check_dimension("vector", np.zeros(2), 3)


def test_numeric_requirements():
    require_positive("k", 0.5)
    require_non_negative("count", 0)
    require_probability("p", 1.0)
    require_probability("p", 55.0, upper=100.0)
    with pytest.raises(InvalidParameterError):
        require_positive("k", 0)
    with pytest.raises(InvalidParameterError):
        require_non_negative("count", -1)
    with pytest.raises(InvalidParameterError):
        require_probability("p", 1.5)
    with pytest.raises(InvalidParameterError):
        require_non_negative("count", float("nan"))


def test_configure_logging_is_noop_when_root_has_handlers():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        swarmgen_logger = logging.getLogger("swarmgen")
        before = list(swarmgen_logger.handlers)
        configure_swarmgen_logging(level=logging.DEBUG)
        assert swarmgen_logger.handlers == before
    finally:
        root.removeHandler(handler)


def test_configure_logging_prefixes_level_and_logger_name():
    root = logging.getLogger()
    swarmgen_logger = logging.getLogger("swarmgen")
    saved_root = root.handlers[:]
    saved = (swarmgen_logger.handlers[:], swarmgen_logger.level, swarmgen_logger.propagate)
    root.handlers = []
    swarmgen_logger.handlers = []
    try:
        handler = configure_swarmgen_logging(level=logging.DEBUG)
        assert swarmgen_logger.handlers == [handler]
        assert swarmgen_logger.level == logging.DEBUG
        record = logging.LogRecord("swarmgen.engine.loggers", logging.INFO, __file__, 1, "Iteration %d", (3,), None)
        assert handler.format(record) == "INFO    swarmgen.engine.loggers: Iteration 3"
        assert configure_swarmgen_logging() is None
    finally:
        root.handlers = saved_root
        swarmgen_logger.handlers, level, swarmgen_logger.propagate = saved
        swarmgen_logger.setLevel(level)
