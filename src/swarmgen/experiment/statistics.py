"""
Statistics over many independent optimizer runs.

``Statistics`` collects the final result and the convergence curve of every
run; ``CallCountData`` collects the number of goal evaluations per run. Both
are merged with ``unite()``, which only concatenates per-run data, so the
summary metrics do not depend on how runs were partitioned or in which order
partial aggregates were united. Sums use ``math.fsum`` for the same reason.

Summary queries return None when there is nothing to summarize.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

import numpy as np

from swarmgen.engine.base import RunResult
from swarmgen.engine.loggers import Logger
from swarmgen.foundation.goal import Goal, as_goal

SuccessPredicate = Callable[[np.ndarray, float], bool]


def _mean(values: Sequence[float]) -> float | None:
    """Mean of ``values``; infinities of one sign dominate, mixed signs have no mean."""
    if not values:
        return None
    infinities = {value for value in values if math.isinf(value)}
    if infinities:
        return infinities.pop() if len(infinities) == 1 else None
    return math.fsum(values) / len(values)


def _comparable(values: Iterable[float | None]) -> list[float]:
    return [value for value in values if value is not None and not math.isnan(value)]


class RunResults(list):
    """Per-run results; ``None`` entries are failed runs."""

    def successful(self) -> list[tuple[np.ndarray, float]]:
        return [result for result in self if result is not None]

    def _goals(self) -> list[float]:
        return _comparable(goal for _, goal in self.successful())

    def get_average_goal(self) -> float | None:
        return _mean(self._goals())

    def get_standard_deviation_goal(self) -> float | None:
        """Population standard deviation; ``inf`` when any goal is infinite."""
        goals = self._goals()
        if not goals:
            return None
        if any(math.isinf(goal) for goal in goals):
            return math.inf
        average = _mean(goals)
        return math.sqrt(math.fsum((goal - average) ** 2 for goal in goals) / len(goals))

    def get_success_rate(self, predicate: SuccessPredicate) -> float | None:
        """Fraction of all runs whose result satisfies ``predicate(solution, goal)``."""
        if not self:
            return None
        success = sum(1 for solution, goal in self.successful() if predicate(solution, goal))
        return success / len(self)

    def get_failure_count(self) -> int:
        return sum(1 for result in self if result is None)


class Convergence(list):
    """One list of per-iteration best goal values per run."""

    def get_max_iterations(self) -> int:
        return max((len(run) for run in self), default=0)

    def get_average_convergence(self) -> list[float | None]:
        """Average best goal per iteration over the runs that reached it."""
        average: list[float | None] = []
        for n in range(self.get_max_iterations()):
            values = _comparable(run[n] for run in self if n < len(run))
            average.append(_mean(values))
        return average


class Statistics:
    """Results and convergence curves of a set of runs."""

    def __init__(self) -> None:
        self._results = RunResults()
        self._convergence = Convergence()

    def get_run_count(self) -> int:
        return len(self._results)

    def get_results(self) -> RunResults:
        return self._results

    def get_convergence(self) -> Convergence:
        return self._convergence

    def start_run(self) -> None:
        self._convergence.append([])

    def add_convergence_value(self, goal: float | None) -> None:
        if not self._convergence:
            self.start_run()
        self._convergence[-1].append(goal)

    def add_result(self, result: RunResult) -> None:
        self._results.append(result)

    def unite(self, other: "Statistics") -> "Statistics":
        """Append the runs of ``other``; ``other`` is left unchanged."""
        self._results.extend(other._results)
        self._convergence.extend(list(run) for run in other._convergence)
        return self


class CallCountData:
    """Number of goal function calls per run."""

    def __init__(self, counts: Iterable[int] | None = None) -> None:
        self._counts: list[int] = list(counts or [])

    def start_run(self) -> None:
        self._counts.append(0)

    def increment(self) -> None:
        if not self._counts:
            self.start_run()
        self._counts[-1] += 1

    def add_call_count(self, count: int) -> None:
        self._counts.append(int(count))

    def get_call_counts(self) -> list[int]:
        return list(self._counts)

    def get_run_count(self) -> int:
        return len(self._counts)

    def get_average_call_count(self) -> float | None:
        if not self._counts:
            return None
        return sum(self._counts) / len(self._counts)

    def get_min_call_count(self) -> int | None:
        return min(self._counts, default=None)

    def get_max_call_count(self) -> int | None:
        return max(self._counts, default=None)

    def unite(self, other: "CallCountData") -> "CallCountData":
        self._counts.extend(other._counts)
        return self


class GoalCalcStatistics(Goal):
    """Goal decorator counting evaluations into a ``CallCountData``.

    Every instance opens a new run entry; the wrapped goal's value is
    returned unchanged.
    """

    def __init__(self, goal: Goal | Callable[[np.ndarray], float], call_count: CallCountData) -> None:
        self.goal = as_goal(goal)
        self.call_count = call_count
        self.call_count.start_run()

    def get(self, solution: np.ndarray) -> float:
        self.call_count.increment()
        return self.goal.get(solution)


class StatisticsLogger(Logger):
    """Records the convergence curve and the final result of a run into ``Statistics``."""

    def __init__(self, statistics: Statistics) -> None:
        self.statistics = statistics

    def start(self, optimizer) -> None:
        self.statistics.start_run()
        self.statistics.add_convergence_value(optimizer.get_best_goal())

    def next_iteration(self, optimizer) -> None:
        self.statistics.add_convergence_value(optimizer.get_best_goal())

    def finish(self, optimizer) -> None:
        self.statistics.add_result(optimizer.get_result())


def get_predicate_success_vec_solution(
    expected: Sequence[float] | np.ndarray,
    delta: Sequence[float] | np.ndarray | float,
) -> SuccessPredicate:
    """Predicate true when every coordinate is within ``delta`` of ``expected``."""
    expected_arr = np.asarray(expected, dtype=float)
    delta_arr = np.broadcast_to(np.abs(np.asarray(delta, dtype=float)), expected_arr.shape)

    def predicate(solution: np.ndarray, goal: float) -> bool:
        solution_arr = np.asarray(solution, dtype=float)
        if solution_arr.shape != expected_arr.shape:
            return False
        return bool(np.all(np.abs(solution_arr - expected_arr) <= delta_arr))

    return predicate


__all__ = [
    "SuccessPredicate",
    "RunResults",
    "Convergence",
    "Statistics",
    "CallCountData",
    "GoalCalcStatistics",
    "StatisticsLogger",
    "get_predicate_success_vec_solution",
]
