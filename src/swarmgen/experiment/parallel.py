"""
Fan-out/fan-in execution of many independent optimizer runs.

Runs are split across worker processes. Every worker executes its share
sequentially, each run with a freshly built optimizer, and returns its local
``Statistics``/``CallCountData`` through a future. The coordinator unites the
partial aggregates as they complete; ``unite`` is order-insensitive for every
summary metric, so completion order does not matter.

Notes:
    - With more than one worker, the factory and the goal must be picklable
      (module-level functions or classes).
    - Each run gets its own ``numpy.random.Generator`` spawned from ``seed``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional

import numpy as np

from swarmgen.engine.base import Optimizer
from swarmgen.foundation.goal import Goal
from swarmgen.foundation.space import require_non_negative

from .statistics import CallCountData, GoalCalcStatistics, Statistics, StatisticsLogger


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


OptimizerFactory = Callable[[Goal, np.random.Generator], Optimizer]


def split_runs(run_count: int, n_workers: int) -> list[int]:
    """Distribute ``run_count`` runs over ``n_workers`` as evenly as possible."""
    base, extra = divmod(run_count, n_workers)
    return [base + (1 if i < extra else 0) for i in range(n_workers)]


def run_series(
    factory: OptimizerFactory,
    goal: Goal | Callable[[np.ndarray], float],
    seeds: list[np.random.SeedSequence],
) -> tuple[Statistics, CallCountData]:
    """Run one optimizer per seed sequentially; kept at module level for pickling."""
    statistics = Statistics()
    call_count = CallCountData()
    for seed in seeds:
        run_statistics_data = Statistics()
        counted_goal = GoalCalcStatistics(goal, call_count)
        optimizer = factory(counted_goal, np.random.default_rng(seed))
        optimizer.add_logger(StatisticsLogger(run_statistics_data))
        optimizer.find_min()
        statistics.unite(run_statistics_data)
    return statistics, call_count


def run_statistics(
    factory: OptimizerFactory,
    goal: Goal | Callable[[np.ndarray], float],
    run_count: int,
    n_workers: Optional[int] = None,
    seed: Optional[int] = None,
) -> tuple[Statistics, CallCountData]:
    """Run ``run_count`` independent optimizations and aggregate their statistics.

    Parameters
    ----------
    factory : callable
        ``factory(goal, rng) -> Optimizer``; called once per run with the
        call-counting goal wrapper and the run's random generator.
    goal : Goal or callable
        Function to minimize.
    run_count : int
        Total number of runs.
    n_workers : int, optional
        Worker processes; defaults to ``os.cpu_count()``. ``1`` runs inline.
    seed : int, optional
        Root seed; runs are reproducible per seed although their order in
        the aggregate follows worker completion.

    Returns
    -------
    tuple
        ``(Statistics, CallCountData)`` over all runs.
    """
    require_non_negative("run_count", run_count)
    n_workers = max(1, n_workers or os.cpu_count() or 1)
    seeds = np.random.SeedSequence(seed).spawn(run_count)
    shares = [share for share in split_runs(run_count, n_workers) if share > 0]

    if len(shares) <= 1:
        _logger().info("Running %d optimizations in-process", run_count)
        return run_series(factory, goal, seeds)

    _logger().info("Running %d optimizations on %d workers", run_count, len(shares))
    chunks = []
    start = 0
    for share in shares:
        chunks.append(seeds[start : start + share])
        start += share

    full_statistics = Statistics()
    full_call_count = CallCountData()
    with ProcessPoolExecutor(max_workers=len(chunks)) as ex:
        futures = [ex.submit(run_series, factory, goal, chunk) for chunk in chunks]
        for fut in as_completed(futures):
            statistics, call_count = fut.result()
            full_statistics.unite(statistics)
            full_call_count.unite(call_count)
            _logger().debug("Collected %d runs from a worker", statistics.get_run_count())

    return full_statistics, full_call_count


__all__ = ["OptimizerFactory", "split_runs", "run_series", "run_statistics"]
