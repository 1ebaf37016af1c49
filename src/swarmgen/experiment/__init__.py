"""Multi-run experiments: statistics aggregation, parallel execution and reports."""

from .parallel import OptimizerFactory, run_series, run_statistics, split_runs
from .report import (
    convergence_lines,
    log_summary,
    results_lines,
    summary,
    summary_lines,
    write_convergence,
    write_results,
)
from .statistics import (
    CallCountData,
    Convergence,
    GoalCalcStatistics,
    RunResults,
    Statistics,
    StatisticsLogger,
    SuccessPredicate,
    get_predicate_success_vec_solution,
)

__all__ = [
    "OptimizerFactory",
    "run_series",
    "run_statistics",
    "split_runs",
    "convergence_lines",
    "log_summary",
    "results_lines",
    "summary",
    "summary_lines",
    "write_convergence",
    "write_results",
    "CallCountData",
    "Convergence",
    "GoalCalcStatistics",
    "RunResults",
    "Statistics",
    "StatisticsLogger",
    "SuccessPredicate",
    "get_predicate_success_vec_solution",
]
