"""
Text reports for aggregated run statistics.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .statistics import CallCountData, Statistics, SuccessPredicate


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def format_result_line(index: int, result) -> str:
    if result is None:
        return f"{index:<8}  Failed"
    solution, goal = result
    coords = "".join(f"  {float(x):<20.10f}" for x in solution)
    return f"{index:<8}{coords}  {float(goal):20.10f}"


def results_lines(statistics: Statistics) -> list[str]:
    """One line per run: index, coordinates and goal value, or ``Failed``."""
    return [format_result_line(index, result) for index, result in enumerate(statistics.get_results())]


def convergence_lines(statistics: Statistics) -> list[str]:
    """One line per iteration that has an average best goal value."""
    lines = []
    for n, value in enumerate(statistics.get_convergence().get_average_convergence()):
        if value is None:
            continue
        lines.append(f"{n:<8}{value:15.10e}")
    return lines


def summary(
    statistics: Statistics,
    call_count: CallCountData | None = None,
    predicate: SuccessPredicate | None = None,
) -> dict[str, Any]:
    results = statistics.get_results()
    return {
        "run_count": statistics.get_run_count(),
        "success_rate": results.get_success_rate(predicate) if predicate is not None else None,
        "average_goal": results.get_average_goal(),
        "standard_deviation_goal": results.get_standard_deviation_goal(),
        "average_call_count": call_count.get_average_call_count() if call_count is not None else None,
    }


def summary_lines(summary_data: dict[str, Any]) -> list[str]:
    def fmt(value: Any) -> str:
        if value is None:
            return "n/a"
        if isinstance(value, float):
            return f"{value:.10g}"
        return str(value)

    return [
        f"Runs: {fmt(summary_data.get('run_count'))}",
        f"Success rate: {fmt(summary_data.get('success_rate'))}",
        f"Average goal: {fmt(summary_data.get('average_goal'))}",
        f"Standard deviation goal: {fmt(summary_data.get('standard_deviation_goal'))}",
        f"Average call count: {fmt(summary_data.get('average_call_count'))}",
    ]


def _write_lines(path: str | Path, lines: Iterable[str]) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return out


def write_results(path: str | Path, statistics: Statistics) -> Path:
    out = _write_lines(path, results_lines(statistics))
    _logger().info("Results of %d runs written to %s", statistics.get_run_count(), out)
    return out


def write_convergence(path: str | Path, statistics: Statistics) -> Path:
    out = _write_lines(path, convergence_lines(statistics))
    _logger().info("Average convergence written to %s", out)
    return out


def log_summary(summary_data: dict[str, Any], *, logger: logging.Logger | None = None) -> None:
    """Log a summary produced by ``summary()``."""
    active_logger = logger or _logger()
    for line in summary_lines(summary_data):
        active_logger.info("%s", line)


__all__ = [
    "format_result_line",
    "results_lines",
    "convergence_lines",
    "summary",
    "summary_lines",
    "write_results",
    "write_convergence",
    "log_summary",
]
