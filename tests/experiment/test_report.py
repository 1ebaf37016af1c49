import logging

import numpy as np
import pytest

from swarmgen.experiment.report import (
    convergence_lines,
    format_result_line,
    log_summary,
    summary,
    summary_lines,
    write_convergence,
    write_results,
)
from swarmgen.experiment.statistics import CallCountData, Statistics, get_predicate_success_vec_solution


@pytest.fixture
def statistics():
    stats = Statistics()
    stats.start_run()
    for value in (2.0, 1.0):
        stats.add_convergence_value(value)
    stats.add_result((np.array([0.5, -1.25]), 1.0))
    stats.start_run()
    for value in (None, None, None):
        stats.add_convergence_value(value)
    stats.add_result(None)
    return stats


def test_result_line_format():
    line = format_result_line(3, (np.array([1.5]), 0.25))
    assert line == f"{3:<8}" + f"  {1.5:<20.10f}" + f"  {0.25:20.10f}"
    assert format_result_line(12, None) == f"{12:<8}  Failed"


def test_write_results(tmp_path, statistics):
    path = write_results(tmp_path / "out" / "results.txt", statistics)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("0       ")
    assert "0.5000000000" in lines[0]
    assert "-1.2500000000" in lines[0]
    assert lines[0].endswith("1.0000000000")
    assert lines[1] == f"{1:<8}  Failed"


def test_convergence_lines_skip_iterations_without_value(tmp_path, statistics):
    lines = convergence_lines(statistics)
    assert lines == [f"{0:<8}{2.0:15.10e}", f"{1:<8}{1.0:15.10e}"]
    path = write_convergence(tmp_path / "convergence.txt", statistics)
    assert path.read_text(encoding="utf-8").splitlines() == lines


def test_summary(statistics):
    calls = CallCountData([10, 30])
    data = summary(statistics, calls, get_predicate_success_vec_solution([0.5, -1.25], 0.01))
    assert data == {
        "run_count": 2,
        "success_rate": 0.5,
        "average_goal": 1.0,
        "standard_deviation_goal": 0.0,
        "average_call_count": 20.0,
    }


def test_summary_without_optional_inputs(caplog):
    data = summary(Statistics())
    assert data["run_count"] == 0
    assert data["success_rate"] is None
    assert data["average_call_count"] is None
    lines = summary_lines(data)
    assert lines[0] == "Runs: 0"
    assert lines[1] == "Success rate: n/a"

    with caplog.at_level(logging.INFO, logger="swarmgen.experiment.report"):
        log_summary(data)
    assert [record.getMessage() for record in caplog.records] == lines
