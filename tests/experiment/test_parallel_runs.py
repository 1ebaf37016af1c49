from functools import partial

import numpy as np
import pytest

from swarmgen.engine.config import GAConfig, PSOConfig, build_ga_optimizer, build_pso_optimizer
from swarmgen.experiment.parallel import run_statistics, split_runs
from swarmgen.experiment.statistics import get_predicate_success_vec_solution
from swarmgen.foundation.exceptions import InvalidParameterError


def _pso_config(max_iterations=30):
    return (
        PSOConfig()
        .intervals([(-5.0, 5.0)] * 2)
        .particles_count(10)
        .velocity("canonical", phi_personal=2.05, phi_global=2.05)
        .post_move("boundary")
        .max_iterations(max_iterations)
        .fixed()
    )


@pytest.mark.parametrize(
    "run_count, n_workers, expected",
    [(10, 3, [4, 3, 3]), (2, 4, [1, 1, 0, 0]), (0, 2, [0, 0]), (6, 1, [6])],
)
def test_split_runs(run_count, n_workers, expected):
    assert split_runs(run_count, n_workers) == expected


def test_inline_runs_collect_every_run():
    factory = partial(build_pso_optimizer, _pso_config())
    statistics, call_count = run_statistics(factory, np.linalg.norm, 4, n_workers=1, seed=1)
    assert statistics.get_run_count() == 4
    assert call_count.get_call_counts() == [10 * 31] * 4
    assert all(len(curve) == 31 for curve in statistics.get_convergence())
    rate = statistics.get_results().get_success_rate(get_predicate_success_vec_solution([0.0, 0.0], 1.0))
    assert rate == 1.0


def test_seed_makes_runs_reproducible():
    factory = partial(build_pso_optimizer, _pso_config())
    first, _ = run_statistics(factory, np.linalg.norm, 3, n_workers=1, seed=7)
    second, _ = run_statistics(factory, np.linalg.norm, 3, n_workers=1, seed=7)
    assert [r[1] for r in first.get_results()] == [r[1] for r in second.get_results()]


def test_zero_runs():
    factory = partial(build_pso_optimizer, _pso_config())
    statistics, call_count = run_statistics(factory, np.linalg.norm, 0, n_workers=2)
    assert statistics.get_run_count() == 0
    assert call_count.get_average_call_count() is None


def test_negative_run_count_rejected():
    with pytest.raises(InvalidParameterError):
        run_statistics(partial(build_pso_optimizer, _pso_config()), np.linalg.norm, -1)


def test_exceptions_from_goal_propagate():
    def broken(x):
        raise RuntimeError("goal failed")

    with pytest.raises(RuntimeError, match="goal failed"):
        run_statistics(partial(build_pso_optimizer, _pso_config()), broken, 2, n_workers=1)


@pytest.mark.smoke
def test_worker_processes_match_inline_aggregate():
    # factory and goal are pickled into the worker processes
    factory = partial(build_pso_optimizer, _pso_config(max_iterations=20))
    goal = np.add.reduce
    inline, inline_calls = run_statistics(factory, goal, 6, n_workers=1, seed=3)
    pooled, pooled_calls = run_statistics(factory, goal, 6, n_workers=2, seed=3)

    assert pooled.get_run_count() == 6
    assert pooled_calls.get_call_counts() == inline_calls.get_call_counts()
    assert pooled.get_results().get_average_goal() == pytest.approx(inline.get_results().get_average_goal())
    assert pooled.get_convergence().get_average_convergence() == pytest.approx(
        inline.get_convergence().get_average_convergence()
    )


def test_ga_factory_runs_inline():
    cfg = (
        GAConfig()
        .intervals([(-5.0, 5.0)] * 2)
        .population_size(16)
        .pairing("random")
        .cross("mean")
        .mutation("bitwise", probability=10, change_bits_count=2)
        .max_iterations(10)
        .fixed()
    )
    statistics, call_count = run_statistics(partial(build_ga_optimizer, cfg), np.linalg.norm, 3, n_workers=1, seed=0)
    assert statistics.get_run_count() == 3
    assert all(count >= 16 for count in call_count.get_call_counts())
