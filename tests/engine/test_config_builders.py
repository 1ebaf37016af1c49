import json

import numpy as np
import pytest

from swarmgen.engine.config import (
    GAConfig,
    PSOConfig,
    build_ga_optimizer,
    build_pso_optimizer,
    build_stop_checker,
)
from swarmgen.engine.genetic import (
    CheckChromoInterval,
    FloatCrossExp,
    GeneticOptimizer,
    KillFitnessNaN,
    LimitPopulation,
    RejectDuplicates,
    Tournament,
)
from swarmgen.engine.particleswarm import (
    CanonicalVelocityCalculator,
    MaxVelocityAbs,
    MoveToBoundary,
    ParticleSwarmOptimizer,
    RandomVelocityInitializer,
)
from swarmgen.engine.stopping import CompositeAny, GoalNotChange, MaxIterations, Threshold
from swarmgen.foundation.exceptions import ConfigurationError, InvalidOperatorError, MissingConfigError


def sphere(x):
    return float(np.sum(x**2))


def _pso_config():
    return (
        PSOConfig()
        .intervals([(-10.0, 10.0)] * 3)
        .particles_count(12)
        .velocity("canonical", phi_personal=2.05, phi_global=2.05)
        .post_velocity("max_abs", max_velocity=1.0)
        .post_move("boundary")
        .threshold(1e-8)
        .max_iterations(40)
    )


def _ga_config():
    return (
        GAConfig()
        .intervals([(-5.0, 5.0)] * 2)
        .population_size(20)
        .pairing("tournament", families_count=10, rounds_count=2)
        .cross("float_exp")
        .mutation("bitwise", probability=15, change_bits_count=3)
        .max_iterations(20)
    )


def test_pso_config_fixed_is_frozen_and_serializable():
    cfg = _pso_config().fixed()
    assert cfg.particles_count == 12
    assert cfg.velocity_init == ("zero", {})
    assert cfg.post_velocity == (("max_abs", {"max_velocity": 1.0}),)
    with pytest.raises(AttributeError):
        cfg.particles_count = 5
    data = json.loads(cfg.to_json())
    assert data["velocity"] == ["canonical", {"phi_personal": 2.05, "phi_global": 2.05}]
    assert data["intervals"] == [[-10.0, 10.0]] * 3
    assert cfg.to_dict()["max_iterations"] == 40


def test_pso_config_missing_fields():
    with pytest.raises(MissingConfigError) as excinfo:
        PSOConfig().intervals([(-1.0, 1.0)]).max_iterations(5).fixed()
    assert excinfo.value.details["fields"] == ["particles_count", "velocity"]
    assert "PSOConfig" in str(excinfo.value)


def test_config_requires_a_stop_criterion():
    with pytest.raises(MissingConfigError):
        PSOConfig().intervals([(-1.0, 1.0)]).particles_count(3).velocity("classic", phi_personal=1, phi_global=1).fixed()


def test_config_rejects_bad_intervals_early():
    with pytest.raises(ConfigurationError):
        PSOConfig().intervals([(1.0, -1.0)])


def test_build_pso_optimizer_wires_strategies():
    optimizer = build_pso_optimizer(_pso_config().fixed(), sphere, rng=np.random.default_rng(0))
    assert isinstance(optimizer, ParticleSwarmOptimizer)
    assert isinstance(optimizer._velocity_calculator, CanonicalVelocityCalculator)
    assert isinstance(optimizer._post_velocity_calc[0], MaxVelocityAbs)
    assert isinstance(optimizer._post_moves[0], MoveToBoundary)
    solution, goal = optimizer.find_min()
    assert solution.shape == (3,)
    assert np.all(np.abs(solution) <= 10.0)


def test_build_pso_random_velocity_init():
    cfg = _pso_config().velocity_init("random", max_velocity=2.0).fixed()
    optimizer = build_pso_optimizer(cfg, sphere, rng=np.random.default_rng(0))
    assert isinstance(optimizer._velocity_initializer, RandomVelocityInitializer)
    assert optimizer._velocity_initializer.dimension == 3


def test_builders_are_reproducible_with_seeded_rng():
    cfg = _pso_config().fixed()
    first = build_pso_optimizer(cfg, sphere, rng=np.random.default_rng(5)).find_min()
    second = build_pso_optimizer(cfg, sphere, rng=np.random.default_rng(5)).find_min()
    np.testing.assert_array_equal(first[0], second[0])


def test_unknown_strategy_name_suggests_close_match():
    cfg = PSOConfig().intervals([(-1.0, 1.0)]).particles_count(3).velocity("canonicl").max_iterations(3).fixed()
    with pytest.raises(InvalidOperatorError) as excinfo:
        build_pso_optimizer(cfg, lambda x: 0.0)
    assert "canonical" in str(excinfo.value)


def test_wrong_strategy_arguments_raise_configuration_error():
    cfg = (
        PSOConfig()
        .intervals([(-1.0, 1.0)])
        .particles_count(3)
        .velocity("canonical", phi=4.1)
        .max_iterations(3)
        .fixed()
    )
    with pytest.raises(ConfigurationError):
        build_pso_optimizer(cfg, lambda x: 0.0)


def test_ga_config_defaults():
    cfg = _ga_config().fixed()
    assert cfg.mutation == ("bitwise", {"change_bits_count": 3})
    assert cfg.mutation_probability == 15.0
    assert cfg.selections == (("kill_nan", {}), ("limit", {"max_count": 20}))
    assert cfg.pre_births == (("interval", {}), ("unique", {}))


def test_ga_config_missing_fields():
    with pytest.raises(MissingConfigError) as excinfo:
        GAConfig().population_size(10).max_iterations(1).fixed()
    assert excinfo.value.details["fields"] == ["intervals", "pairing", "cross", "mutation"]


def test_build_ga_optimizer_wires_strategies():
    optimizer = build_ga_optimizer(_ga_config().fixed(), sphere, rng=np.random.default_rng(0))
    assert isinstance(optimizer, GeneticOptimizer)
    assert isinstance(optimizer._pairing, Tournament)
    assert optimizer._pairing.rounds_count == 2
    assert isinstance(optimizer._cross.single_cross, FloatCrossExp)
    assert optimizer._mutation.probability == 15.0
    assert isinstance(optimizer._selections[0], KillFitnessNaN)
    assert isinstance(optimizer._selections[1], LimitPopulation)
    assert optimizer._selections[1].max_count == 20
    assert isinstance(optimizer._pre_births[0], CheckChromoInterval)
    assert isinstance(optimizer._pre_births[1], RejectDuplicates)
    solution, _ = optimizer.find_min()
    assert np.all(np.abs(solution) <= 5.0)


def test_explicit_selection_replaces_defaults():
    cfg = _ga_config().selection("limit", max_count=5).fixed()
    optimizer = build_ga_optimizer(cfg, sphere, rng=np.random.default_rng(0))
    assert len(optimizer._selections) == 1
    assert optimizer._selections[0].max_count == 5


def test_build_stop_checker_combinations():
    single = build_stop_checker(_ga_config().fixed())
    assert isinstance(single, MaxIterations)

    combined = build_stop_checker(_ga_config().threshold(1e-3).goal_not_change(10, 1e-6).fixed())
    assert isinstance(combined, CompositeAny)
    kinds = [type(checker) for checker in combined.checkers]
    assert kinds == [Threshold, GoalNotChange, MaxIterations]
