"""
Turn frozen configs into ready-to-run optimizers.

Strategy names are resolved through one registry per strategy kind. Every
registered builder receives the run's ``_BuildContext`` (intervals, swarm or
population size, random generator) plus the keyword arguments stored in the
config, so interval-aware and randomized strategies share one search space
and one generator per run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

import numpy as np

from swarmgen.engine.genetic import (
    BitwiseMutation,
    CheckChromoInterval,
    CrossBitwise,
    CrossMean,
    FloatCrossExp,
    GeneticOptimizer,
    KillFitnessNaN,
    LimitPopulation,
    RandomCreator,
    RandomPairing,
    RejectDuplicates,
    Tournament,
    VecCrossAllGenes,
    VecMutation,
)
from swarmgen.engine.loggers import Logger
from swarmgen.engine.particleswarm import (
    CanonicalVelocityCalculator,
    ClassicVelocityCalculator,
    InertiaVelocityCalculator,
    MaxVelocityAbs,
    MaxVelocityDimensions,
    MoveToBoundary,
    NegativeReinforcement,
    ParticleSwarmOptimizer,
    RandomCoordinatesInitializer,
    RandomTeleport,
    RandomVelocityInitializer,
    ZeroVelocityInitializer,
)
from swarmgen.engine.stopping import CompositeAny, GoalNotChange, MaxIterations, StopChecker, Threshold
from swarmgen.foundation.exceptions import ConfigurationError
from swarmgen.foundation.goal import Goal
from swarmgen.foundation.registry import Registry

from .base import StrategySpec
from .ga import GAConfigData
from .pso import PSOConfigData


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class _BuildContext:
    intervals: np.ndarray
    count: int
    rng: np.random.Generator

    @property
    def dimension(self) -> int:
        return int(self.intervals.shape[0])


StrategyBuilder = Callable[..., Any]

VELOCITY_CALCULATORS: Registry[StrategyBuilder] = Registry("velocity")
VELOCITY_INITIALIZERS: Registry[StrategyBuilder] = Registry("velocity_init")
POST_VELOCITY_CALCS: Registry[StrategyBuilder] = Registry("post_velocity")
POST_MOVES: Registry[StrategyBuilder] = Registry("post_move")
PAIRINGS: Registry[StrategyBuilder] = Registry("pairing")
GENE_CROSSES: Registry[StrategyBuilder] = Registry("cross")
GENE_MUTATIONS: Registry[StrategyBuilder] = Registry("mutation")
SELECTIONS: Registry[StrategyBuilder] = Registry("selection")
PRE_BIRTHS: Registry[StrategyBuilder] = Registry("pre_birth")


def _register_defaults() -> None:
    VELOCITY_CALCULATORS.register("classic", lambda ctx, **kw: ClassicVelocityCalculator(rng=ctx.rng, **kw))
    VELOCITY_CALCULATORS.register("canonical", lambda ctx, **kw: CanonicalVelocityCalculator(rng=ctx.rng, **kw))
    VELOCITY_CALCULATORS.register("inertia", lambda ctx, **kw: InertiaVelocityCalculator(rng=ctx.rng, **kw))
    VELOCITY_CALCULATORS.register(
        "negative_reinforcement", lambda ctx, **kw: NegativeReinforcement(rng=ctx.rng, **kw)
    )

    VELOCITY_INITIALIZERS.register("zero", lambda ctx: ZeroVelocityInitializer(ctx.dimension, ctx.count))
    VELOCITY_INITIALIZERS.register(
        "random",
        lambda ctx, max_velocity: RandomVelocityInitializer(max_velocity, ctx.dimension, ctx.count, rng=ctx.rng),
    )

    POST_VELOCITY_CALCS.register("max_dimensions", lambda ctx, max_velocity: MaxVelocityDimensions(max_velocity))
    POST_VELOCITY_CALCS.register("max_abs", lambda ctx, max_velocity: MaxVelocityAbs(max_velocity))

    POST_MOVES.register("boundary", lambda ctx: MoveToBoundary(ctx.intervals))
    POST_MOVES.register(
        "teleport", lambda ctx, probability: RandomTeleport(ctx.intervals, probability, rng=ctx.rng)
    )

    PAIRINGS.register("random", lambda ctx, **kw: RandomPairing(rng=ctx.rng, **kw))
    PAIRINGS.register("tournament", lambda ctx, **kw: Tournament(rng=ctx.rng, **kw))

    GENE_CROSSES.register("float_exp", lambda ctx: FloatCrossExp(rng=ctx.rng))
    GENE_CROSSES.register("bitwise", lambda ctx: CrossBitwise(rng=ctx.rng))
    GENE_CROSSES.register("mean", lambda ctx: CrossMean())

    GENE_MUTATIONS.register("bitwise", lambda ctx, **kw: BitwiseMutation(rng=ctx.rng, **kw))

    SELECTIONS.register("kill_nan", lambda ctx: KillFitnessNaN())
    SELECTIONS.register("limit", lambda ctx, max_count=None: LimitPopulation(ctx.count if max_count is None else max_count))

    PRE_BIRTHS.register("interval", lambda ctx: CheckChromoInterval(ctx.intervals))
    PRE_BIRTHS.register("unique", lambda ctx: RejectDuplicates())


_register_defaults()


def _resolve(registry: Registry[StrategyBuilder], spec: StrategySpec, ctx: _BuildContext) -> Any:
    name, kwargs = spec
    builder = registry.get(name)
    try:
        return builder(ctx, **kwargs)
    except TypeError as exc:
        raise ConfigurationError(
            f"Invalid arguments for {registry.name} strategy '{name}': {sorted(kwargs)}.",
            suggestion=str(exc),
            details={"operator_type": registry.name, "operator_name": name},
        ) from exc


def build_stop_checker(config: PSOConfigData | GAConfigData) -> StopChecker:
    """Combine the configured stop criteria with ``CompositeAny``."""
    checkers: list[StopChecker] = []
    if config.threshold is not None:
        checkers.append(Threshold(config.threshold))
    if config.goal_not_change is not None:
        max_iter, delta = config.goal_not_change
        checkers.append(GoalNotChange(max_iter, delta))
    if config.max_iterations is not None:
        checkers.append(MaxIterations(config.max_iterations))
    if len(checkers) == 1:
        return checkers[0]
    return CompositeAny(checkers)


def build_pso_optimizer(
    config: PSOConfigData,
    goal: Goal | Callable[[np.ndarray], float],
    rng: Optional[np.random.Generator] = None,
    loggers: Optional[Iterable[Logger]] = None,
) -> ParticleSwarmOptimizer:
    ctx = _BuildContext(np.asarray(config.intervals, dtype=float), config.particles_count, rng or np.random.default_rng())
    optimizer = ParticleSwarmOptimizer(
        goal,
        build_stop_checker(config),
        coord_initializer=RandomCoordinatesInitializer(ctx.intervals, ctx.count, rng=ctx.rng),
        velocity_initializer=_resolve(VELOCITY_INITIALIZERS, config.velocity_init, ctx),
        velocity_calculator=_resolve(VELOCITY_CALCULATORS, config.velocity, ctx),
        post_moves=[_resolve(POST_MOVES, spec, ctx) for spec in config.post_move],
        post_velocity_calc=[_resolve(POST_VELOCITY_CALCS, spec, ctx) for spec in config.post_velocity],
        loggers=loggers,
    )
    _logger().debug("Built particle swarm optimizer: %s", config.to_json())
    return optimizer


def build_ga_optimizer(
    config: GAConfigData,
    goal: Goal | Callable[[np.ndarray], float],
    rng: Optional[np.random.Generator] = None,
    loggers: Optional[Iterable[Logger]] = None,
) -> GeneticOptimizer:
    ctx = _BuildContext(np.asarray(config.intervals, dtype=float), config.population_size, rng or np.random.default_rng())
    mutation = VecMutation(config.mutation_probability, _resolve(GENE_MUTATIONS, config.mutation, ctx), rng=ctx.rng)
    optimizer = GeneticOptimizer(
        goal,
        build_stop_checker(config),
        creator=RandomCreator(ctx.count, ctx.intervals, rng=ctx.rng),
        pairing=_resolve(PAIRINGS, config.pairing, ctx),
        cross=VecCrossAllGenes(_resolve(GENE_CROSSES, config.cross, ctx)),
        mutation=mutation,
        selections=[_resolve(SELECTIONS, spec, ctx) for spec in config.selections],
        pre_births=[_resolve(PRE_BIRTHS, spec, ctx) for spec in config.pre_births],
        loggers=loggers,
    )
    _logger().debug("Built genetic optimizer: %s", config.to_json())
    return optimizer


__all__ = [
    "VELOCITY_CALCULATORS",
    "VELOCITY_INITIALIZERS",
    "POST_VELOCITY_CALCS",
    "POST_MOVES",
    "PAIRINGS",
    "GENE_CROSSES",
    "GENE_MUTATIONS",
    "SELECTIONS",
    "PRE_BIRTHS",
    "build_stop_checker",
    "build_pso_optimizer",
    "build_ga_optimizer",
]
