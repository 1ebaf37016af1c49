from .engine import (
    CompositeAll,
    CompositeAny,
    GAConfig,
    GeneticOptimizer,
    GoalNotChange,
    Logger,
    MaxIterations,
    Optimizer,
    ParticleSwarmOptimizer,
    PSOConfig,
    ResultOnlyLogger,
    StopChecker,
    Threshold,
    TimeStartStopLogger,
    VerboseLogger,
    build_ga_optimizer,
    build_pso_optimizer,
)
from .experiment import (
    CallCountData,
    Statistics,
    StatisticsLogger,
    get_predicate_success_vec_solution,
    run_statistics,
)
from .foundation import Goal, GoalFromFunction, SwarmGenError, configure_swarmgen_logging

__version__ = "0.3.0"

__all__ = [
    "CompositeAll",
    "CompositeAny",
    "GAConfig",
    "GeneticOptimizer",
    "GoalNotChange",
    "Logger",
    "MaxIterations",
    "Optimizer",
    "ParticleSwarmOptimizer",
    "PSOConfig",
    "ResultOnlyLogger",
    "StopChecker",
    "Threshold",
    "TimeStartStopLogger",
    "VerboseLogger",
    "build_ga_optimizer",
    "build_pso_optimizer",
    "CallCountData",
    "Statistics",
    "StatisticsLogger",
    "get_predicate_success_vec_solution",
    "run_statistics",
    "Goal",
    "GoalFromFunction",
    "SwarmGenError",
    "configure_swarmgen_logging",
]
