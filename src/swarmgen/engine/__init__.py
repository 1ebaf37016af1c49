"""Optimization engine: shared optimizer lifecycle, stop checkers, loggers, PSO and GA."""

from .base import Optimizer, RunResult, is_better
from .loggers import Logger, ResultOnlyLogger, TimeStartStopLogger, VerboseLogger
from .stopping import CompositeAll, CompositeAny, GoalNotChange, MaxIterations, StopChecker, Threshold
from .particleswarm import ParticleSwarmOptimizer
from .genetic import GeneticOptimizer
from .config import GAConfig, PSOConfig, build_ga_optimizer, build_pso_optimizer

__all__ = [
    "Optimizer",
    "RunResult",
    "is_better",
    "Logger",
    "ResultOnlyLogger",
    "TimeStartStopLogger",
    "VerboseLogger",
    "CompositeAll",
    "CompositeAny",
    "GoalNotChange",
    "MaxIterations",
    "StopChecker",
    "Threshold",
    "ParticleSwarmOptimizer",
    "GeneticOptimizer",
    "GAConfig",
    "PSOConfig",
    "build_ga_optimizer",
    "build_pso_optimizer",
]
