"""Optimizer configuration: fluent builders, frozen config data and optimizer builders.

Examples:
    from swarmgen.engine.config import GAConfig, build_ga_optimizer

    cfg = (
        GAConfig()
        .intervals([(-500, 500)] * 5)
        .population_size(800)
        .pairing("tournament", families_count=400, rounds_count=5)
        .cross("float_exp")
        .mutation("bitwise", probability=15, change_bits_count=3)
        .max_iterations(3000)
        .fixed()
    )
    optimizer = build_ga_optimizer(cfg, goal)
"""

from .builders import (
    GENE_CROSSES,
    GENE_MUTATIONS,
    PAIRINGS,
    POST_MOVES,
    POST_VELOCITY_CALCS,
    PRE_BIRTHS,
    SELECTIONS,
    VELOCITY_CALCULATORS,
    VELOCITY_INITIALIZERS,
    build_ga_optimizer,
    build_pso_optimizer,
    build_stop_checker,
)
from .ga import GAConfig, GAConfigData
from .pso import PSOConfig, PSOConfigData

__all__ = [
    "PSOConfig",
    "PSOConfigData",
    "GAConfig",
    "GAConfigData",
    "build_pso_optimizer",
    "build_ga_optimizer",
    "build_stop_checker",
    "VELOCITY_CALCULATORS",
    "VELOCITY_INITIALIZERS",
    "POST_VELOCITY_CALCS",
    "POST_MOVES",
    "PAIRINGS",
    "GENE_CROSSES",
    "GENE_MUTATIONS",
    "SELECTIONS",
    "PRE_BIRTHS",
]
