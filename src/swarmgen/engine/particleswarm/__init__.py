"""Particle swarm optimization: swarm state, update strategies and optimizer."""

from .initializing import (
    CoordinatesInitializer,
    RandomCoordinatesInitializer,
    RandomVelocityInitializer,
    VelocityInitializer,
    ZeroVelocityInitializer,
)
from .optimizer import ParticleSwarmOptimizer
from .postmove import MoveToBoundary, PostMove, RandomTeleport
from .postvelocitycalc import MaxVelocityAbs, MaxVelocityDimensions, PostVelocityCalc
from .swarm import Particle, Swarm, SwarmSnapshot
from .velocitycalc import (
    CanonicalVelocityCalculator,
    ClassicVelocityCalculator,
    InertiaVelocityCalculator,
    NegativeReinforcement,
    VelocityCalculator,
    constriction_factor,
)

__all__ = [
    "CoordinatesInitializer",
    "RandomCoordinatesInitializer",
    "RandomVelocityInitializer",
    "VelocityInitializer",
    "ZeroVelocityInitializer",
    "ParticleSwarmOptimizer",
    "MoveToBoundary",
    "PostMove",
    "RandomTeleport",
    "MaxVelocityAbs",
    "MaxVelocityDimensions",
    "PostVelocityCalc",
    "Particle",
    "Swarm",
    "SwarmSnapshot",
    "CanonicalVelocityCalculator",
    "ClassicVelocityCalculator",
    "InertiaVelocityCalculator",
    "NegativeReinforcement",
    "VelocityCalculator",
    "constriction_factor",
]
