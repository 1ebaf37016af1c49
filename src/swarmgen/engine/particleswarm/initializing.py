"""Swarm initializers: starting coordinates and velocities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.foundation.space import IntervalsLike, as_intervals, require_non_negative


class CoordinatesInitializer(ABC):
    """Produces the initial particle positions as an ``(n, dim)`` array."""

    @abstractmethod
    def get_coordinates(self) -> np.ndarray:
        raise NotImplementedError


class VelocityInitializer(ABC):
    """Produces the initial particle velocities as an ``(n, dim)`` array."""

    @abstractmethod
    def get_velocity(self) -> np.ndarray:
        raise NotImplementedError


class RandomCoordinatesInitializer(CoordinatesInitializer):
    """Uniform random positions inside the given intervals."""

    def __init__(
        self,
        intervals: IntervalsLike,
        particles_count: int,
        rng: Optional[np.random.Generator] = None,
    ):
        require_non_negative("particles_count", particles_count)
        self.intervals = as_intervals(intervals)
        self.particles_count = int(particles_count)
        self.rng = rng or np.random.default_rng()

    def get_coordinates(self) -> np.ndarray:
        lower = self.intervals[:, 0]
        upper = self.intervals[:, 1]
        return self.rng.uniform(lower, upper, size=(self.particles_count, lower.shape[0]))


class ZeroVelocityInitializer(VelocityInitializer):
    """All particles start at rest."""

    def __init__(self, dimension: int, particles_count: int):
        require_non_negative("dimension", dimension)
        require_non_negative("particles_count", particles_count)
        self.dimension = int(dimension)
        self.particles_count = int(particles_count)

    def get_velocity(self) -> np.ndarray:
        return np.zeros((self.particles_count, self.dimension), dtype=float)


class RandomVelocityInitializer(VelocityInitializer):
    """Uniform random velocities in ``[-max_velocity, max_velocity]`` per dimension."""

    def __init__(
        self,
        max_velocity: float | np.ndarray,
        dimension: int,
        particles_count: int,
        rng: Optional[np.random.Generator] = None,
    ):
        require_non_negative("dimension", dimension)
        require_non_negative("particles_count", particles_count)
        self.dimension = int(dimension)
        self.particles_count = int(particles_count)
        self.max_velocity = np.broadcast_to(np.abs(np.asarray(max_velocity, dtype=float)), (self.dimension,))
        self.rng = rng or np.random.default_rng()

    def get_velocity(self) -> np.ndarray:
        return self.rng.uniform(
            -self.max_velocity,
            self.max_velocity,
            size=(self.particles_count, self.dimension),
        )


__all__ = [
    "CoordinatesInitializer",
    "VelocityInitializer",
    "RandomCoordinatesInitializer",
    "ZeroVelocityInitializer",
    "RandomVelocityInitializer",
]
