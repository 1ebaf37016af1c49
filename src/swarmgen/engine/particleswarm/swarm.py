"""Particle and swarm state."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from swarmgen.engine.base import is_better


@dataclass
class Particle:
    """One search agent: position, velocity and personal best."""

    coordinates: np.ndarray
    velocity: np.ndarray
    value: float
    best_personal_coordinates: np.ndarray = field(init=False)
    best_personal_goal: float = field(init=False)

    def __post_init__(self) -> None:
        self.coordinates = np.asarray(self.coordinates, dtype=float)
        self.velocity = np.asarray(self.velocity, dtype=float)
        self.value = float(self.value)
        self.best_personal_coordinates = self.coordinates.copy()
        self.best_personal_goal = self.value

    def move_to(self, coordinates: np.ndarray, value: float) -> bool:
        """Set a new position; returns True if the personal best improved."""
        self.coordinates = coordinates
        self.value = float(value)
        if is_better(self.value, self.best_personal_goal):
            self.best_personal_coordinates = coordinates.copy()
            self.best_personal_goal = self.value
            return True
        return False


def _frozen(array: np.ndarray) -> np.ndarray:
    copy = array.copy()
    copy.setflags(write=False)
    return copy


@dataclass(frozen=True)
class SwarmSnapshot:
    """Swarm-level positions velocity calculators may read during one iteration."""

    best_coordinates: np.ndarray | None
    current_best_coordinates: np.ndarray | None = None
    current_worst_coordinates: np.ndarray | None = None


@dataclass
class Swarm:
    """Particles plus the global best; the global best is written only by the optimizer."""

    particles: list[Particle] = field(default_factory=list)
    best_coordinates: np.ndarray | None = None
    best_goal: float | None = None

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def update_best(self) -> bool:
        """Fold every personal best into the global best; earlier bests win ties."""
        improved = False
        for particle in self.particles:
            if is_better(particle.best_personal_goal, self.best_goal):
                self.best_goal = particle.best_personal_goal
                self.best_coordinates = particle.best_personal_coordinates.copy()
                improved = True
        return improved

    def best_snapshot(self) -> np.ndarray | None:
        """Read-only copy of the global best position for one iteration."""
        if self.best_coordinates is None:
            return None
        return _frozen(self.best_coordinates)

    def snapshot(self) -> "SwarmSnapshot":
        current_best = self.current_best_particle()
        current_worst = self.current_worst_particle()
        return SwarmSnapshot(
            best_coordinates=self.best_snapshot(),
            current_best_coordinates=_frozen(current_best.coordinates) if current_best else None,
            current_worst_coordinates=_frozen(current_worst.coordinates) if current_worst else None,
        )

    def current_best_particle(self) -> Particle | None:
        best: Particle | None = None
        for particle in self.particles:
            if best is None or is_better(particle.value, best.value):
                best = particle
        return best

    def current_worst_particle(self) -> Particle | None:
        worst: Particle | None = None
        for particle in self.particles:
            if np.isnan(particle.value):
                continue
            if worst is None or particle.value > worst.value:
                worst = particle
        return worst


__all__ = ["Particle", "Swarm", "SwarmSnapshot"]
