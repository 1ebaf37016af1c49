"""Velocity update rules.

Every calculator receives the particle being moved, a read-only snapshot of
the swarm-level positions for the current iteration and the iteration index,
and returns the particle's new velocity. ``r1``, ``r2`` (and ``r3``) are
drawn independently per dimension from U[0, 1).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.foundation.exceptions import InvalidParameterError
from swarmgen.foundation.space import require_non_negative, require_positive

from .swarm import Particle, SwarmSnapshot


def constriction_factor(phi: float, k: float) -> float:
    """Clerc-Kennedy constriction ``2k / |2 - phi - sqrt(phi^2 - 4 phi)|`` for ``phi > 4``."""
    if not phi > 4.0:
        raise InvalidParameterError("phi", phi, "(sum of attraction coefficients) must be greater than 4")
    require_positive("k", k)
    return 2.0 * k / abs(2.0 - phi - math.sqrt(phi * phi - 4.0 * phi))


class VelocityCalculator(ABC):
    """Base class for velocity update rules."""

    @abstractmethod
    def calc_new_velocity(
        self,
        particle: Particle,
        snapshot: SwarmSnapshot,
        iteration: int,
    ) -> np.ndarray:
        raise NotImplementedError


def _attraction(
    rng: np.random.Generator,
    phi: float,
    target: np.ndarray | None,
    coordinates: np.ndarray,
) -> np.ndarray | float:
    if target is None:
        return 0.0
    return phi * rng.random(coordinates.shape) * (target - coordinates)


class ClassicVelocityCalculator(VelocityCalculator):
    """``v' = v + phi_p r1 (pbest - x) + phi_g r2 (gbest - x)``."""

    def __init__(
        self,
        phi_personal: float,
        phi_global: float,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_non_negative("phi_personal", phi_personal)
        require_non_negative("phi_global", phi_global)
        self.phi_personal = float(phi_personal)
        self.phi_global = float(phi_global)
        self.rng = rng or np.random.default_rng()

    def calc_new_velocity(self, particle: Particle, snapshot: SwarmSnapshot, iteration: int) -> np.ndarray:
        x = particle.coordinates
        return (
            particle.velocity
            + _attraction(self.rng, self.phi_personal, particle.best_personal_coordinates, x)
            + _attraction(self.rng, self.phi_global, snapshot.best_coordinates, x)
        )


class CanonicalVelocityCalculator(VelocityCalculator):
    """Classic update scaled by the constriction factor.

    ``v' = xi (v + phi_p r1 (pbest - x) + phi_g r2 (gbest - x))`` with
    ``xi = 2k / |2 - phi - sqrt(phi^2 - 4 phi)|`` and ``phi = phi_p + phi_g``.
    """

    def __init__(
        self,
        phi_personal: float,
        phi_global: float,
        k: float = 1.0,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_non_negative("phi_personal", phi_personal)
        require_non_negative("phi_global", phi_global)
        self.phi_personal = float(phi_personal)
        self.phi_global = float(phi_global)
        self.k = float(k)
        self.xi = constriction_factor(self.phi_personal + self.phi_global, self.k)
        self.rng = rng or np.random.default_rng()

    def calc_new_velocity(self, particle: Particle, snapshot: SwarmSnapshot, iteration: int) -> np.ndarray:
        x = particle.coordinates
        return self.xi * (
            particle.velocity
            + _attraction(self.rng, self.phi_personal, particle.best_personal_coordinates, x)
            + _attraction(self.rng, self.phi_global, snapshot.best_coordinates, x)
        )


class InertiaVelocityCalculator(VelocityCalculator):
    """Classic update with an inertia weight decreasing linearly over ``t_max`` iterations.

    ``w(t) = w_max - (w_max - w_min) * min(t, t_max) / t_max``
    """

    def __init__(
        self,
        phi_personal: float,
        phi_global: float,
        w_min: float,
        w_max: float,
        t_max: int,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_non_negative("phi_personal", phi_personal)
        require_non_negative("phi_global", phi_global)
        require_positive("t_max", t_max)
        if w_min > w_max:
            raise InvalidParameterError("w_min", w_min, "must not exceed w_max")
        self.phi_personal = float(phi_personal)
        self.phi_global = float(phi_global)
        self.w_min = float(w_min)
        self.w_max = float(w_max)
        self.t_max = int(t_max)
        self.rng = rng or np.random.default_rng()

    def inertia(self, iteration: int) -> float:
        t = min(max(iteration, 0), self.t_max)
        return self.w_max - (self.w_max - self.w_min) * t / self.t_max

    def calc_new_velocity(self, particle: Particle, snapshot: SwarmSnapshot, iteration: int) -> np.ndarray:
        x = particle.coordinates
        return (
            self.inertia(iteration) * particle.velocity
            + _attraction(self.rng, self.phi_personal, particle.best_personal_coordinates, x)
            + _attraction(self.rng, self.phi_global, snapshot.best_coordinates, x)
        )


class NegativeReinforcement(VelocityCalculator):
    """Constricted update that also repels particles from the current worst position.

    ``v' = xi (v + phi_bp r1 (pbest - x) + phi_bc r2 (cbest - x) - phi_w r3 (cworst - x))``
    where ``cbest``/``cworst`` are the best and worst positions of the
    current iteration and ``xi`` uses ``phi = phi_bp + phi_bc``.
    """

    def __init__(
        self,
        phi_best_personal: float,
        phi_best_current: float,
        phi_worst: float,
        k: float = 1.0,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_non_negative("phi_best_personal", phi_best_personal)
        require_non_negative("phi_best_current", phi_best_current)
        require_non_negative("phi_worst", phi_worst)
        self.phi_best_personal = float(phi_best_personal)
        self.phi_best_current = float(phi_best_current)
        self.phi_worst = float(phi_worst)
        self.k = float(k)
        self.xi = constriction_factor(self.phi_best_personal + self.phi_best_current, self.k)
        self.rng = rng or np.random.default_rng()

    def calc_new_velocity(self, particle: Particle, snapshot: SwarmSnapshot, iteration: int) -> np.ndarray:
        x = particle.coordinates
        return self.xi * (
            particle.velocity
            + _attraction(self.rng, self.phi_best_personal, particle.best_personal_coordinates, x)
            + _attraction(self.rng, self.phi_best_current, snapshot.current_best_coordinates, x)
            - _attraction(self.rng, self.phi_worst, snapshot.current_worst_coordinates, x)
        )


__all__ = [
    "constriction_factor",
    "VelocityCalculator",
    "ClassicVelocityCalculator",
    "CanonicalVelocityCalculator",
    "InertiaVelocityCalculator",
    "NegativeReinforcement",
]
