"""Particle swarm optimizer.

Each iteration moves every particle with the configured velocity calculator,
applies the post-velocity clamps and post-move hooks in registration order,
evaluates the goal and updates the personal bests. The global best is
refreshed once per pass from the personal bests, so all particles of one
iteration see the same read-only global best.

Example
-------
>>> intervals = [(-100.0, 100.0)] * 5
>>> optimizer = ParticleSwarmOptimizer(
...     goal,
...     CompositeAny([Threshold(1e-6), MaxIterations(3000)]),
...     RandomCoordinatesInitializer(intervals, 80),
...     ZeroVelocityInitializer(5, 80),
...     CanonicalVelocityCalculator(2.05, 2.05),
...     post_moves=[MoveToBoundary(intervals)],
... )
>>> result = optimizer.find_min()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import numpy as np

from swarmgen.engine.base import Optimizer
from swarmgen.foundation.exceptions import ConfigurationError, DimensionMismatchError
from swarmgen.foundation.goal import Goal

from .initializing import CoordinatesInitializer, VelocityInitializer
from .postmove import PostMove
from .postvelocitycalc import PostVelocityCalc
from .swarm import Particle, Swarm
from .velocitycalc import VelocityCalculator

if TYPE_CHECKING:
    from swarmgen.engine.loggers import Logger
    from swarmgen.engine.stopping import StopChecker


def _declared_dimension(strategy: object) -> int | None:
    intervals = getattr(strategy, "intervals", None)
    if intervals is not None:
        return int(np.shape(intervals)[0])
    dimension = getattr(strategy, "dimension", None)
    return int(dimension) if dimension is not None else None


class ParticleSwarmOptimizer(Optimizer):
    """Particle swarm optimization over a box of continuous coordinates.

    Parameters
    ----------
    goal : Goal or callable
        Function to minimize.
    stop_checker : StopChecker
        Termination criterion, reset at the start of every ``find_min()``.
    coord_initializer : CoordinatesInitializer
        Initial particle positions.
    velocity_initializer : VelocityInitializer
        Initial particle velocities.
    velocity_calculator : VelocityCalculator
        Velocity update rule.
    post_moves : iterable of PostMove, optional
        Hooks applied to every new position, in order.
    post_velocity_calc : iterable of PostVelocityCalc, optional
        Clamps applied to every new velocity, in order.
    loggers : iterable of Logger, optional
        Run observers.
    """

    def __init__(
        self,
        goal: Goal | Callable[[np.ndarray], float],
        stop_checker: "StopChecker",
        coord_initializer: CoordinatesInitializer,
        velocity_initializer: VelocityInitializer,
        velocity_calculator: VelocityCalculator,
        post_moves: Iterable[PostMove] | None = None,
        post_velocity_calc: Iterable[PostVelocityCalc] | None = None,
        loggers: Iterable["Logger"] | None = None,
    ) -> None:
        super().__init__(goal, stop_checker, loggers)
        self._coord_initializer = coord_initializer
        self._velocity_initializer = velocity_initializer
        self._velocity_calculator = velocity_calculator
        self._post_moves: list[PostMove] = list(post_moves or [])
        self._post_velocity_calc: list[PostVelocityCalc] = list(post_velocity_calc or [])
        self._swarm = Swarm()
        self._check_configuration()

    def _check_configuration(self) -> None:
        coord_count = getattr(self._coord_initializer, "particles_count", None)
        velocity_count = getattr(self._velocity_initializer, "particles_count", None)
        if coord_count is not None and velocity_count is not None and coord_count != velocity_count:
            raise ConfigurationError(
                f"Coordinate initializer creates {coord_count} particles, "
                f"velocity initializer creates {velocity_count}.",
                "Use the same particles count for both initializers",
            )

        expected = _declared_dimension(self._coord_initializer)
        if expected is None:
            return
        others = [("velocity initializer", self._velocity_initializer)]
        others += [(f"post move {type(p).__name__}", p) for p in self._post_moves]
        for what, strategy in others:
            dimension = _declared_dimension(strategy)
            if dimension is not None and dimension != expected:
                raise DimensionMismatchError(what, expected, dimension)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_post_moves(self, post_moves: Iterable[PostMove]) -> None:
        self._post_moves = list(post_moves)
        self._check_configuration()

    def set_post_velocity_calc(self, post_velocity_calc: Iterable[PostVelocityCalc]) -> None:
        self._post_velocity_calc = list(post_velocity_calc)

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------

    def get_swarm(self) -> Swarm:
        return self._swarm

    def get_best_solution(self) -> np.ndarray | None:
        return self._swarm.best_coordinates

    def get_best_goal(self) -> float | None:
        return self._swarm.best_goal

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def _initialize(self) -> None:
        coordinates = np.asarray(self._coord_initializer.get_coordinates(), dtype=float)
        velocities = np.asarray(self._velocity_initializer.get_velocity(), dtype=float)
        if coordinates.shape != velocities.shape:
            raise ConfigurationError(
                f"Initial coordinates have shape {coordinates.shape}, "
                f"initial velocities have shape {velocities.shape}.",
                "Initializers must agree on particles count and dimension",
            )

        particles = [
            Particle(coordinates=x.copy(), velocity=v.copy(), value=self._goal.get(x))
            for x, v in zip(coordinates, velocities)
        ]
        self._swarm = Swarm(particles=particles)
        self._swarm.update_best()

    def _next_iteration(self) -> None:
        snapshot = self._swarm.snapshot()
        for particle in self._swarm:
            velocity = self._velocity_calculator.calc_new_velocity(particle, snapshot, self._iteration)
            for post_velocity in self._post_velocity_calc:
                velocity = post_velocity.correct_velocity(velocity)
            particle.velocity = velocity

            coordinates = particle.coordinates + velocity
            for post_move in self._post_moves:
                coordinates = post_move.post_move(coordinates)
            particle.move_to(coordinates, self._goal.get(coordinates))

        self._swarm.update_best()

    def _is_empty(self) -> bool:
        return len(self._swarm) == 0


__all__ = ["ParticleSwarmOptimizer"]
