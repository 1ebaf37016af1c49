"""Genetic algorithm optimizer.

One generation:

1. the pairing picks families of parents,
2. the cross strategy turns every family into children,
3. the mutation strategy perturbs each child,
4. pre-birth filters discard invalid children before evaluation,
5. admitted children are evaluated and join the population,
6. the selection chain kills individuals in registration order; the dead
   are removed after every selection step.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import numpy as np

from swarmgen.engine.base import Optimizer
from swarmgen.foundation.exceptions import DimensionMismatchError
from swarmgen.foundation.goal import Goal

from .creation import Creator
from .cross import Cross
from .mutation import Mutation
from .pairing import Pairing
from .population import Individual, Population
from .pre_birth import PreBirth
from .selection import Selection

if TYPE_CHECKING:
    from swarmgen.engine.loggers import Logger
    from swarmgen.engine.stopping import StopChecker


class GeneticOptimizer(Optimizer):
    """Genetic algorithm over real-valued chromosomes.

    Parameters
    ----------
    goal : Goal or callable
        Function to minimize.
    stop_checker : StopChecker
        Termination criterion, reset at the start of every ``find_min()``.
    creator : Creator
        Builds the initial chromosomes.
    pairing : Pairing
        Parent selection.
    cross : Cross
        Crossover of one family into children.
    mutation : Mutation
        Perturbation of children.
    selections : iterable of Selection
        Survivor selection chain, applied in order.
    pre_births : iterable of PreBirth, optional
        Child filters applied before evaluation, in order.
    loggers : iterable of Logger, optional
        Run observers.
    """

    def __init__(
        self,
        goal: Goal | Callable[[np.ndarray], float],
        stop_checker: "StopChecker",
        creator: Creator,
        pairing: Pairing,
        cross: Cross,
        mutation: Mutation,
        selections: Iterable[Selection],
        pre_births: Iterable[PreBirth] | None = None,
        loggers: Iterable["Logger"] | None = None,
    ) -> None:
        super().__init__(goal, stop_checker, loggers)
        self._creator = creator
        self._pairing = pairing
        self._cross = cross
        self._mutation = mutation
        self._selections: list[Selection] = list(selections)
        self._pre_births: list[PreBirth] = list(pre_births or [])
        self._population = Population()
        self._best: Individual | None = None
        self._check_configuration()

    def _check_configuration(self) -> None:
        intervals = getattr(self._creator, "intervals", None)
        if intervals is None:
            return
        expected = int(np.shape(intervals)[0])
        for pre_birth in self._pre_births:
            other = getattr(pre_birth, "intervals", None)
            if other is not None and int(np.shape(other)[0]) != expected:
                raise DimensionMismatchError(f"pre-birth {type(pre_birth).__name__}", expected, int(np.shape(other)[0]))

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_selections(self, selections: Iterable[Selection]) -> None:
        self._selections = list(selections)

    def set_pre_births(self, pre_births: Iterable[PreBirth]) -> None:
        self._pre_births = list(pre_births)
        self._check_configuration()

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------

    def get_population(self) -> Population:
        return self._population

    def get_best_individual(self) -> Individual | None:
        return self._best

    def get_best_solution(self) -> np.ndarray | None:
        return None if self._best is None else self._best.chromosomes

    def get_best_goal(self) -> float | None:
        return None if self._best is None else self._best.goal

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def _initialize(self) -> None:
        self._population = Population(Individual(c, self._goal) for c in self._creator.create())
        for individual in self._population:
            individual.evaluate()
        self._apply_selections()

    def _next_iteration(self) -> None:
        children: list[np.ndarray] = []
        for family in self._pairing.get_pairs(self._population):
            children.extend(self._cross.cross([individual.chromosomes for individual in family]))

        children = [self._mutation.mutation(chromosomes) for chromosomes in children]
        for pre_birth in self._pre_births:
            children = pre_birth.pre_birth(self._population, children)

        newborn = [Individual(chromosomes, self._goal) for chromosomes in children]
        for individual in newborn:
            individual.evaluate()
        self._population.extend(newborn)
        self._apply_selections()

    def _apply_selections(self) -> None:
        for selection in self._selections:
            selection.kill(self._population)
            self._population.remove_dead()
        self._best = self._population.best()

    def _is_empty(self) -> bool:
        return len(self._population) == 0


__all__ = ["GeneticOptimizer"]
