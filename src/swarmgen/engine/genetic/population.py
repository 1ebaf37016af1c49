"""Individuals and populations for the genetic optimizer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from swarmgen.foundation.goal import Goal


class Individual:
    """A chromosome with a lazily evaluated goal value."""

    __slots__ = ("_chromosomes", "_goal_function", "_goal", "_alive")

    def __init__(self, chromosomes: np.ndarray, goal: Goal) -> None:
        self._chromosomes = np.asarray(chromosomes, dtype=float)
        self._goal_function = goal
        self._goal: float | None = None
        self._alive = True

    @property
    def chromosomes(self) -> np.ndarray:
        return self._chromosomes

    def set_chromosomes(self, chromosomes: np.ndarray) -> None:
        """Replace the chromosome; the cached goal value is discarded."""
        self._chromosomes = np.asarray(chromosomes, dtype=float)
        self._goal = None

    @property
    def goal(self) -> float:
        if self._goal is None:
            self._goal = float(self._goal_function.get(self._chromosomes))
        return self._goal

    def evaluate(self) -> float:
        """Force evaluation of the goal value."""
        return self.goal

    @property
    def is_evaluated(self) -> bool:
        return self._goal is not None

    @property
    def alive(self) -> bool:
        return self._alive

    def kill(self) -> None:
        self._alive = False

    def __repr__(self) -> str:
        goal = self._goal if self._goal is not None else "?"
        return f"Individual(chromosomes={self._chromosomes!r}, goal={goal})"


def fitness_key(individual: Individual) -> float:
    goal = individual.goal
    return np.inf if np.isnan(goal) else goal


class Population:
    """Ordered collection of individuals.

    The size may exceed the nominal population size after breeding; the
    selection chain brings it back.
    """

    def __init__(self, individuals: Iterable[Individual] | None = None) -> None:
        self._individuals: list[Individual] = list(individuals or [])

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def __getitem__(self, index: int) -> Individual:
        return self._individuals[index]

    def append(self, individual: Individual) -> None:
        self._individuals.append(individual)

    def extend(self, individuals: Iterable[Individual]) -> None:
        self._individuals.extend(individuals)

    def remove_dead(self) -> int:
        """Drop killed individuals; returns how many were removed."""
        before = len(self._individuals)
        self._individuals = [ind for ind in self._individuals if ind.alive]
        return before - len(self._individuals)

    def sort(self) -> None:
        """Stable sort by goal, fittest first; NaN goals go last."""
        self._individuals.sort(key=fitness_key)

    def best(self) -> Individual | None:
        """Fittest individual with a comparable goal; the earliest wins ties."""
        best: Individual | None = None
        for individual in self._individuals:
            goal = individual.goal
            if np.isnan(goal):
                continue
            if best is None or goal < best.goal:
                best = individual
        return best

    def worst(self) -> Individual | None:
        worst: Individual | None = None
        for individual in self._individuals:
            goal = individual.goal
            if np.isnan(goal):
                continue
            if worst is None or goal > worst.goal:
                worst = individual
        return worst

    def chromosomes(self) -> list[np.ndarray]:
        return [individual.chromosomes for individual in self._individuals]


__all__ = ["Individual", "Population", "fitness_key"]
