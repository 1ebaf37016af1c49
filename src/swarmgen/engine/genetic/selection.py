"""Survivor selection; strategies kill individuals and the optimizer removes the dead."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from swarmgen.foundation.space import require_non_negative

from .population import Population, fitness_key


class Selection(ABC):
    @abstractmethod
    def kill(self, population: Population) -> None:
        raise NotImplementedError


class KillFitnessNaN(Selection):
    """Kill every individual whose goal value is NaN or infinite."""

    def kill(self, population: Population) -> None:
        for individual in population:
            if not np.isfinite(individual.goal):
                individual.kill()


class LimitPopulation(Selection):
    """Keep the ``max_count`` fittest living individuals.

    Ranking is a stable sort by goal value, so ties are resolved by the
    original order; NaN goals rank last.
    """

    def __init__(self, max_count: int) -> None:
        require_non_negative("max_count", max_count)
        self.max_count = int(max_count)

    def kill(self, population: Population) -> None:
        alive = [individual for individual in population if individual.alive]
        if len(alive) <= self.max_count:
            return
        ranked = sorted(alive, key=fitness_key)
        for individual in ranked[self.max_count :]:
            individual.kill()


__all__ = ["Selection", "KillFitnessNaN", "LimitPopulation"]
