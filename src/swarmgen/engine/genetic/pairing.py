"""Parent selection strategies.

A pairing returns a list of families; each family is a list of parent
individuals that one crossover call combines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.engine.base import is_better
from swarmgen.foundation.space import require_non_negative, require_positive

from .population import Individual, Population


class Pairing(ABC):
    @abstractmethod
    def get_pairs(self, population: Population) -> list[list[Individual]]:
        raise NotImplementedError


def _default_families(population: Population, families_count: int | None) -> int:
    if families_count is not None:
        return families_count
    return len(population) // 2


def _draw_index(rng: np.random.Generator, size: int, exclude: list[int]) -> int:
    while True:
        index = int(rng.integers(0, size))
        if index not in exclude:
            return index


class RandomPairing(Pairing):
    """Uniform random families of two distinct members, sampled with replacement across families."""

    def __init__(self, families_count: int | None = None, rng: Optional[np.random.Generator] = None):
        if families_count is not None:
            require_non_negative("families_count", families_count)
        self.families_count = families_count
        self.rng = rng or np.random.default_rng()

    def get_pairs(self, population: Population) -> list[list[Individual]]:
        size = len(population)
        if size < 2:
            return []
        families = []
        for _ in range(_default_families(population, self.families_count)):
            first, second = self.rng.choice(size, size=2, replace=False)
            families.append([population[int(first)], population[int(second)]])
        return families


class Tournament(Pairing):
    """Tournament parent selection.

    Every parent starts as a random member and then faces ``rounds_count``
    random challengers; the fittest survives. Parents of one family are
    distinct members. More rounds means higher selection pressure.
    """

    def __init__(
        self,
        families_count: int,
        rounds_count: int = 1,
        parents_count: int = 2,
        rng: Optional[np.random.Generator] = None,
    ):
        require_non_negative("families_count", families_count)
        require_non_negative("rounds_count", rounds_count)
        require_positive("parents_count", parents_count)
        self.families_count = int(families_count)
        self.rounds_count = int(rounds_count)
        self.parents_count = int(parents_count)
        self.rng = rng or np.random.default_rng()

    def set_rounds_count(self, rounds_count: int) -> "Tournament":
        require_non_negative("rounds_count", rounds_count)
        self.rounds_count = int(rounds_count)
        return self

    def set_families_count(self, families_count: int) -> "Tournament":
        require_non_negative("families_count", families_count)
        self.families_count = int(families_count)
        return self

    def _select(self, population: Population, exclude: list[int]) -> int:
        size = len(population)
        winner = _draw_index(self.rng, size, exclude)
        for _ in range(self.rounds_count):
            challenger = _draw_index(self.rng, size, exclude)
            if is_better(population[challenger].goal, population[winner].goal):
                winner = challenger
        return winner

    def get_pairs(self, population: Population) -> list[list[Individual]]:
        if len(population) < self.parents_count:
            return []
        families = []
        for _ in range(self.families_count):
            chosen: list[int] = []
            for _ in range(self.parents_count):
                chosen.append(self._select(population, chosen))
            families.append([population[index] for index in chosen])
        return families


__all__ = ["Pairing", "RandomPairing", "Tournament"]
