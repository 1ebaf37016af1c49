"""Filters applied to child chromosomes before they are evaluated."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from swarmgen.foundation.space import IntervalsLike, as_intervals

from .population import Population


class PreBirth(ABC):
    """Returns the chromosomes admitted into the population; rejected ones are discarded."""

    @abstractmethod
    def pre_birth(self, population: Population, chromosomes: list[np.ndarray]) -> list[np.ndarray]:
        raise NotImplementedError


class CheckChromoInterval(PreBirth):
    """Reject chromosomes with any gene outside its interval (NaN genes included)."""

    def __init__(self, intervals: IntervalsLike) -> None:
        self.intervals = as_intervals(intervals)
        self.lower = self.intervals[:, 0]
        self.upper = self.intervals[:, 1]

    def is_valid(self, chromosomes: np.ndarray) -> bool:
        if len(chromosomes) != self.lower.shape[0]:
            return False
        return bool(np.all((chromosomes >= self.lower) & (chromosomes <= self.upper)))

    def pre_birth(self, population: Population, chromosomes: list[np.ndarray]) -> list[np.ndarray]:
        return [c for c in chromosomes if self.is_valid(c)]


class RejectDuplicates(PreBirth):
    """Reject chromosomes identical to a population member or to an earlier child of the same batch.

    Comparison is exact, on the float64 bytes of the genes. A converged
    population otherwise refills itself with clones of its best members, so
    only children that differ from every existing chromosome are admitted.
    """

    def pre_birth(self, population: Population, chromosomes: list[np.ndarray]) -> list[np.ndarray]:
        seen = {_chromosome_key(individual.chromosomes) for individual in population}
        admitted = []
        for c in chromosomes:
            key = _chromosome_key(c)
            if key in seen:
                continue
            seen.add(key)
            admitted.append(c)
        return admitted


def _chromosome_key(chromosomes: np.ndarray) -> bytes:
    return np.ascontiguousarray(chromosomes, dtype=np.float64).tobytes()


__all__ = ["PreBirth", "CheckChromoInterval", "RejectDuplicates"]
