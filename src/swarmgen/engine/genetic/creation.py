"""Initial population creators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

import numpy as np

from swarmgen.foundation.space import IntervalsLike, as_intervals, require_non_negative


class Creator(ABC):
    """Produces the chromosomes of the initial population."""

    @abstractmethod
    def create(self) -> list[np.ndarray]:
        raise NotImplementedError


class RandomCreator(Creator):
    """Uniform random chromosomes inside per-gene intervals."""

    def __init__(
        self,
        population_size: int,
        intervals: IntervalsLike,
        rng: Optional[np.random.Generator] = None,
    ):
        require_non_negative("population_size", population_size)
        self.population_size = int(population_size)
        self.intervals = as_intervals(intervals)
        self.rng = rng or np.random.default_rng()

    def create(self) -> list[np.ndarray]:
        lower = self.intervals[:, 0]
        upper = self.intervals[:, 1]
        samples = self.rng.uniform(lower, upper, size=(self.population_size, lower.shape[0]))
        return list(samples)


class ChromosomesCreator(Creator):
    """Starts from a fixed list of chromosomes, e.g. a warm start."""

    def __init__(self, chromosomes: Sequence[Sequence[float]]):
        self.chromosomes = [np.asarray(c, dtype=float) for c in chromosomes]
        self.population_size = len(self.chromosomes)

    def create(self) -> list[np.ndarray]:
        return [c.copy() for c in self.chromosomes]


__all__ = ["Creator", "RandomCreator", "ChromosomesCreator"]
