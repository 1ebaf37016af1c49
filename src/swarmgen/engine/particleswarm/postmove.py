"""Position hooks applied after a particle moves, in registration order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.foundation.space import IntervalsLike, as_intervals, check_dimension, require_probability


class PostMove(ABC):
    @abstractmethod
    def post_move(self, coordinates: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class MoveToBoundary(PostMove):
    """Clip coordinates that left the search box back onto its boundary."""

    def __init__(self, intervals: IntervalsLike) -> None:
        self.intervals = as_intervals(intervals)
        self.lower = self.intervals[:, 0]
        self.upper = self.intervals[:, 1]

    def post_move(self, coordinates: np.ndarray) -> np.ndarray:
        check_dimension("MoveToBoundary coordinates", coordinates, self.lower.shape[0])
        return np.clip(coordinates, self.lower, self.upper)


class RandomTeleport(PostMove):
    """With the given probability, move the particle to a uniform random point of the box."""

    def __init__(
        self,
        intervals: IntervalsLike,
        probability: float,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_probability("probability", probability)
        self.intervals = as_intervals(intervals)
        self.probability = float(probability)
        self.rng = rng or np.random.default_rng()

    def post_move(self, coordinates: np.ndarray) -> np.ndarray:
        if self.rng.random() < self.probability:
            return self.rng.uniform(self.intervals[:, 0], self.intervals[:, 1])
        return coordinates


__all__ = ["PostMove", "MoveToBoundary", "RandomTeleport"]
