"""Mutation strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.foundation.space import require_non_negative, require_probability

from .cross import FLOAT_BITS


class Mutation(ABC):
    """Perturbs a whole chromosome; returns a new array."""

    @abstractmethod
    def mutation(self, chromosomes: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class GeneMutation(ABC):
    """Perturbs a single gene."""

    @abstractmethod
    def mutation(self, gene: float) -> float:
        raise NotImplementedError


class BitwiseMutation(GeneMutation):
    """Flip ``change_bits_count`` distinct random bits of the gene's float64 representation."""

    def __init__(self, change_bits_count: int, rng: Optional[np.random.Generator] = None) -> None:
        require_non_negative("change_bits_count", change_bits_count)
        if change_bits_count > FLOAT_BITS:
            change_bits_count = FLOAT_BITS
        self.change_bits_count = int(change_bits_count)
        self.rng = rng or np.random.default_rng()

    def mutation(self, gene: float) -> float:
        if self.change_bits_count == 0:
            return gene
        bits = int(np.array(gene, dtype=np.float64).view(np.uint64))
        for position in self.rng.choice(FLOAT_BITS, size=self.change_bits_count, replace=False):
            bits ^= 1 << int(position)
        return float(np.array(bits, dtype=np.uint64).view(np.float64))


class VecMutation(Mutation):
    """Mutate a chromosome with ``probability`` percent.

    A mutated chromosome gets the gene operator applied to one uniformly
    chosen gene position.
    """

    def __init__(
        self,
        probability: float,
        single_mutation: GeneMutation,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        require_probability("probability", probability, upper=100.0)
        self.probability = float(probability)
        self.single_mutation = single_mutation
        self.rng = rng or np.random.default_rng()

    def mutation(self, chromosomes: np.ndarray) -> np.ndarray:
        if len(chromosomes) == 0 or self.rng.random() * 100.0 >= self.probability:
            return chromosomes
        result = np.array(chromosomes, dtype=float)
        position = int(self.rng.integers(0, len(result)))
        result[position] = self.single_mutation.mutation(float(result[position]))
        return result


__all__ = ["Mutation", "GeneMutation", "BitwiseMutation", "VecMutation"]
