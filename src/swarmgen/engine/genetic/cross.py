"""Crossover strategies.

Gene-level operators (``GeneCross``) combine the values of one gene position
across the parents of a family. ``VecCrossAllGenes`` lifts a gene operator to
whole chromosomes by applying it independently at every position.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from swarmgen.foundation.exceptions import ConfigurationError

MANTISSA_BITS = 53
EXPONENT_BITS = 16
FLOAT_BITS = 64


class Cross(ABC):
    """Combines the chromosomes of one family into child chromosomes."""

    @abstractmethod
    def cross(self, parents: list[np.ndarray]) -> list[np.ndarray]:
        raise NotImplementedError


class GeneCross(ABC):
    """Combines the values of one gene position into child gene values."""

    @abstractmethod
    def cross(self, parent_genes: list[float]) -> list[float]:
        raise NotImplementedError


class VecCrossAllGenes(Cross):
    """Apply a gene-level crossover independently at every gene position."""

    def __init__(self, single_cross: GeneCross) -> None:
        self.single_cross = single_cross

    def cross(self, parents: list[np.ndarray]) -> list[np.ndarray]:
        if not parents:
            return []
        length = len(parents[0])
        if any(len(parent) != length for parent in parents):
            raise ConfigurationError("Parents of one family must have chromosomes of equal length.")

        columns = [self.single_cross.cross([float(parent[i]) for parent in parents]) for i in range(length)]
        if not columns:
            return [np.empty(0, dtype=float)]
        children_count = len(columns[0])
        return [np.array([column[n] for column in columns], dtype=float) for n in range(children_count)]


def integer_decode(value: float) -> tuple[int, int, int]:
    """Split a finite float into ``(mantissa, exponent, sign)`` with ``value == sign * mantissa * 2**exponent``.

    ``mantissa`` is a 53-bit integer (0 for zero).
    """
    fraction, exponent = math.frexp(abs(value))
    mantissa = int(fraction * (1 << MANTISSA_BITS))
    sign = -1 if math.copysign(1.0, value) < 0 else 1
    return mantissa, exponent - MANTISSA_BITS, sign


def integer_encode(mantissa: int, exponent: int, sign: int) -> float:
    try:
        value = math.ldexp(float(mantissa), exponent)
    except OverflowError:
        value = math.inf
    return math.copysign(value, sign)


def cross_bits(first: int, second: int, bits: int, position: int) -> int:
    """Single-point crossover: bits above ``position`` from ``first``, the rest from ``second``."""
    full = (1 << bits) - 1
    low = (1 << position) - 1
    return ((first & ~low) | (second & low)) & full


def _to_signed(value: int, bits: int) -> int:
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class FloatCrossExp(GeneCross):
    """Cross two float genes by their mantissa and exponent.

    The 53-bit mantissas and the 16-bit two's-complement exponents of the
    parents are crossed bitwise at independent random split points; the sign
    comes from a randomly chosen parent. Non-finite parents yield a copy of a
    random parent.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def cross(self, parent_genes: list[float]) -> list[float]:
        if len(parent_genes) != 2:
            raise ConfigurationError("FloatCrossExp needs exactly two parents per family.")
        first, second = parent_genes
        if not (math.isfinite(first) and math.isfinite(second)):
            return [parent_genes[int(self.rng.integers(0, 2))]]

        mantissa_1, exponent_1, sign_1 = integer_decode(first)
        mantissa_2, exponent_2, sign_2 = integer_decode(second)

        mantissa = cross_bits(
            mantissa_1,
            mantissa_2,
            MANTISSA_BITS,
            int(self.rng.integers(0, MANTISSA_BITS + 1)),
        )
        exponent_mask = (1 << EXPONENT_BITS) - 1
        exponent = _to_signed(
            cross_bits(
                exponent_1 & exponent_mask,
                exponent_2 & exponent_mask,
                EXPONENT_BITS,
                int(self.rng.integers(0, EXPONENT_BITS + 1)),
            ),
            EXPONENT_BITS,
        )
        sign = sign_1 if self.rng.random() < 0.5 else sign_2
        return [integer_encode(mantissa, exponent, sign)]


class CrossMean(GeneCross):
    """Child gene is the arithmetic mean of the parent genes."""

    def cross(self, parent_genes: list[float]) -> list[float]:
        if not parent_genes:
            raise ConfigurationError("CrossMean needs at least one parent.")
        return [float(sum(parent_genes) / len(parent_genes))]


class CrossBitwise(GeneCross):
    """Single-point crossover of the raw 64-bit IEEE-754 representations of two genes."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def cross(self, parent_genes: list[float]) -> list[float]:
        if len(parent_genes) != 2:
            raise ConfigurationError("CrossBitwise needs exactly two parents per family.")
        bits_1, bits_2 = (int(np.array(gene, dtype=np.float64).view(np.uint64)) for gene in parent_genes)
        position = int(self.rng.integers(0, FLOAT_BITS + 1))
        child = cross_bits(bits_1, bits_2, FLOAT_BITS, position)
        return [float(np.array(child, dtype=np.uint64).view(np.float64))]


__all__ = [
    "Cross",
    "GeneCross",
    "VecCrossAllGenes",
    "FloatCrossExp",
    "CrossMean",
    "CrossBitwise",
    "integer_decode",
    "integer_encode",
    "cross_bits",
]
