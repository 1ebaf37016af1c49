"""Genetic algorithm: individuals, variation strategies and optimizer."""

from .creation import ChromosomesCreator, Creator, RandomCreator
from .cross import Cross, CrossBitwise, CrossMean, FloatCrossExp, GeneCross, VecCrossAllGenes
from .mutation import BitwiseMutation, GeneMutation, Mutation, VecMutation
from .optimizer import GeneticOptimizer
from .pairing import Pairing, RandomPairing, Tournament
from .population import Individual, Population
from .pre_birth import CheckChromoInterval, PreBirth, RejectDuplicates
from .selection import KillFitnessNaN, LimitPopulation, Selection

__all__ = [
    "ChromosomesCreator",
    "Creator",
    "RandomCreator",
    "Cross",
    "CrossBitwise",
    "CrossMean",
    "FloatCrossExp",
    "GeneCross",
    "VecCrossAllGenes",
    "BitwiseMutation",
    "GeneMutation",
    "Mutation",
    "VecMutation",
    "GeneticOptimizer",
    "Pairing",
    "RandomPairing",
    "Tournament",
    "Individual",
    "Population",
    "CheckChromoInterval",
    "PreBirth",
    "RejectDuplicates",
    "KillFitnessNaN",
    "LimitPopulation",
    "Selection",
]
