"""Evolutionary building blocks: genomes, operators, selection, reproduction."""

from .individual import Genome, Individual
from .params import FitnessFunction, GAParams
from .operators import crossover, flip_bit, mutate
from .population import generate_individual, generate_population, random_genome
from .evaluation import evaluate_individual, evaluate_population
from .selection import best_individual, select_parents
from .reproduction import make_offspring, reproduce

__all__ = [
    "Genome",
    "Individual",
    "FitnessFunction",
    "GAParams",
    "crossover",
    "flip_bit",
    "mutate",
    "generate_individual",
    "generate_population",
    "random_genome",
    "evaluate_individual",
    "evaluate_population",
    "best_individual",
    "select_parents",
    "make_offspring",
    "reproduce",
]
