"""Random genome, individual and population generation."""

from __future__ import annotations

from simple_ga.evolution.individual import Genome, Individual
from simple_ga.evolution.params import GAParams
from simple_ga.utils.rng_manager import RNGManager


def random_genome(genome_size: int, rng_manager: RNGManager) -> Genome:
    rng = rng_manager.get_context_rng('init')
    return tuple(rng.randint(0, 1) for _ in range(genome_size))


def generate_individual(genome_size: int, rng_manager: RNGManager) -> Individual:
    """Individual with `genome_size` uniform random bits and no fitness."""
    return Individual(genome=random_genome(genome_size, rng_manager))


def generate_population(params: GAParams, rng_manager: RNGManager) -> list[Individual]:
    """Generation 0: `population_size` independently generated individuals."""
    return [generate_individual(params.genome_size, rng_manager) for _ in range(params.population_size)]


__all__ = ["random_genome", "generate_individual", "generate_population"]
