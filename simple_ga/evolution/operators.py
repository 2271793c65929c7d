"""Bit-flip mutation and single-point crossover for bit-vector genomes."""

from __future__ import annotations

from simple_ga.evolution.individual import Genome
from simple_ga.utils.rng_manager import RNGManager
from simple_ga.utils.validation import ValidationError


def flip_bit(bit: int) -> int:
    return 1 - bit


def mutate(genome: Genome, mutation_rate: float, rng_manager: RNGManager) -> Genome:
    """Return a copy of `genome` with each bit flipped with probability `mutation_rate`.

    Every position gets its own draw. A rate of 0 returns an equal genome and a
    rate of 1 returns the bitwise complement.
    """
    if not 0.0 <= mutation_rate <= 1.0:
        raise ValidationError("invalid_rate", "mutation_rate must be within [0, 1]", mutation_rate=mutation_rate)
    rng = rng_manager.get_context_rng('mutation')
    return tuple(flip_bit(bit) if rng.random() < mutation_rate else bit for bit in genome)


def crossover(genome_a: Genome, genome_b: Genome, rng_manager: RNGManager) -> Genome:
    """Single-point crossover returning one of the two recombinations.

    The pivot is uniform in [0, min(len(a), len(b))). A fair coin then picks
    a[:pivot] + b[pivot:] or b[:pivot] + a[pivot:]. With unequal lengths the
    child takes the length of the parent that donated the tail.

    See: https://en.wikipedia.org/wiki/Crossover_(genetic_algorithm)#Single-point_crossover
    """
    shortest = min(len(genome_a), len(genome_b))
    if shortest == 0:
        raise ValidationError(
            "empty_genome",
            "crossover requires two non-empty genomes",
            len_a=len(genome_a),
            len_b=len(genome_b),
        )
    rng = rng_manager.get_context_rng('crossover')
    pivot = rng.randrange(shortest)
    if rng.random() < 0.5:
        return tuple(genome_a[:pivot]) + tuple(genome_b[pivot:])
    return tuple(genome_b[:pivot]) + tuple(genome_a[pivot:])


__all__ = ["flip_bit", "mutate", "crossover"]
