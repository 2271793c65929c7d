"""Built-in fitness functions and the name registry used by the entry point.

All functions are pure: they read the genome and return a number, higher is
better. Names are resolved once at startup through `get_fitness_function`.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from simple_ga.evolution.individual import Genome
from simple_ga.evolution.params import FitnessFunction
from simple_ga.utils.validation import ValidationError

FITNESS_FUNCTIONS: Dict[str, FitnessFunction] = {}

DEFAULT_FITNESS_FUNCTION = "max-ones"


def register_fitness_function(name: str) -> Callable[[FitnessFunction], FitnessFunction]:
    def decorator(fn: FitnessFunction) -> FitnessFunction:
        if name in FITNESS_FUNCTIONS:
            raise ValidationError(
                "duplicate_fitness_function",
                f"Fitness function {name!r} already registered",
                name=name,
            )
        FITNESS_FUNCTIONS[name] = fn
        return fn

    return decorator


def get_fitness_function(name: str) -> FitnessFunction:
    try:
        return FITNESS_FUNCTIONS[name]
    except KeyError:
        raise ValidationError(
            "unknown_fitness_function",
            f"unknown fitness function: {name}",
            name=name,
            available=tuple(sorted(FITNESS_FUNCTIONS)),
        ) from None


def available_fitness_functions() -> list[str]:
    return sorted(FITNESS_FUNCTIONS)


@register_fitness_function("max-ones")
def max_ones(genome: Genome) -> int:
    """Number of 1 bits."""
    return int(sum(genome))


@register_fitness_function("leading-ones")
def leading_ones(genome: Genome) -> int:
    """Length of the run of 1 bits at the start of the genome."""
    count = 0
    for bit in genome:
        if bit != 1:
            break
        count += 1
    return count


@register_fitness_function("alternating-bits")
def alternating_bits(genome: Genome) -> int:
    """Number of adjacent positions holding different bits."""
    return sum(1 for a, b in zip(genome, genome[1:]) if a != b)


@register_fitness_function("binary-value")
def binary_value(genome: Genome) -> int:
    # Big-endian unsigned integer; Python ints avoid overflow past 63 bits.
    if len(genome) < 63:
        bits = np.asarray(genome, dtype=np.int64)
        weights = np.left_shift(np.int64(1), np.arange(len(bits) - 1, -1, -1, dtype=np.int64))
        return int(bits @ weights)
    return int("".join(str(bit) for bit in genome), 2)


__all__ = [
    "FITNESS_FUNCTIONS",
    "DEFAULT_FITNESS_FUNCTION",
    "register_fitness_function",
    "get_fitness_function",
    "available_fitness_functions",
    "max_ones",
    "leading_ones",
    "alternating_bits",
    "binary_value",
]
