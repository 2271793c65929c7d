"""Fitness evaluation of individuals and populations.

Fitness functions are assumed pure, so a population step fans out over a
thread pool. `Executor.map` yields results in submission order, which keeps
the output aligned with the input population regardless of which worker
finishes first. The first exception raised by the fitness function is
re-raised to the caller.
"""

from __future__ import annotations

import logging
import math
import numbers
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from simple_ga.evolution.individual import Individual
from simple_ga.evolution.params import FitnessFunction
from simple_ga.utils.validation import ValidationError


def _check_fitness(value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            "invalid_fitness",
            "fitness function must return a real number",
            value=value,
            type=type(value).__name__,
        )
    if math.isnan(value):
        raise ValidationError("invalid_fitness", "fitness function returned NaN")
    return value


def evaluate_individual(individual: Individual, fitness_function: FitnessFunction) -> Individual:
    """Return a copy of `individual` with its fitness recomputed."""
    return individual.with_fitness(_check_fitness(fitness_function(individual.genome)))


def evaluate_population(
    population: Sequence[Individual],
    fitness_function: FitnessFunction,
    *,
    parallel: bool = True,
    max_workers: int | None = None,
) -> list[Individual]:
    """Evaluate every individual, in parallel when enabled.

    Output order matches input order. Prior fitness values are always
    overwritten.
    """
    if not parallel or len(population) < 2:
        return [evaluate_individual(ind, fitness_function) for ind in population]

    logging.debug(f"Evaluating {len(population)} individuals in parallel (max_workers={max_workers})")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda ind: evaluate_individual(ind, fitness_function), population))


__all__ = ["evaluate_individual", "evaluate_population"]
