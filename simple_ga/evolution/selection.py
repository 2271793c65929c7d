"""Truncation selection and best-individual extraction."""

from __future__ import annotations

from typing import Sequence

from simple_ga.evolution.individual import Individual
from simple_ga.utils.validation import ValidationError


def _require_evaluated(population: Sequence[Individual]) -> None:
    for idx, ind in enumerate(population):
        if not ind.is_evaluated:
            raise ValidationError(
                "unevaluated_individual",
                "selection requires every individual to be evaluated",
                index=idx,
            )


def select_parents(population: Sequence[Individual], num_parents: int) -> list[Individual]:
    """Return the `num_parents` fittest individuals, best first.

    Ties keep their order of appearance in `population` (stable sort).
    """
    if not 1 <= num_parents <= len(population):
        raise ValidationError(
            "invalid_num_parents",
            "num_parents must be between 1 and the population size",
            num_parents=num_parents,
            population_size=len(population),
        )
    _require_evaluated(population)
    ranked = sorted(population, key=lambda ind: ind.fitness, reverse=True)
    return ranked[:num_parents]


def best_individual(population: Sequence[Individual]) -> Individual:
    """First individual holding the maximum fitness."""
    if not population:
        raise ValidationError("empty_population", "cannot pick the best of an empty population")
    _require_evaluated(population)
    return max(population, key=lambda ind: ind.fitness)


__all__ = ["select_parents", "best_individual"]
