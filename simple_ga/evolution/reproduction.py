"""Next-generation construction: elitism plus crossover/mutation offspring."""

from __future__ import annotations

from typing import Sequence

from simple_ga.evolution.individual import Individual
from simple_ga.evolution.operators import crossover, mutate
from simple_ga.evolution.params import GAParams
from simple_ga.utils.rng_manager import RNGManager
from simple_ga.utils.validation import ValidationError


def make_offspring(parents: Sequence[Individual], params: GAParams, rng_manager: RNGManager) -> Individual:
    """Build one unevaluated child from `parents`.

    With probability `crossover_rate` two distinct parents are sampled and
    crossed over; otherwise one parent is picked. The resulting genome is
    mutated with `mutation_rate` in both branches.
    """
    rng = rng_manager.get_context_rng('reproduction')
    if rng.random() < params.crossover_rate:
        if len(parents) < 2:
            raise ValidationError(
                "insufficient_parents",
                "crossover needs two distinct parents",
                num_parents=len(parents),
            )
        mother, father = rng.sample(list(parents), 2)
        genome = crossover(mother.genome, father.genome, rng_manager)
    else:
        genome = rng.choice(parents).genome
    return Individual(genome=mutate(genome, params.mutation_rate, rng_manager))


def reproduce(parents: Sequence[Individual], params: GAParams, rng_manager: RNGManager) -> list[Individual]:
    """Create the next generation of `population_size` individuals.

    The parents are carried over unchanged at the front (elitism); the
    remaining `population_size - num_parents` slots are filled with offspring.
    """
    if len(parents) != params.num_parents:
        raise ValidationError(
            "parent_count_mismatch",
            "reproduce expects exactly num_parents parents",
            expected=params.num_parents,
            actual=len(parents),
        )
    offspring = [make_offspring(parents, params, rng_manager) for _ in range(params.num_offspring)]
    return list(parents) + offspring


__all__ = ["make_offspring", "reproduce"]
