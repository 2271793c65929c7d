"""Genome and Individual types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple

# Fixed-length sequence of 0/1 bits.
Genome = Tuple[int, ...]


@dataclass(frozen=True)
class Individual:
    """A genome plus its evaluated fitness.

    Attributes:
        genome: Immutable bit tuple
        fitness: Score assigned by the last evaluation, None until evaluated
    """

    genome: Genome
    fitness: float | None = None

    @property
    def is_evaluated(self) -> bool:
        return self.fitness is not None

    def with_fitness(self, fitness: float) -> "Individual":
        return replace(self, fitness=fitness)

    def to_dict(self) -> dict[str, Any]:
        return {"genome": list(self.genome), "fitness": self.fitness}


__all__ = ["Genome", "Individual"]
