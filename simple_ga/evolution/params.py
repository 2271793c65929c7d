"""Run parameters with fail-fast validation."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Callable

from simple_ga.config import PRESET_DEFAULT
from simple_ga.evolution.individual import Genome
from simple_ga.utils.validation import ValidationError

FitnessFunction = Callable[[Genome], float]


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            "invalid_param",
            f"{name} must be an integer",
            param=name,
            value=value,
        )
    if value < minimum:
        raise ValidationError(
            "invalid_param",
            f"{name} must be >= {minimum}",
            param=name,
            value=value,
        )


def _require_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ValidationError("invalid_param", f"{name} must be a bool", param=name, value=value)


def _require_rate(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("invalid_param", f"{name} must be a number", param=name, value=value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError("invalid_param", f"{name} must be within [0, 1]", param=name, value=value)


@dataclass(frozen=True)
class GAParams:
    """Immutable configuration bundle for one evolution run."""

    genome_size: int
    population_size: int
    num_generations: int
    num_parents: int
    crossover_rate: float
    mutation_rate: float
    fitness_function: FitnessFunction
    parallel_evaluation: bool = True
    max_workers: int | None = None

    def __post_init__(self) -> None:
        _require_int('genome_size', self.genome_size, 1)
        _require_int('population_size', self.population_size, 1)
        _require_int('num_generations', self.num_generations, 0)
        _require_int('num_parents', self.num_parents, 1)
        if self.num_parents > self.population_size:
            raise ValidationError(
                "invalid_param",
                "num_parents must not exceed population_size",
                num_parents=self.num_parents,
                population_size=self.population_size,
            )
        _require_rate('crossover_rate', self.crossover_rate)
        _require_rate('mutation_rate', self.mutation_rate)
        if self.crossover_rate > 0 and self.num_parents < 2:
            raise ValidationError(
                "invalid_param",
                "crossover needs at least two parents; use num_parents >= 2 or crossover_rate = 0",
                num_parents=self.num_parents,
                crossover_rate=self.crossover_rate,
            )
        if not callable(self.fitness_function):
            raise ValidationError(
                "invalid_param",
                "fitness_function must be callable",
                param='fitness_function',
            )
        _require_bool('parallel_evaluation', self.parallel_evaluation)
        if self.max_workers is not None:
            _require_int('max_workers', self.max_workers, 1)

    @classmethod
    def from_config(cls, config: dict, fitness_function: FitnessFunction | None = None) -> "GAParams":
        """Build params from a config dict, filling gaps from PRESET_DEFAULT.

        `fitness_function` may be given either as an argument or under the
        'fitness_function' key; the argument wins.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        extras = sorted(k for k in config if k not in known)
        if extras:
            raise ValidationError(
                "unknown_config_key",
                f"Unknown config keys: {extras}",
                extras=tuple(extras),
            )
        merged = dict(PRESET_DEFAULT)
        merged.update(config)
        fn = fitness_function if fitness_function is not None else merged.get('fitness_function')
        if fn is None:
            raise ValidationError("missing_param", "A fitness function is required", param='fitness_function')
        return cls(
            genome_size=merged.get('genome_size'),
            population_size=merged.get('population_size'),
            num_generations=merged.get('num_generations'),
            num_parents=merged.get('num_parents'),
            crossover_rate=merged.get('crossover_rate'),
            mutation_rate=merged.get('mutation_rate'),
            fitness_function=fn,
            parallel_evaluation=merged.get('parallel_evaluation', True),
            max_workers=merged.get('max_workers'),
        )

    def replace(self, **changes: Any) -> "GAParams":
        return dataclasses.replace(self, **changes)

    @property
    def num_offspring(self) -> int:
        return self.population_size - self.num_parents


__all__ = ["FitnessFunction", "GAParams"]
