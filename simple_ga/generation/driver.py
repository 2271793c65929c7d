"""Generation loop for the genetic algorithm.

Implements:
- GenerationHistory: per-generation fitness summaries
- run_generation: evaluate -> select -> reproduce for one generation
- EvolutionDriver: phase-tracked loop over `num_generations` generations,
  followed by a final evaluation and best-individual extraction
- evolve: convenience wrapper returning the best individual
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

import numpy as np

from simple_ga.evolution.evaluation import evaluate_population
from simple_ga.evolution.individual import Individual
from simple_ga.evolution.params import GAParams
from simple_ga.evolution.population import generate_population
from simple_ga.evolution.reproduction import reproduce
from simple_ga.evolution.selection import best_individual, select_parents
from simple_ga.utils.rng_manager import RNGManager


class EvolutionPhase(Enum):
    INITIALIZING = "initializing"
    EVALUATING = "evaluating"
    SELECTING = "selecting"
    REPRODUCING = "reproducing"
    TERMINAL = "terminal"


@dataclass
class GenerationHistory:
    """Fitness summaries of every evaluated population, in evaluation order."""

    records: list[dict[str, Any]] = field(default_factory=list)

    def add_population(self, generation: int, population: Sequence[Individual]) -> dict[str, Any]:
        scores = np.asarray([ind.fitness for ind in population], dtype=float)
        record = {
            'generation': generation,
            'population_size': len(population),
            'best_fitness': float(scores.max()),
            'mean_fitness': float(scores.mean()),
            'std_fitness': float(scores.std()),
        }
        self.records.append(record)
        return record

    def best_fitness_curve(self) -> list[float]:
        return [r['best_fitness'] for r in self.records]

    def __len__(self) -> int:
        return len(self.records)


def _evaluate(population: Sequence[Individual], params: GAParams) -> list[Individual]:
    return evaluate_population(
        population,
        params.fitness_function,
        parallel=params.parallel_evaluation,
        max_workers=params.max_workers,
    )


def run_generation(
    population: Sequence[Individual],
    params: GAParams,
    rng_manager: RNGManager,
    history: GenerationHistory | None = None,
    generation: int = 0,
    on_phase: Callable[[EvolutionPhase], None] | None = None,
) -> list[Individual]:
    """Run a single generation and return the next, unevaluated population.

    `on_phase` is called with each phase just before that phase starts.
    """
    if on_phase is not None:
        on_phase(EvolutionPhase.EVALUATING)
    evaluated = _evaluate(population, params)
    if history is not None:
        history.add_population(generation, evaluated)

    if on_phase is not None:
        on_phase(EvolutionPhase.SELECTING)
    parents = select_parents(evaluated, params.num_parents)

    if on_phase is not None:
        on_phase(EvolutionPhase.REPRODUCING)
    return reproduce(parents, params, rng_manager)


class EvolutionDriver:
    """Drives one evolution run through its phases.

    The driver is single-use: `run()` walks INITIALIZING, then
    EVALUATING/SELECTING/REPRODUCING once per generation, then a final
    EVALUATING pass before TERMINAL. Exceptions from the fitness function
    leave the driver in the phase where they were raised.
    """

    def __init__(self, params: GAParams, rng_manager: RNGManager | None = None,
                 history: GenerationHistory | None = None) -> None:
        self.params = params
        self.rng_manager = rng_manager if rng_manager is not None else RNGManager()
        self.history = history if history is not None else GenerationHistory()
        self.phase = EvolutionPhase.INITIALIZING
        self.generation = 0
        self.population: list[Individual] = []
        self.best: Individual | None = None

    def _enter(self, phase: EvolutionPhase) -> None:
        logging.debug(f"Generation {self.generation}: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def run(self) -> Individual:
        if self.phase is not EvolutionPhase.INITIALIZING or self.population:
            raise RuntimeError("EvolutionDriver.run() can only be called once")

        params = self.params
        self.population = generate_population(params, self.rng_manager)

        while self.generation < params.num_generations:
            logging.info(f"Generation {self.generation + 1}")
            self.population = run_generation(
                self.population,
                params,
                self.rng_manager,
                history=self.history,
                generation=self.generation,
                on_phase=self._enter,
            )
            self.generation += 1

        # The last reproduction leaves offspring unevaluated.
        self._enter(EvolutionPhase.EVALUATING)
        self.population = _evaluate(self.population, params)
        record = self.history.add_population(self.generation, self.population)
        self.best = best_individual(self.population)
        self._enter(EvolutionPhase.TERMINAL)
        logging.info(
            f"Evolution finished after {self.generation} generations: "
            f"best_fitness={record['best_fitness']} mean_fitness={record['mean_fitness']:.3f}"
        )
        return self.best


def evolve(params: GAParams, rng_manager: RNGManager | None = None,
           history: GenerationHistory | None = None) -> Individual:
    """Run a genetic algorithm and return the best individual of the final generation."""
    return EvolutionDriver(params, rng_manager=rng_manager, history=history).run()


__all__ = [
    'EvolutionPhase',
    'GenerationHistory',
    'run_generation',
    'EvolutionDriver',
    'evolve',
]
