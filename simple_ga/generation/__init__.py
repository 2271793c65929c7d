"""Generation loop for simple_ga."""

from .driver import EvolutionDriver, EvolutionPhase, GenerationHistory, evolve, run_generation  # noqa: F401

__all__ = [
    'evolve',
    'run_generation',
    'EvolutionDriver',
    'EvolutionPhase',
    'GenerationHistory',
]
