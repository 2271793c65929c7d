"""Fitness-function registry for simple_ga."""

from .functions import (  # re-export
    DEFAULT_FITNESS_FUNCTION,
    FITNESS_FUNCTIONS,
    available_fitness_functions,
    get_fitness_function,
    register_fitness_function,
)

__all__ = [
    'DEFAULT_FITNESS_FUNCTION',
    'FITNESS_FUNCTIONS',
    'available_fitness_functions',
    'get_fitness_function',
    'register_fitness_function',
]
