"""Configuration presets for simple_ga.

Presets are plain dicts consumed by `GAParams.from_config`. The fitness
function is resolved separately through the fitness registry.
"""

PRESET_DEFAULT = {
    'genome_size': 16,
    'population_size': 100,
    'num_generations': 50,
    'num_parents': 5,
    'crossover_rate': 0.75,
    'mutation_rate': 0.1,
    'parallel_evaluation': True,
    'max_workers': None,
}

# Small, fast configuration for tutorials and smoke runs.
PRESET_QUICK = {
    **PRESET_DEFAULT,
    'genome_size': 8,
    'population_size': 20,
    'num_generations': 30,
    'num_parents': 4,
    'crossover_rate': 0.75,
    'mutation_rate': 0.05,
}

__all__ = ['PRESET_DEFAULT', 'PRESET_QUICK']
