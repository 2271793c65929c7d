"""
Quickstart Tutorial

Goals:
- Build run parameters from the quick preset
- Evolve max-ones with a seeded RNGManager
- Print the best individual
"""

from simple_ga.config import PRESET_QUICK
from simple_ga.evolution.params import GAParams
from simple_ga.fitness import get_fitness_function
from simple_ga.generation.driver import evolve
from simple_ga.utils.rng_manager import RNGManager


def main():
    # genome_size=8, population_size=20, num_generations=30, num_parents=4
    params = GAParams.from_config(PRESET_QUICK, fitness_function=get_fitness_function('max-ones'))

    # Same seed, same run.
    best = evolve(params, rng_manager=RNGManager(seed=42))
    print('best_genome:', ''.join(str(b) for b in best.genome))
    print('best_fitness:', best.fitness)


if __name__ == '__main__':
    main()
