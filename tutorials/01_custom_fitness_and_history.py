"""
Custom Fitness & History Tutorial

Goals:
- Plug in a caller-defined fitness function
- Step through one generation by hand with run_generation
- Inspect per-generation summaries collected by GenerationHistory
"""

from simple_ga.evolution.params import GAParams
from simple_ga.evolution.population import generate_population
from simple_ga.generation.driver import GenerationHistory, evolve, run_generation
from simple_ga.utils.rng_manager import RNGManager

TARGET = (1, 0, 1, 1, 0, 0, 1, 0, 1, 1, 1, 0)


def matches_target(genome):
    # Pure: reads only the genome, safe for parallel evaluation.
    return sum(1 for a, b in zip(genome, TARGET) if a == b)


def main():
    params = GAParams(
        genome_size=len(TARGET),
        population_size=40,
        num_generations=25,
        num_parents=6,
        crossover_rate=0.8,
        mutation_rate=0.05,
        fitness_function=matches_target,
    )

    # One generation by hand: evaluate -> select -> reproduce.
    rng = RNGManager(seed=7)
    history = GenerationHistory()
    pop = generate_population(params, rng)
    nxt = run_generation(pop, params, rng, history=history)
    print('gen0:', history.records[0])
    print('next_population_size:', len(nxt))

    # Full run with history.
    history = GenerationHistory()
    best = evolve(params, rng_manager=RNGManager(seed=7), history=history)
    for rec in history.records[::5]:
        print(f"gen={rec['generation']} best={rec['best_fitness']:.0f} mean={rec['mean_fitness']:.2f}")
    print('best_fitness:', best.fitness, 'of', len(TARGET))


if __name__ == '__main__':
    main()
