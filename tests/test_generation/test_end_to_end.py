from simple_ga.evolution.params import GAParams
from simple_ga.fitness.functions import max_ones
from simple_ga.generation.driver import evolve
from simple_ga.utils.rng_manager import RNGManager


def test_max_ones_converges_across_seeds():
    params = GAParams(
        genome_size=8,
        population_size=20,
        num_generations=30,
        num_parents=4,
        crossover_rate=0.75,
        mutation_rate=0.05,
        fitness_function=max_ones,
    )
    results = [evolve(params, rng_manager=RNGManager(seed=seed)) for seed in range(10)]
    assert all(best.fitness >= 7 for best in results)
    assert sum(best.fitness == 8 for best in results) >= 8
    for best in results:
        assert best.fitness == sum(best.genome)


def test_default_preset_on_max_ones_reaches_optimum():
    from simple_ga.config import PRESET_DEFAULT

    params = GAParams.from_config(PRESET_DEFAULT, fitness_function=max_ones)
    best = evolve(params, rng_manager=RNGManager(seed=2019))
    assert best.fitness >= 15
    assert len(best.genome) == 16
