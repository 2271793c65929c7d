import pytest

from simple_ga.evolution.evaluation import evaluate_individual, evaluate_population
from simple_ga.evolution.individual import Individual
from simple_ga.evolution.params import GAParams
from simple_ga.evolution.population import generate_individual, generate_population
from simple_ga.fitness.functions import binary_value, max_ones
from simple_ga.utils.rng_manager import RNGManager
from simple_ga.utils.validation import ValidationError


def _params(**overrides):
    cfg = {
        'genome_size': 12,
        'population_size': 30,
        'num_generations': 1,
        'num_parents': 4,
        'crossover_rate': 0.75,
        'mutation_rate': 0.1,
    }
    cfg.update(overrides)
    return GAParams.from_config(cfg, fitness_function=max_ones)


def test_generate_individual_has_unset_fitness():
    ind = generate_individual(10, RNGManager(seed=1))
    assert ind.fitness is None
    assert not ind.is_evaluated
    assert len(ind.genome) == 10
    assert set(ind.genome) <= {0, 1}


def test_generate_population_shape():
    params = _params()
    pop = generate_population(params, RNGManager(seed=2))
    assert len(pop) == params.population_size
    for ind in pop:
        assert len(ind.genome) == params.genome_size
        assert set(ind.genome) <= {0, 1}
        assert ind.fitness is None
    # individuals are generated independently, not copies of one genome
    assert len({ind.genome for ind in pop}) > 1


def test_generate_population_is_reproducible_for_seed():
    params = _params()
    assert generate_population(params, RNGManager(seed=3)) == generate_population(params, RNGManager(seed=3))


def test_evaluate_individual_always_recomputes():
    stale = Individual(genome=(1, 1, 0), fitness=999)
    fresh = evaluate_individual(stale, max_ones)
    assert fresh.fitness == 2
    assert fresh.genome == stale.genome
    assert stale.fitness == 999


def test_evaluate_population_parallel_matches_serial_order():
    pop = generate_population(_params(population_size=50), RNGManager(seed=4))
    serial = evaluate_population(pop, binary_value, parallel=False)
    parallel = evaluate_population(pop, binary_value, parallel=True, max_workers=8)
    assert parallel == serial
    assert [ind.genome for ind in parallel] == [ind.genome for ind in pop]
    assert [ind.fitness for ind in parallel] == [binary_value(ind.genome) for ind in pop]


def test_evaluate_population_is_idempotent():
    pop = generate_population(_params(), RNGManager(seed=5))
    once = evaluate_population(pop, max_ones)
    twice = evaluate_population(once, max_ones)
    assert [i.fitness for i in once] == [i.fitness for i in twice]


def test_evaluate_population_propagates_fitness_errors():
    pop = generate_population(_params(), RNGManager(seed=6))

    def broken(genome):
        if genome[0] == 1:
            raise RuntimeError("boom")
        return 0

    with pytest.raises(RuntimeError, match="boom"):
        evaluate_population(pop, broken, parallel=True)


def test_evaluate_population_rejects_non_numeric_fitness():
    with pytest.raises(ValidationError) as exc:
        evaluate_population([Individual(genome=(1,))], lambda g: "high")
    assert exc.value.code == "invalid_fitness"


def test_evaluate_population_empty():
    assert evaluate_population([], max_ones) == []
