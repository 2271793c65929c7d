import pytest

from simple_ga.config import PRESET_DEFAULT, PRESET_QUICK
from simple_ga.evolution.params import GAParams
from simple_ga.fitness.functions import max_ones
from simple_ga.utils.validation import ValidationError


def test_from_config_default_preset():
    params = GAParams.from_config(PRESET_DEFAULT, fitness_function=max_ones)
    assert params.genome_size == 16
    assert params.population_size == 100
    assert params.num_generations == 50
    assert params.num_parents == 5
    assert params.crossover_rate == 0.75
    assert params.mutation_rate == 0.1
    assert params.fitness_function is max_ones
    assert params.num_offspring == 95


def test_from_config_fills_missing_keys_from_default():
    params = GAParams.from_config({'genome_size': 4}, fitness_function=max_ones)
    assert params.genome_size == 4
    assert params.population_size == PRESET_DEFAULT['population_size']


def test_from_config_accepts_fitness_function_key():
    params = GAParams.from_config({**PRESET_QUICK, 'fitness_function': max_ones})
    assert params.fitness_function is max_ones


def test_from_config_rejects_unknown_keys():
    with pytest.raises(ValidationError) as exc:
        GAParams.from_config({'elite_count': 3}, fitness_function=max_ones)
    assert exc.value.code == "unknown_config_key"


def test_from_config_requires_fitness_function():
    with pytest.raises(ValidationError) as exc:
        GAParams.from_config(PRESET_DEFAULT)
    assert exc.value.code == "missing_param"


@pytest.mark.parametrize(
    "overrides",
    [
        {'genome_size': 0},
        {'population_size': 0},
        {'num_generations': -1},
        {'num_parents': 0},
        {'num_parents': 101},
        {'crossover_rate': 1.2},
        {'mutation_rate': -0.1},
        {'mutation_rate': float('nan')},
        {'num_parents': 1, 'crossover_rate': 0.5},
        {'genome_size': True},
        {'genome_size': 8.0},
        {'max_workers': 0},
        {'parallel_evaluation': 'false'},
        {'parallel_evaluation': 1},
    ],
)
def test_invalid_parameter_combinations_fail_fast(overrides):
    with pytest.raises(ValidationError) as exc:
        GAParams.from_config({**PRESET_DEFAULT, **overrides}, fitness_function=max_ones)
    assert exc.value.code == "invalid_param"


def test_single_parent_allowed_without_crossover():
    params = GAParams.from_config({'num_parents': 1, 'crossover_rate': 0.0}, fitness_function=max_ones)
    assert params.num_parents == 1


def test_fitness_function_must_be_callable():
    with pytest.raises(ValidationError):
        GAParams.from_config(PRESET_DEFAULT, fitness_function="max-ones")


def test_params_are_immutable_and_replace_revalidates():
    params = GAParams.from_config(PRESET_QUICK, fitness_function=max_ones)
    with pytest.raises(Exception):
        params.genome_size = 3  # type: ignore[misc]
    assert params.replace(num_generations=0).num_generations == 0
    with pytest.raises(ValidationError):
        params.replace(num_parents=50)
