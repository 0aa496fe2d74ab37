import math

import pytest

from amalgamkit.fitness import Fitness, ScalarFitness, select_top_n

POPULATION = [
    [1.0, 2.0, 3.0, 4.0, 5.0],
    [5.0, 4.0, 3.0, 2.0, 1.0],
    [0.5, 1.5, 2.5, 3.5, 4.5],
    [2.0, 2.0, 2.0, 2.0, 2.0],
    [0.0, 0.0, 0.0, 0.0, 0.0],
    [3.0, 3.0, 3.0, 3.0, 3.0],
]


def _sum_fitnesses(population):
    return [ScalarFitness(sum(ind)) for ind in population]


def test_selects_best_keeping_order_of_ties():
    selected, fits = select_top_n(POPULATION, _sum_fitnesses(POPULATION), 3)
    assert selected == [
        [1.0, 2.0, 3.0, 4.0, 5.0],
        [5.0, 4.0, 3.0, 2.0, 1.0],
        [3.0, 3.0, 3.0, 3.0, 3.0],
    ]
    assert [f.fitness for f in fits] == [15.0, 15.0, 15.0]


def test_fitnesses_are_sorted_descending():
    _, fits = select_top_n(POPULATION, _sum_fitnesses(POPULATION), len(POPULATION))
    values = [f.fitness for f in fits]
    assert values == sorted(values, reverse=True)


def test_n_larger_than_population_returns_all():
    selected, fits = select_top_n(POPULATION, _sum_fitnesses(POPULATION), 100)
    assert len(selected) == len(POPULATION)
    assert len(fits) == len(POPULATION)


def test_n_zero_returns_nothing():
    assert select_top_n(POPULATION, _sum_fitnesses(POPULATION), 0) == ([], [])


def test_single_best_is_returned_with_its_fitness():
    selected, fits = select_top_n(POPULATION[2:5], _sum_fitnesses(POPULATION[2:5]), 1)
    assert selected == [POPULATION[2]]
    assert fits[0].fitness == sum(POPULATION[2])


def test_selected_individuals_are_copies():
    population = [[1.0], [2.0]]
    selected, _ = select_top_n(population, _sum_fitnesses(population), 2)
    selected[0][0] = -1.0
    assert population == [[1.0], [2.0]]


def test_nan_fitness_raises():
    with pytest.raises(ValueError):
        select_top_n([[1.0], [2.0]], [ScalarFitness(math.nan), ScalarFitness(1.0)], 1)


def test_scalar_fitness_satisfies_protocol():
    fit = ScalarFitness(3.0)
    assert isinstance(fit, Fitness)
    assert fit.fitness == 3.0