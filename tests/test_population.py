import pytest

from amalgamkit.population import scramble_population, unscramble_population


def test_unscramble_population():
    indices = [[0, 1], [2, 3]]
    scrambled = [
        [[1.0, 2.0], [5.0, 6.0]],
        [[3.0, 4.0], [7.0, 8.0]],
    ]
    expected = [
        [1.0, 2.0, 3.0, 4.0],
        [5.0, 6.0, 7.0, 8.0],
    ]
    assert unscramble_population(indices, scrambled) == expected


def test_unscramble_population_with_non_contiguous_indices():
    indices = [[0, 2], [1, 3]]
    scrambled = [
        [[1.0, 3.0], [5.0, 7.0]],
        [[2.0, 4.0], [6.0, 8.0]],
    ]
    expected = [
        [1.0, 2.0, 3.0, 4.0],
        [5.0, 6.0, 7.0, 8.0],
    ]
    assert unscramble_population(indices, scrambled) == expected


def test_scramble_population_non_contiguous():
    indices = [[0, 2], [1, 3]]
    original = [
        [1.0, 2.0, 3.0, 4.0],
        [5.0, 6.0, 7.0, 8.0],
    ]
    expected = [
        [[1.0, 3.0], [5.0, 7.0]],
        [[2.0, 4.0], [6.0, 8.0]],
    ]
    assert scramble_population(indices, original) == expected


def test_scramble_population_contiguous():
    indices = [[0, 1], [2, 3]]
    original = [
        [1.0, 2.0, 3.0, 4.0],
        [5.0, 6.0, 7.0, 8.0],
    ]
    expected = [
        [[1.0, 2.0], [5.0, 6.0]],
        [[3.0, 4.0], [7.0, 8.0]],
    ]
    assert scramble_population(indices, original) == expected


@pytest.mark.parametrize(
    "indices",
    [
        [[0, 1], [2, 3]],
        [[0, 2], [1, 3]],
        [[3, 0], [2], [1]],
        [[0, 1, 2, 3]],
    ],
)
def test_round_trip_restores_population(indices):
    original = [
        [1.0, 2.0, 3.0, 4.0],
        [5.0, 6.0, 7.0, 8.0],
        [-1.5, 0.0, 2.5, 9.0],
    ]
    scrambled = scramble_population(indices, original)
    assert unscramble_population(indices, scrambled) == original


def test_scramble_keeps_subset_order():
    scrambled = scramble_population([[2, 0], [1]], [[10.0, 20.0, 30.0]])
    assert scrambled == [[[30.0, 10.0]], [[20.0]]]


def test_unscramble_fills_missing_variables_with_zero():
    result = unscramble_population([[0], [2]], [[[1.0]], [[3.0]]])
    assert result == [[1.0, 0.0, 3.0]]


def test_scramble_does_not_modify_input():
    original = [[1.0, 2.0], [3.0, 4.0]]
    scrambled = scramble_population([[0], [1]], original)
    scrambled[0][0][0] = 99.0
    assert original == [[1.0, 2.0], [3.0, 4.0]]


def test_scramble_empty_indices_raises():
    with pytest.raises(ValueError):
        scramble_population([], [[1.0, 2.0]])


def test_unscramble_empty_indices_raises():
    with pytest.raises(ValueError):
        unscramble_population([], [[[1.0]]])


def test_unscramble_too_many_values_raises():
    with pytest.raises(ValueError):
        unscramble_population([[0], [1]], [[[1.0, 2.0]], [[3.0]]])


def test_unscramble_more_individuals_than_first_subset_raises():
    with pytest.raises(ValueError):
        unscramble_population([[0], [1]], [[[1.0]], [[2.0], [3.0]]])


def test_scramble_index_out_of_range_raises():
    with pytest.raises(IndexError):
        scramble_population([[0, 5]], [[1.0, 2.0]])