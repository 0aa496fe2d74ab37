"""Splitting populations into variable subsets and joining them back together."""

from __future__ import annotations

from typing import Sequence


def _total_variables(indices: Sequence[Sequence[int]]) -> int:
    flat = [index for subset in indices for index in subset]
    if not flat:
        raise ValueError("subset indices must not be empty")
    if any(index < 0 for index in flat):
        raise ValueError("subset indices must be non-negative")
    return max(flat) + 1


def scramble_population(
    indices: Sequence[Sequence[int]],
    population: Sequence[Sequence[float]],
) -> list[list[list[float]]]:
    """Split each individual into one part per subset of variable indices.

    The result holds, for every subset, the population restricted to the
    variables of that subset, in the order the subset lists them.
    """
    if not indices:
        raise ValueError("subset indices must not be empty")
    individuals = [list(individual) for individual in population]
    return [
        [[individual[index] for index in subset] for individual in individuals]
        for subset in indices
    ]


def unscramble_population(
    indices: Sequence[Sequence[int]],
    population: Sequence[Sequence[Sequence[float]]],
) -> list[list[float]]:
    """Join per-subset populations back into whole individuals.

    The number of individuals is taken from the first subset. Variables that
    no subset provides are left at ``0.0``.
    """
    total_vars = _total_variables(indices)
    if not population:
        raise ValueError("population must hold one part per subset")
    num_individuals = len(population[0])
    joined = [[0.0] * total_vars for _ in range(num_individuals)]

    for subset, subset_population in zip(indices, population):
        subset = list(subset)
        if len(subset_population) > num_individuals:
            raise ValueError(
                f"subset population has {len(subset_population)} individuals, "
                f"expected at most {num_individuals}"
            )
        for target, part in zip(joined, subset_population):
            part = list(part)
            if len(part) > len(subset):
                raise ValueError(
                    f"individual part has {len(part)} values for a subset of "
                    f"{len(subset)} variables"
                )
            for original_index, value in zip(subset, part):
                target[original_index] = value
    return joined