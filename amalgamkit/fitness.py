"""Fitness values and selection of the fittest individuals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, TypeVar, runtime_checkable


@runtime_checkable
class Fitness(Protocol):
    """Anything carrying a scalar ``fitness``; larger is better."""

    @property
    def fitness(self) -> float: ...


@dataclass(frozen=True)
class ScalarFitness:
    """A fitness that is just a number."""

    fitness: float


FitnessT = TypeVar("FitnessT", bound=Fitness)

FitnessFunction = Callable[[Sequence[float]], Fitness]


def select_top_n(
    individuals: Sequence[Sequence[float]],
    fitnesses: Sequence[FitnessT],
    n: int,
) -> tuple[list[list[float]], list[FitnessT]]:
    """Return the ``n`` fittest individuals and their fitnesses, best first.

    Individuals of equal fitness keep their original order.
    """
    pairs = list(zip(fitnesses, individuals))
    if any(math.isnan(fit.fitness) for fit, _ in pairs):
        raise ValueError("fitness values must not be NaN")
    ranked = sorted(pairs, key=lambda pair: pair[0].fitness, reverse=True)[:n]
    return [list(ind) for _, ind in ranked], [fit for fit, _ in ranked]