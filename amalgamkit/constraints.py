"""Constraints that repair candidate solutions so that they become feasible."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Iterable, Sequence


class Constraint(abc.ABC):
    """A rule that maps an arbitrary vector of values to a feasible one."""

    @abc.abstractmethod
    def repair(self, values: Iterable[float]) -> list[float]:
        """Return a repaired copy of ``values``; the input is left untouched."""


def _rescale_to(values: list[float], target: float) -> list[float]:
    if not values:
        return []
    current = sum(values)
    if current == 0.0:
        return [target / len(values)] * len(values)
    if current != target:
        factor = target / current
        return [value * factor for value in values]
    return values


def _as_bounds(bounds: Sequence[float], name: str) -> tuple[float, ...]:
    result = tuple(float(b) for b in bounds)
    if not result:
        raise ValueError(f"{name} needs at least one bound")
    return result


def _bound_at(bounds: tuple[float, ...], index: int, count: int) -> float:
    if len(bounds) == 1:
        return bounds[0]
    if len(bounds) < count:
        raise ValueError(
            f"{len(bounds)} bounds given for {count} values; give one or one per value"
        )
    return bounds[index]


@dataclass(frozen=True)
class SumTo(Constraint):
    """Scale the values proportionally so that they add up to ``total``.

    When the values add up to zero, every value becomes ``total / len(values)``.
    """

    total: float

    def repair(self, values: Iterable[float]) -> list[float]:
        return _rescale_to([float(v) for v in values], self.total)


@dataclass(frozen=True)
class PositiveSumTo(Constraint):
    """Clip negative values to zero, then scale the values to add up to ``total``."""

    total: float

    def repair(self, values: Iterable[float]) -> list[float]:
        clipped = [float(v) if v >= 0.0 else 0.0 for v in values]
        return _rescale_to(clipped, self.total)


@dataclass(frozen=True)
class MaxValue(Constraint):
    """Cap each value at its upper bound; a single bound applies to all values."""

    maximum: tuple[float, ...] = field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "maximum", _as_bounds(self.maximum, "MaxValue"))

    def repair(self, values: Iterable[float]) -> list[float]:
        items = [float(v) for v in values]
        repaired = []
        for index, value in enumerate(items):
            upper = _bound_at(self.maximum, index, len(items))
            repaired.append(upper if value > upper else value)
        return repaired


@dataclass(frozen=True)
class MinValue(Constraint):
    """Raise each value to its lower bound; a single bound applies to all values."""

    minimum: tuple[float, ...] = field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "minimum", _as_bounds(self.minimum, "MinValue"))

    def repair(self, values: Iterable[float]) -> list[float]:
        items = [float(v) for v in values]
        repaired = []
        for index, value in enumerate(items):
            lower = _bound_at(self.minimum, index, len(items))
            repaired.append(lower if value < lower else value)
        return repaired


@dataclass(frozen=True)
class MaxMinValue(Constraint):
    """Clamp each value between its bounds; the upper bound is applied first."""

    maximum: tuple[float, ...] = field()
    minimum: tuple[float, ...] = field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "maximum", _as_bounds(self.maximum, "MaxMinValue"))
        object.__setattr__(self, "minimum", _as_bounds(self.minimum, "MaxMinValue"))

    def repair(self, values: Iterable[float]) -> list[float]:
        items = [float(v) for v in values]
        repaired = []
        for index, value in enumerate(items):
            upper = _bound_at(self.maximum, index, len(items))
            if value > upper:
                value = upper
            lower = _bound_at(self.minimum, index, len(items))
            if value < lower:
                value = lower
            repaired.append(value)
        return repaired


@dataclass(frozen=True)
class NoConstraint(Constraint):
    """Leave the values as they are."""

    def repair(self, values: Iterable[float]) -> list[float]:
        return [float(v) for v in values]