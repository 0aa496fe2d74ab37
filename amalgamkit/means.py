"""Splitting mean vectors into variable subsets and joining them back together."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _total_variables(indices: Sequence[Sequence[int]]) -> int:
    flat = [index for subset in indices for index in subset]
    if not flat:
        raise ValueError("subset indices must not be empty")
    if any(index < 0 for index in flat):
        raise ValueError("subset indices must be non-negative")
    return max(flat) + 1


def scramble_means(
    indices: Sequence[Sequence[int]],
    mean: Sequence[float],
) -> list[np.ndarray]:
    """Split a full mean vector into one vector per subset of variable indices.

    Each part lists the values of its subset in the order the subset gives them.
    """
    if not indices:
        raise ValueError("subset indices must not be empty")
    full = np.asarray(mean, dtype=float).reshape(-1)
    parts = []
    for subset in indices:
        subset = [int(index) for index in subset]
        if any(index < 0 or index >= full.shape[0] for index in subset):
            raise IndexError(
                f"subset {subset} refers to variables outside a mean of length {full.shape[0]}"
            )
        parts.append(full[subset].copy())
    return parts


def unscramble_means(
    indices: Sequence[Sequence[int]],
    means: Sequence[Sequence[float]],
) -> np.ndarray:
    """Join per-subset mean vectors back into one full mean vector.

    Variables that no subset provides are left at ``0.0``.
    """
    total_vars = _total_variables(indices)
    if len(means) < len(indices):
        raise ValueError(f"{len(means)} means given for {len(indices)} subsets")
    joined = np.zeros(total_vars)
    for subset, part in zip(indices, means):
        subset = [int(index) for index in subset]
        values = np.asarray(part, dtype=float).reshape(-1)
        if values.shape[0] > len(subset):
            raise ValueError(
                f"mean of length {values.shape[0]} for a subset of {len(subset)} variables"
            )
        joined[subset[: values.shape[0]]] = values
    return joined