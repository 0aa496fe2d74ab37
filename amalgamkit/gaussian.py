"""Multivariate Gaussian distributions with numerically stable Cholesky factors."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Sequence

import numpy as np

_JITTER = 1e-6


class CovMatrixType(enum.Enum):
    """Shape of the covariance matrix estimated from observations."""

    FULL = "full"
    DIAGONAL = "diagonal"


class MultivariateGaussianError(Exception):
    """Base class for errors raised while building a distribution."""


class InvalidCovMatrixError(MultivariateGaussianError):
    """The covariance matrix has no usable Cholesky factorisation."""


class InvalidFlatCovMatrixError(MultivariateGaussianError):
    """A flattened covariance matrix has a length that is not triangular."""


class EmptyObservationSetError(MultivariateGaussianError):
    """No observations, or observations without any dimension, were given."""


def flatten_cov(cov: Sequence[Sequence[float]]) -> list[float]:
    """Return the upper triangle (diagonal included) of ``cov``, row by row."""
    rows = [list(row) for row in cov]
    return [value for i, row in enumerate(rows) for value in row[i:]]


def unflatten_cov(flat_cov: Sequence[float]) -> list[list[float]]:
    """Rebuild a symmetric matrix from its flattened upper triangle."""
    flat = list(flat_cov)
    n_float = (-1.0 + math.sqrt(1.0 + 8.0 * len(flat))) / 2.0
    if n_float != math.floor(n_float):
        raise InvalidFlatCovMatrixError(
            f"length {len(flat)} is not the size of a triangular matrix"
        )
    n = int(n_float)
    matrix = [[0.0] * n for _ in range(n)]
    values = iter(flat)
    for i in range(n):
        for j in range(i, n):
            element = next(values)
            matrix[i][j] = element
            matrix[j][i] = element
    return matrix


def _with_jitter(cov: np.ndarray) -> np.ndarray:
    return cov + _JITTER * np.eye(cov.shape[0])


def _scaled(matrix: np.ndarray) -> tuple[np.ndarray | None, float]:
    scale = float(np.linalg.norm(matrix))
    if not math.isfinite(scale) or scale == 0.0:
        return None, scale
    return matrix / scale, scale


def _cholesky_or_none(matrix: np.ndarray | None) -> np.ndarray | None:
    if matrix is None:
        return None
    try:
        lower = np.linalg.cholesky(matrix)
    except np.linalg.LinAlgError:
        return None
    return lower if np.all(np.isfinite(lower)) else None


def _inverse_or_none(matrix: np.ndarray | None) -> np.ndarray | None:
    if matrix is None:
        return None
    try:
        inverse = np.linalg.inv(matrix)
    except np.linalg.LinAlgError:
        return None
    return inverse if np.all(np.isfinite(inverse)) else None


def _stable_cholesky(cov: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return the Cholesky factor and the (possibly jittered) covariance."""
    scaled_cov, scale = _scaled(cov)
    lower = _cholesky_or_none(scaled_cov)
    if lower is not None:
        return lower * math.sqrt(scale), cov

    cov = _with_jitter(cov)
    scaled_jittered, _ = _scaled(cov)
    lower = _cholesky_or_none(scaled_jittered)
    if lower is None:
        raise InvalidCovMatrixError("covariance matrix is not positive definite")
    return lower * math.sqrt(scale), cov


def _stable_factors(cov: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the Cholesky factor, its inverse and the covariance actually used."""
    cov = np.array(cov, dtype=float)
    lower, cov = _stable_cholesky(cov)
    scaled_lower, scale = _scaled(lower)
    scaled_inverse = _inverse_or_none(scaled_lower)
    if scaled_inverse is not None:
        return lower, scaled_inverse / scale, cov

    cov = _with_jitter(cov)
    lower, cov = _stable_cholesky(cov)
    scaled_lower, scale = _scaled(lower)
    scaled_inverse = _inverse_or_none(scaled_lower)
    if scaled_inverse is None:
        raise InvalidCovMatrixError("Cholesky factor is not invertible")
    return lower, scaled_inverse * math.sqrt(1.0 / scale), cov


def cholesky_and_inverse(cov) -> tuple[np.ndarray, np.ndarray]:
    """Return the lower Cholesky factor of ``cov`` and the inverse of that factor.

    The matrix is scaled by its Frobenius norm before factorising, and a small
    jitter is added to the diagonal when the factorisation fails.
    """
    lower, inverse, _ = _stable_factors(np.asarray(cov, dtype=float))
    return lower, inverse


class MultivariateGaussian:
    """A multivariate normal distribution sampled through its Cholesky factor."""

    def __init__(self, mean, cov) -> None:
        mean_arr = np.array(mean, dtype=float).reshape(-1)
        cov_arr = np.array(cov, dtype=float)
        self._validate(mean_arr, cov_arr)
        self.cholesky, self.cholesky_inv, _ = _stable_factors(cov_arr)
        self.mean = mean_arr
        self.cov = cov_arr

    @staticmethod
    def _validate(mean: np.ndarray, cov: np.ndarray) -> None:
        if cov.ndim != 2 or cov.shape[0] != cov.shape[1] or cov.shape[0] != mean.shape[0]:
            raise InvalidCovMatrixError(
                f"covariance of shape {cov.shape} does not fit a mean of length {mean.shape[0]}"
            )

    @classmethod
    def _from_adjusted(cls, mean: np.ndarray, cov: np.ndarray) -> "MultivariateGaussian":
        cls._validate(mean, cov)
        instance = cls.__new__(cls)
        instance.cholesky, instance.cholesky_inv, instance.cov = _stable_factors(cov)
        instance.mean = mean
        return instance

    @classmethod
    def from_flat(cls, mean, flat_cov) -> "MultivariateGaussian":
        """Build a distribution from a mean and a flattened upper-triangular covariance."""
        mean_arr = np.array(mean, dtype=float).reshape(-1)
        cov = np.array(unflatten_cov(flat_cov), dtype=float).reshape(
            len(mean_arr) if not len(flat_cov) else -1, -1
        ) if flat_cov else np.zeros((0, 0))
        return cls._from_adjusted(mean_arr, cov)

    @classmethod
    def from_observations(
        cls, observations: Iterable[Sequence[float]], cov_type: CovMatrixType
    ) -> "MultivariateGaussian":
        """Estimate mean and (population) covariance from a set of observations."""
        rows = [list(obs) for obs in observations]
        if not rows or not rows[0]:
            raise EmptyObservationSetError("no observations to estimate from")
        data = np.array(rows, dtype=float)
        mean = data.mean(axis=0)
        diffs = data - mean
        if cov_type is CovMatrixType.FULL:
            cov = diffs.T @ diffs
        else:
            cov = np.diag(np.sum(diffs * diffs, axis=0))
        cov = cov / len(rows)
        return cls._from_adjusted(mean, cov)

    def sample(self, rng: np.random.Generator | None = None) -> np.ndarray:
        """Draw one sample vector."""
        generator = rng if rng is not None else np.random.default_rng()
        z = generator.standard_normal(self.mean.shape[0])
        return self.mean + self.cholesky @ z

    def sample_n(self, n: int, rng: np.random.Generator | None = None) -> np.ndarray:
        """Draw ``n`` samples, returned as the columns of a ``(dim, n)`` array."""
        generator = rng if rng is not None else np.random.default_rng()
        samples = np.zeros((self.mean.shape[0], n))
        for column in range(n):
            samples[:, column] = self.sample(generator)
        return samples

    def __repr__(self) -> str:
        return f"MultivariateGaussian(mean={self.mean.tolist()!r}, cov={self.cov.tolist()!r})"