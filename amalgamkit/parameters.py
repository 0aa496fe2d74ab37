"""Tuning parameters of the AMaLGaM-IDEA optimiser."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .gaussian import CovMatrixType


@dataclass
class AmalgamIdeaParameters:
    """Population size, selection, variance scaling and memory parameters."""

    population_size: int
    tau: float
    c_mult_inc: float
    c_mult_dec: float
    c_mult_min: float
    eta_cov: float
    eta_shift: float
    alpha_shift: float
    gamma_shift: float
    stagnant_iterations_threshold: int

    @classmethod
    def auto(
        cls,
        problem_size: int,
        cov_type: CovMatrixType,
        factorized: bool,
        memory: bool,
    ) -> "AmalgamIdeaParameters":
        """Derive the parameters from the problem size and the algorithm variant."""
        if problem_size < 1:
            raise ValueError("problem_size must be at least 1")

        tau = 0.35
        gamma_shift = 2.0
        c_mult_min = 1e-4

        alphas_cov = (0.0, 0.0, 0.0)
        alphas_shift = (0.0, 0.0, 0.0)

        if not factorized:
            if cov_type is CovMatrixType.FULL:
                if memory:
                    alphas_cov = (-1.1, 1.2, 1.6)
                    alphas_shift = (-1.2, 0.31, 0.50)
                    alphas_population = (0.0, 10.0, 0.5)
                else:
                    alphas_population = (17.0, 3.0, 1.5)
            else:
                if memory:
                    alphas_cov = (-0.40, 0.15, -0.034)
                    alphas_shift = (-0.31, 0.70, 0.65)
                    alphas_population = (0.0, 4.0, 0.5)
                else:
                    alphas_population = (0.0, 10.0, 0.5)
        elif memory:
            alphas_cov = (-0.33, 1.5, 1.1)
            alphas_shift = (-0.52, 0.70, 0.65)
            alphas_population = (0.0, 7.0, 0.5)
        else:
            alphas_population = (12.0, 8.0, 0.7)

        a0, a1, a2 = alphas_population
        population_size = max(0, int(a0 + a1 * problem_size**a2))

        def memory_factor(alphas: tuple[float, float, float]) -> float:
            if not memory:
                return 1.0
            b0, b1, b2 = alphas
            return 1.0 - math.exp(b0 * population_size**b1 / problem_size**b2)

        eta_cov = memory_factor(alphas_cov)
        eta_shift = memory_factor(alphas_shift)

        alpha_shift = 0.5 * tau * population_size / (population_size + 1)
        c_mult_dec = 0.9
        c_mult_inc = 1.0 / c_mult_dec

        return cls(
            population_size=population_size,
            tau=tau,
            c_mult_inc=c_mult_inc,
            c_mult_dec=c_mult_dec,
            c_mult_min=c_mult_min,
            eta_cov=eta_cov,
            eta_shift=eta_shift,
            alpha_shift=alpha_shift,
            gamma_shift=gamma_shift,
            stagnant_iterations_threshold=25 + problem_size,
        )