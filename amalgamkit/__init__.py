"""Gaussian models, constraints, selection, parameters and progress reporting for AMaLGaM-IDEA style optimisation."""

__version__ = "0.1.0"