"""
Random-variate generators.

Scalar generators taking a :class:`~pysatl_distributions.stats.random_source.RandomSource`
as their first argument.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .continuous import (
    beta,
    cauchy,
    chi_squared,
    exponential,
    gamma,
    log_normal,
    logistic,
    normal,
    pareto,
    students_t,
    uniform,
    weibull,
)
from .discrete import binomial, geometric, negative_binomial, poisson

__all__ = [
    "uniform",
    "normal",
    "exponential",
    "gamma",
    "beta",
    "chi_squared",
    "students_t",
    "cauchy",
    "logistic",
    "weibull",
    "pareto",
    "log_normal",
    "binomial",
    "poisson",
    "negative_binomial",
    "geometric",
]
