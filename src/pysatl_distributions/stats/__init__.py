"""
Numerical core: special functions, random sources and variate generators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .limits import DEFAULT_LIMITS, IterationLimits
from .random_source import NormalGenerator, RandomSource, UniformSource
from .special import (
    beta_function,
    binomial_coefficient,
    incomplete_beta,
    log_beta_function,
    log_binomial_coefficient,
    regularized_gamma_p,
    regularized_gamma_q,
    regularized_incomplete_beta,
    regularized_incomplete_gamma_lower,
    regularized_incomplete_gamma_upper,
)

__all__ = [
    "IterationLimits",
    "DEFAULT_LIMITS",
    "UniformSource",
    "NormalGenerator",
    "RandomSource",
    "regularized_incomplete_gamma_lower",
    "regularized_incomplete_gamma_upper",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "beta_function",
    "log_beta_function",
    "regularized_incomplete_beta",
    "incomplete_beta",
    "binomial_coefficient",
    "log_binomial_coefficient",
]
