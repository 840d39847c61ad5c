"""
Iteration limits for numerical routines.

Every iterative loop in :mod:`pysatl_distributions.stats` (series expansions,
continued fractions, rejection samplers, binomial inversion) reads its caps
and tolerances from an :class:`IterationLimits` instance.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IterationLimits:
    """
    Caps and tolerances of the iterative numerical routines.

    Parameters
    ----------
    gamma_series_max_terms : int, default 100
        Term cap of the incomplete gamma series.
    gamma_series_epsilon : float, default 1e-14
        Relative size of the last term at which the series stops.
    gamma_max_iterations : int, default 10_000
        Cap used when the incomplete gamma function must converge
        (series or continued fraction evaluated by the CDFs).
    beta_cf_max_iterations : int, default 100_000
        Cap of the incomplete beta continued fraction.
    continued_fraction_epsilon : float, default machine epsilon
        Agreement of successive convergents at which the incomplete gamma
        and incomplete beta continued fractions stop.
    binomial_inversion_cutoff : int, default 110
        Largest index walked by binomial inversion before restarting.
    max_rejection_attempts : int, default 1_000_000
        Safety cap of rejection loops; reaching it raises instead of
        returning a value.
    """

    gamma_series_max_terms: int = 100
    gamma_series_epsilon: float = 1e-14
    gamma_max_iterations: int = 10_000
    beta_cf_max_iterations: int = 100_000
    continued_fraction_epsilon: float = sys.float_info.epsilon
    binomial_inversion_cutoff: int = 110
    max_rejection_attempts: int = 1_000_000

    def __post_init__(self) -> None:
        for name in (
            "gamma_series_max_terms",
            "gamma_max_iterations",
            "beta_cf_max_iterations",
            "binomial_inversion_cutoff",
            "max_rejection_attempts",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be a positive integer.")
        if self.gamma_series_epsilon <= 0 or self.continued_fraction_epsilon <= 0:
            raise ValueError("Tolerances must be positive.")


DEFAULT_LIMITS = IterationLimits()
"""Limits used when none are given explicitly."""


__all__ = ["IterationLimits", "DEFAULT_LIMITS"]
