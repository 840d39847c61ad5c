"""
Distribution Families Configuration
====================================

This module registers the builtin parametric distribution families:

- continuous: Normal, ContinuousUniform, Exponential, Gamma, Beta, ChiSquared,
  StudentsT, Cauchy, Logistic, Weibull, Pareto, LogNormal;
- discrete: Binomial, Poisson, NegativeBinomial, Geometric.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; each family is configured at most once.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_distributions.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_log_normal_family,
    configure_logistic_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_students_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all builtin distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_beta_family()
    configure_chi_squared_family()
    configure_students_t_family()
    configure_cauchy_family()
    configure_logistic_family()
    configure_weibull_family()
    configure_pareto_family()
    configure_log_normal_family()
    configure_binomial_family()
    configure_poisson_family()
    configure_negative_binomial_family()
    configure_geometric_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
