"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distributions.families.builtins.continuous.beta import configure_beta_family
from pysatl_distributions.families.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_distributions.families.builtins.continuous.chi_squared import (
    configure_chi_squared_family,
)
from pysatl_distributions.families.builtins.continuous.exponential import (
    configure_exponential_family,
)
from pysatl_distributions.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_distributions.families.builtins.continuous.log_normal import (
    configure_log_normal_family,
)
from pysatl_distributions.families.builtins.continuous.logistic import configure_logistic_family
from pysatl_distributions.families.builtins.continuous.normal import configure_normal_family
from pysatl_distributions.families.builtins.continuous.pareto import configure_pareto_family
from pysatl_distributions.families.builtins.continuous.students_t import (
    configure_students_t_family,
)
from pysatl_distributions.families.builtins.continuous.uniform import configure_uniform_family
from pysatl_distributions.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_chi_squared_family",
    "configure_students_t_family",
    "configure_cauchy_family",
    "configure_logistic_family",
    "configure_weibull_family",
    "configure_pareto_family",
    "configure_log_normal_family",
]
