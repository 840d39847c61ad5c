"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.stats import variates
from pysatl_distributions.stats.special import regularized_gamma_q
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution with mean μ.

    Probability mass function:
        P(X = k) = μ^k exp(-μ) / k!, k = 0, 1, ...

    The CDF is the regularized upper incomplete gamma function Q(k + 1, μ).
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Mean, parameters)
        mu = parameters.mu
        if not float(x).is_integer() or x < 0:
            return 0.0
        return math.exp(x * math.log(mu) - math.lgamma(x + 1.0) - mu)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Mean, parameters)
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return regularized_gamma_q(math.floor(x) + 1.0, parameters.mu)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return float(parameters.mu)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return float(parameters.mu)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return 1.0 / math.sqrt(parameters.mu)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Mean, parameters)
        excess_kurtosis = 1.0 / parameters.mu
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_Mean, parameters)
        return variates.poisson(rng, parameters.mu)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Parameters
        ----------
        mu : float
            Mean (rate) of the distribution (μ)
        """

        mu: float

        @constraint(description="mu > 0")
        def check_mu_positive(self) -> bool:
            return self.mu > 0

    ParametricFamilyRegister.register(Poisson)
