"""
Negative binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.stats import variates
from pysatl_distributions.stats.special import regularized_incomplete_beta
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_negative_binomial_family() -> None:
    """
    Configure and register the Negative binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution.

    Number of successes observed before the r-th failure, each trial failing
    (and thereby counting toward the stopping rule) with probability p.
    The count r may be any positive real number.

    Probability mass function:
        P(X = k) = Γ(k + r) / (k! Γ(r)) p^r (1-p)^k, k = 0, 1, ...

    Variates are drawn as a gamma-mixed Poisson:
        X ~ Poisson(G (1-p)/p), G ~ Gamma(r, 1).
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_FailuresProb, parameters)
        r, p = parameters.failures, parameters.prob
        if not float(x).is_integer() or x < 0:
            return 0.0
        if p == 1:
            return 1.0 if x == 0 else 0.0
        return math.exp(
            math.lgamma(x + r)
            - math.lgamma(x + 1.0)
            - math.lgamma(r)
            + r * math.log(p)
            + x * math.log1p(-p)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        """``P(X <= x) = I_p(r, k + 1)`` with ``k = floor(x)``."""
        parameters = cast(_FailuresProb, parameters)
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return regularized_incomplete_beta(
            parameters.failures, math.floor(x) + 1.0, parameters.prob
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_FailuresProb, parameters)
        p = parameters.prob
        return parameters.failures * (1.0 - p) / p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_FailuresProb, parameters)
        p = parameters.prob
        return parameters.failures * (1.0 - p) / p**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_FailuresProb, parameters)
        p = parameters.prob
        if p == 1:
            raise IndeterminateError(CharacteristicName.SKEW, "distribution is degenerate")
        return (2.0 - p) / math.sqrt(parameters.failures * (1.0 - p))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_FailuresProb, parameters)
        r, p = parameters.failures, parameters.prob
        if p == 1:
            raise IndeterminateError(CharacteristicName.KURT, "distribution is degenerate")
        excess_kurtosis = 6.0 / r + p**2 / (r * (1.0 - p))
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_FailuresProb, parameters)
        return variates.negative_binomial(rng, parameters.failures, parameters.prob)

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["failuresProb"],
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
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="failuresProb")
    class _FailuresProb(Parametrization):
        """
        Parameters
        ----------
        failures : float
            Number of failures until the experiment stops (r)
        prob : float
            Probability of a failure in a single trial (p)
        """

        failures: float
        prob: float

        @constraint(description="failures > 0")
        def check_failures_positive(self) -> bool:
            return self.failures > 0

        @constraint(description="0 < prob <= 1")
        def check_prob_in_range(self) -> bool:
            return 0 < self.prob <= 1

    ParametricFamilyRegister.register(NegativeBinomial)
