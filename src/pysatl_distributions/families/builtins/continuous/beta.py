"""
Beta distribution family implementation.

Contains the Beta family on ``[0, 1]``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.stats import variates
from pysatl_distributions.stats.special import log_beta_function, regularized_incomplete_beta
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def _endpoint_density(own: float, other: float) -> float:
    # Limit of the density at the endpoint whose exponent is ``own - 1``.
    if own < 1:
        return math.inf
    if own == 1:
        return 1.0 / math.exp(log_beta_function(1.0, other))
    return 0.0


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on [0, 1] with shape parameters α and β.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β)

    The CDF is the regularized incomplete beta function I_x(α, β).
    Variates are drawn as g1 / (g1 + g2) for independent g1 ~ Gamma(α, 1)
    and g2 ~ Gamma(β, 1).
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """Probability density function for beta distribution."""
        parameters = cast(_AlphaBeta, parameters)
        a, b = parameters.alpha, parameters.beta

        if x < 0 or x > 1:
            return 0.0
        if x == 0:
            return _endpoint_density(a, b)
        if x == 1:
            return _endpoint_density(b, a)
        return math.exp(
            (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x) - log_beta_function(a, b)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function, ``I_x(α, β)``."""
        parameters = cast(_AlphaBeta, parameters)
        return regularized_incomplete_beta(parameters.alpha, parameters.beta, x)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of beta distribution."""
        parameters = cast(_AlphaBeta, parameters)
        return parameters.alpha / (parameters.alpha + parameters.beta)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of beta distribution."""
        parameters = cast(_AlphaBeta, parameters)
        a, b = parameters.alpha, parameters.beta
        return a * b / ((a + b) ** 2 * (a + b + 1.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of beta distribution."""
        parameters = cast(_AlphaBeta, parameters)
        a, b = parameters.alpha, parameters.beta
        return 2.0 * (b - a) * math.sqrt(a + b + 1.0) / ((a + b + 2.0) * math.sqrt(a * b))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of beta distribution."""
        parameters = cast(_AlphaBeta, parameters)
        a, b = parameters.alpha, parameters.beta
        numerator = 6.0 * ((a - b) ** 2 * (a + b + 1.0) - a * b * (a + b + 2.0))
        excess_kurtosis = numerator / (a * b * (a + b + 2.0) * (a + b + 3.0))
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of beta distribution"""
        return ContinuousSupport(left=0.0, right=1.0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_AlphaBeta, parameters)
        return variates.beta(rng, parameters.alpha, parameters.beta)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["alphaBeta"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="alphaBeta")
    class _AlphaBeta(Parametrization):
        """
        Shape parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter (α)
        beta : float
            Second shape parameter (β)
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    ParametricFamilyRegister.register(Beta)
