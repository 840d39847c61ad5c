"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parameterizations.
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
from pysatl_distributions.stats.special import regularized_gamma_p
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def gamma_log_pdf(shape: float, rate: float, x: float) -> float:
    """Log-density of Gamma(shape, rate) at ``x > 0``."""
    return (
        shape * math.log(rate)
        + (shape - 1.0) * math.log(x)
        - rate * x
        - math.lgamma(shape)
    )


def gamma_pdf(shape: float, rate: float, x: float) -> float:
    """Density of Gamma(shape, rate), including the boundary ``x = 0``."""
    if x < 0 or math.isinf(x):
        return 0.0
    if x == 0:
        if shape < 1:
            return math.inf
        return rate if shape == 1 else 0.0
    return math.exp(gamma_log_pdf(shape, rate, x))


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on [0, ∞) with shape α and rate β (scale θ = 1/β).

    Probability density function:
        f(x) = β^α x^(α-1) exp(-βx) / Γ(α) for x ≥ 0

    The CDF is the regularized lower incomplete gamma function P(α, βx).
    Variates are drawn with the Marsaglia–Tsang method.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """Probability density function for gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return gamma_pdf(parameters.shape, parameters.rate, x)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function ``P(shape, rate·x)``."""
        parameters = cast(_ShapeRate, parameters)
        if x <= 0:
            return 0.0
        return regularized_gamma_p(parameters.shape, parameters.rate * x)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of gamma distribution, 2/√α."""
        parameters = cast(_ShapeRate, parameters)
        return 2.0 / math.sqrt(parameters.shape)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess (6/α) kurtosis of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        excess_kurtosis = 6.0 / parameters.shape
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_ShapeRate, parameters)
        return variates.gamma(rng, parameters.shape, parameters.rate)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (α)
        rate : float
            Rate parameter (β)
        """

        shape: float
        rate: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (α)
        scale : float
            Scale parameter (θ = 1/β)
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """Transform to shape-rate parametrization."""
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Gamma)
