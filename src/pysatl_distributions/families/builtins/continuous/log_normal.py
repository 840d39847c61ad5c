"""
Log-normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

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
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_log_normal_family() -> None:
    """
    Configure and register the Log-normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution.

    Distribution of exp(Y) for Y ~ Normal(μ, σ); μ and σ are the mean and
    standard deviation of the logarithm.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        if x <= 0 or math.isinf(x):
            return 0.0
        z = (math.log(x) - parameters.mu) / parameters.sigma
        return math.exp(-0.5 * z * z) / (x * parameters.sigma * math.sqrt(2.0 * math.pi))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        if x <= 0:
            return 0.0
        z = (math.log(x) - parameters.mu) / (parameters.sigma * math.sqrt(2.0))
        return float(0.5 * (1.0 + erf(z)))

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function ``exp(μ + σ√2·erfinv(2p - 1))``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if p < 0 or p > 1:
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MeanStd, parameters)
        return float(np.exp(parameters.mu + parameters.sigma * np.sqrt(2) * erfinv(2 * p - 1)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MeanStd, parameters)
        return math.exp(parameters.mu + parameters.sigma**2 / 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MeanStd, parameters)
        s2 = parameters.sigma**2
        return math.expm1(s2) * math.exp(2.0 * parameters.mu + s2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MeanStd, parameters)
        s2 = parameters.sigma**2
        return (math.exp(s2) + 2.0) * math.sqrt(math.expm1(s2))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_MeanStd, parameters)
        s2 = parameters.sigma**2
        excess_kurtosis = math.exp(4 * s2) + 2 * math.exp(3 * s2) + 3 * math.exp(2 * s2) - 6
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_MeanStd, parameters)
        return variates.log_normal(rng, parameters.mu, parameters.sigma)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Parameters
        ----------
        mu : float
            Mean of the logarithm
        sigma : float
            Standard deviation of the logarithm
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(LogNormal)
