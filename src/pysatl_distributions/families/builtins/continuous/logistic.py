"""
Logistic distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

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
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution with location μ and scale s.

    Cumulative distribution function:
        F(x) = 1 / (1 + exp(-(x - μ)/s))

    Probability density function:
        f(x) = 1 / (4s cosh²((x - μ)/(2s)))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        half_z = (x - parameters.location) / (2.0 * parameters.scale)
        with np.errstate(over="ignore"):
            return cast(NumericArray, 1.0 / (4.0 * parameters.scale * np.cosh(half_z) ** 2))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        half_z = (x - parameters.location) / (2.0 * parameters.scale)
        return cast(NumericArray, 0.5 * (1.0 + np.tanh(half_z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``μ + s·ln(p / (1 - p))``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LocationScale, parameters)
        with np.errstate(divide="ignore"):
            return cast(
                NumericArray,
                parameters.location + parameters.scale * (np.log(p) - np.log1p(-p)),
            )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        return parameters.location

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        return (parameters.scale * math.pi) ** 2 / 3.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw (4.2) or excess (1.2) kurtosis of logistic distribution."""
        return 1.2 if excess else 4.2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_LocationScale, parameters)
        return variates.logistic(rng, parameters.location, parameters.scale)

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
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
    Logistic.__doc__ = LOGISTIC_DOC

    @parametrization(family=Logistic, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location (μ), also the mean and the median
        scale : float
            Scale (s)
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Logistic)
