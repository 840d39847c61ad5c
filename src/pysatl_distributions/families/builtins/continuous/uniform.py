"""
Uniform distribution family implementation.

Contains the continuous Uniform family on ``[min, max]``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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


def configure_uniform_family() -> None:
    """
    Configure and register the continuous Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution.

    Every point of the interval [min, max] is equally likely.

    Probability density function:
        f(x) = 1 / (max - min) for min ≤ x ≤ max, 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - Outside [min, max]: returns 0
            - Otherwise: returns 1 / (max - min)
        """
        parameters = cast(_MinMax, parameters)

        return np.where(
            (x >= parameters.min) & (x <= parameters.max),
            1.0 / (parameters.max - parameters.min),
            0.0,
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for uniform distribution.
        Uses np.clip: 0 below min and 1 above max.
        """
        parameters = cast(_MinMax, parameters)

        return cast(
            NumericArray,
            np.clip((x - parameters.min) / (parameters.max - parameters.min), 0.0, 1.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MinMax, parameters)
        return cast(NumericArray, parameters.min + p * (parameters.max - parameters.min))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_MinMax, parameters)
        return (parameters.min + parameters.max) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_MinMax, parameters)
        width = parameters.max - parameters.min
        return width**2 / 12

    def skew_func(_1: Parametrization, _2: Any) -> int:
        """Skewness of uniform distribution (always 0)."""
        return 0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw (1.8) or excess (-1.2) kurtosis of uniform distribution."""
        if not excess:
            return 1.8
        else:
            return -1.2

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_MinMax, parameters)
        return ContinuousSupport(left=parameters.min, right=parameters.max)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_MinMax, parameters)
        return variates.uniform(rng, parameters.min, parameters.max)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["minMax"],
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
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="minMax")
    class _MinMax(Parametrization):
        """
        Bounds parametrization of uniform distribution.

        Parameters
        ----------
        min : float
            Lower bound of the distribution
        max : float
            Upper bound of the distribution
        """

        min: float
        max: float

        @constraint(description="min < max")
        def check_min_less_than_max(self) -> bool:
            """Check that the lower bound is less than the upper bound."""
            return self.min < self.max

    ParametricFamilyRegister.register(Uniform)
