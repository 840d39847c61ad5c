"""
Chi-squared distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.builtins.continuous.gamma import gamma_pdf
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


def configure_chi_squared_family() -> None:
    """
    Configure and register the Chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution with k degrees of freedom.

    The distribution of a sum of squares of k independent standard normal
    variables; the Gamma distribution with shape k/2 and rate 1/2.

    Probability density function:
        f(x) = x^(k/2-1) exp(-x/2) / (2^(k/2) Γ(k/2)) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Degrees, parameters)
        return gamma_pdf(parameters.degrees / 2.0, 0.5, x)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Degrees, parameters)
        if x <= 0:
            return 0.0
        return regularized_gamma_p(parameters.degrees / 2.0, x / 2.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        return float(parameters.degrees)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        return 2.0 * parameters.degrees

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        return math.sqrt(8.0 / parameters.degrees)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Degrees, parameters)
        excess_kurtosis = 12.0 / parameters.degrees
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_Degrees, parameters)
        return variates.chi_squared(rng, parameters.degrees)

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["degrees"],
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
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    @parametrization(family=ChiSquared, name="degrees")
    class _Degrees(Parametrization):
        """
        Parameters
        ----------
        degrees : float
            Degrees of freedom (k)
        """

        degrees: float

        @constraint(description="degrees > 0")
        def check_degrees_positive(self) -> bool:
            return self.degrees > 0

    ParametricFamilyRegister.register(ChiSquared)
