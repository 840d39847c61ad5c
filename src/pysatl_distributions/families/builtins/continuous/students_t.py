"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import ContinuousSupport
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_students_t_family() -> None:
    """
    Configure and register the Student's t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENTS_T):
        return

    STUDENTS_T_DOC = """
    Student's t distribution with ν degrees of freedom.

    Probability density function:
        f(t) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + t²/ν)^(-(ν+1)/2)

    Moments exist only for sufficiently many degrees of freedom: the mean for
    ν > 1, the variance for ν > 1 (infinite when ν ≤ 2), the skewness for
    ν > 3 and the kurtosis for ν > 2 (infinite when ν ≤ 4).
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """Probability density function for Student's t distribution."""
        parameters = cast(_Degrees, parameters)
        nu = parameters.degrees
        log_norm = (
            math.lgamma((nu + 1.0) / 2.0) - math.lgamma(nu / 2.0) - 0.5 * math.log(nu * math.pi)
        )
        return math.exp(log_norm - (nu + 1.0) / 2.0 * math.log1p(x * x / nu))

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function.

        With ``z = ν / (ν + t²)`` the tail probability is ``I_z(ν/2, 1/2) / 2``.
        """
        parameters = cast(_Degrees, parameters)
        nu = parameters.degrees
        if math.isnan(x):
            return math.nan
        tail = 0.5 * regularized_incomplete_beta(nu / 2.0, 0.5, nu / (nu + x * x))
        return tail if x < 0 else 1.0 - tail

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        if parameters.degrees <= 1:
            raise IndeterminateError(CharacteristicName.MEAN, "degrees <= 1")
        return 0.0

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        nu = parameters.degrees
        if nu <= 1:
            raise IndeterminateError(CharacteristicName.VAR, "degrees <= 1")
        if nu <= 2:
            return math.inf
        return nu / (nu - 2.0)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Degrees, parameters)
        if parameters.degrees <= 3:
            raise IndeterminateError(CharacteristicName.SKEW, "degrees <= 3")
        return 0.0

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Degrees, parameters)
        nu = parameters.degrees
        if nu <= 2:
            raise IndeterminateError(CharacteristicName.KURT, "degrees <= 2")
        if nu <= 4:
            return math.inf
        excess_kurtosis = 6.0 / (nu - 4.0)
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_Degrees, parameters)
        return variates.students_t(rng, parameters.degrees)

    StudentsT = ParametricFamily(
        name=FamilyName.STUDENTS_T,
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
    StudentsT.__doc__ = STUDENTS_T_DOC

    @parametrization(family=StudentsT, name="degrees")
    class _Degrees(Parametrization):
        """
        Parameters
        ----------
        degrees : float
            Degrees of freedom (ν)
        """

        degrees: float

        @constraint(description="degrees > 0")
        def check_degrees_positive(self) -> bool:
            return self.degrees > 0

    ParametricFamilyRegister.register(StudentsT)
