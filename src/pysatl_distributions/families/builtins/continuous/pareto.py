"""
Pareto (type I) distribution family implementation.
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
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto (type I) distribution with scale x_m and shape α.

    Probability density function:
        f(x) = α x_m^α / x^(α+1) for x ≥ x_m

    The mean is infinite for α ≤ 1 and the variance for α ≤ 2; skewness
    requires α > 3 and kurtosis α > 4.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        xm, alpha = parameters.scale, parameters.shape
        if x < xm:
            return 0.0
        return math.exp(math.log(alpha) + alpha * math.log(xm) - (alpha + 1.0) * math.log(x))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        if x <= parameters.scale:
            return 0.0
        if math.isinf(x):
            return 1.0
        return -math.expm1(parameters.shape * math.log(parameters.scale / x))

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function ``x_m (1 - p)^(-1/α)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if p < 0 or p > 1:
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_ScaleShape, parameters)
        if p == 1:
            return math.inf
        return parameters.scale * (1.0 - p) ** (-1.0 / parameters.shape)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        alpha = parameters.shape
        if alpha <= 1:
            return math.inf
        return alpha * parameters.scale / (alpha - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        alpha = parameters.shape
        if alpha <= 2:
            return math.inf
        return parameters.scale**2 * alpha / ((alpha - 1.0) ** 2 * (alpha - 2.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        alpha = parameters.shape
        if alpha <= 3:
            raise IndeterminateError(CharacteristicName.SKEW, "shape <= 3")
        return 2.0 * (1.0 + alpha) / (alpha - 3.0) * math.sqrt((alpha - 2.0) / alpha)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_ScaleShape, parameters)
        alpha = parameters.shape
        if alpha <= 4:
            raise IndeterminateError(CharacteristicName.KURT, "shape <= 4")
        excess_kurtosis = (
            6.0
            * (alpha**3 + alpha**2 - 6.0 * alpha - 2.0)
            / (alpha * (alpha - 3.0) * (alpha - 4.0))
        )
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_ScaleShape, parameters)
        return ContinuousSupport(left=parameters.scale)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_ScaleShape, parameters)
        return variates.pareto(rng, parameters.scale, parameters.shape)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape"],
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
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Minimum value (x_m)
        shape : float
            Tail index (α)
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Pareto)
