"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

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
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy (Lorentz) distribution with location x₀ and scale γ.

    Probability density function:
        f(x) = 1 / (πγ (1 + ((x - x₀)/γ)²))

    None of its moments exist; every moment raises IndeterminateError.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        z = (x - parameters.location) / parameters.scale
        return cast(NumericArray, 1.0 / (np.pi * parameters.scale * (1.0 + z * z)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        z = (x - parameters.location) / parameters.scale
        return cast(NumericArray, 0.5 + np.arctan(z) / np.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function ``x₀ + γ·tan(π(p - 1/2))``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LocationScale, parameters)
        quantile = parameters.location + parameters.scale * np.tan(np.pi * (p - 0.5))
        return np.where(p == 0, -np.inf, np.where(p == 1, np.inf, quantile))

    def _undefined(characteristic: CharacteristicName) -> Any:
        def func(_1: Parametrization, _2: Any, **_options: Any) -> float:
            raise IndeterminateError(characteristic, "Cauchy distribution has no moments")

        return func

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_LocationScale, parameters)
        return variates.cauchy(rng, parameters.location, parameters.scale)

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: _undefined(CharacteristicName.MEAN),
            CharacteristicName.VAR: _undefined(CharacteristicName.VAR),
            CharacteristicName.SKEW: _undefined(CharacteristicName.SKEW),
            CharacteristicName.KURT: _undefined(CharacteristicName.KURT),
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location of the peak (x₀)
        scale : float
            Half width at half maximum (γ)
        """

        location: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Cauchy)
