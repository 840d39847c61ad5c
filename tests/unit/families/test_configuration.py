"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_distributions.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.types import FamilyName, UnivariateContinuous, UnivariateDiscrete

CONTINUOUS_FAMILIES = [
    FamilyName.NORMAL,
    FamilyName.CONTINUOUS_UNIFORM,
    FamilyName.EXPONENTIAL,
    FamilyName.GAMMA,
    FamilyName.BETA,
    FamilyName.CHI_SQUARED,
    FamilyName.STUDENTS_T,
    FamilyName.CAUCHY,
    FamilyName.LOGISTIC,
    FamilyName.WEIBULL,
    FamilyName.PARETO,
    FamilyName.LOG_NORMAL,
]

DISCRETE_FAMILIES = [
    FamilyName.BINOMIAL,
    FamilyName.POISSON,
    FamilyName.NEGATIVE_BINOMIAL,
    FamilyName.GEOMETRIC,
]

EXAMPLE_PARAMETERS = {
    FamilyName.NORMAL: {"mu": 0.0, "sigma": 1.0},
    FamilyName.CONTINUOUS_UNIFORM: {"min": 0.0, "max": 1.0},
    FamilyName.EXPONENTIAL: {"rate": 1.0},
    FamilyName.GAMMA: {"shape": 2.0, "rate": 1.0},
    FamilyName.BETA: {"alpha": 2.0, "beta": 3.0},
    FamilyName.CHI_SQUARED: {"degrees": 3.0},
    FamilyName.STUDENTS_T: {"degrees": 5.0},
    FamilyName.CAUCHY: {"location": 0.0, "scale": 1.0},
    FamilyName.LOGISTIC: {"location": 0.0, "scale": 1.0},
    FamilyName.WEIBULL: {"scale": 1.0, "shape": 2.0},
    FamilyName.PARETO: {"scale": 1.0, "shape": 3.0},
    FamilyName.LOG_NORMAL: {"mu": 0.0, "sigma": 1.0},
    FamilyName.BINOMIAL: {"trials": 10, "prob": 0.3},
    FamilyName.POISSON: {"mu": 4.0},
    FamilyName.NEGATIVE_BINOMIAL: {"failures": 3.0, "prob": 0.4},
    FamilyName.GEOMETRIC: {"prob": 0.25},
}


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_all_builtin_families_registered(self):
        """Test that every builtin family is registered exactly once, in order."""
        registered = ParametricFamilyRegister.list_registered_families()
        assert registered == CONTINUOUS_FAMILIES + DISCRETE_FAMILIES

    @pytest.mark.parametrize("family_name", CONTINUOUS_FAMILIES + DISCRETE_FAMILIES)
    def test_distribution_type_by_kind(self, family_name):
        """Test that members of builtin families carry the expected distribution type."""
        distr = self.registry.get(family_name)(**EXAMPLE_PARAMETERS[family_name])
        expected = (
            UnivariateDiscrete if family_name in DISCRETE_FAMILIES else UnivariateContinuous
        )
        assert distr.distribution_type == expected
        assert distr.is_discrete is (family_name in DISCRETE_FAMILIES)

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert FamilyName.NORMAL in registry2.list_registered_families()

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family is not None
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")
