"""
Tests for Continuous Uniform Distribution Family

This module tests the functionality of the uniform distribution family,
including characteristics, support and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(min=-1.0, max=3.0)
        self.reference = uniform(loc=-1.0, scale=4.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert self.uniform_family.parametrization_names == ["minMax"]
        assert self.uniform_family.base_parametrization_name == "minMax"

    def test_parametrization_creation(self):
        """Test creation of distribution with min-max parametrization."""
        dist = self.uniform_dist_example
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"min": -1.0, "max": 3.0}

    @pytest.mark.parametrize("lower, upper", [(1.0, 1.0), (2.0, 1.0)])
    def test_parametrization_constraints(self, lower, upper):
        """Test that the interval must be non-degenerate."""
        with pytest.raises(ValueError, match="min < max"):
            self.uniform_family(min=lower, max=upper)

    def test_moments(self):
        """Test moments against scipy."""
        self.assert_moments_match(self.uniform_dist_example, self.reference)
        assert self.uniform_dist_example.kurtosis() == pytest.approx(1.8)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-2.0, -1.0, 0.0, 2.5, 3.0, 4.0], "pdf"),
            (CharacteristicName.CDF, [-2.0, -1.0, 0.0, 2.5, 3.0, 4.0], "cdf"),
            (CharacteristicName.PPF, [0.0, 0.1, 0.5, 0.9, 1.0], "ppf"),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs."""
        char_func = self.uniform_dist_example.query_method(char_name)
        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        expected = getattr(self.reference, scipy_func)(input_array)
        self.assert_arrays_almost_equal(result_array, expected)

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        with pytest.raises(ValueError):
            self.uniform_dist_example.ppf(1.5)

    def test_sampling(self):
        """Test that seeded samples follow the distribution."""
        self.assert_sample_fits(self.uniform_dist_example, self.reference.cdf)
        sample = self.uniform_dist_example.sample(100).values
        assert ((sample >= -1.0) & (sample < 3.0)).all()

    def test_uniform_support(self):
        """Test that the support is the closed parameter interval."""
        support = self.uniform_dist_example.support
        assert isinstance(support, ContinuousSupport)
        assert support.left == -1.0
        assert support.right == 3.0
        assert support.contains(3.0) is True
        assert support.contains(3.1) is False
        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL
