"""
Tests for Chi-squared Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import chi2

from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from .base import BaseDistributionTest


class TestChiSquaredFamily(BaseDistributionTest):
    """Test suite for Chi-squared distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.chi_squared_family = registry.get(FamilyName.CHI_SQUARED)

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="degrees > 0"):
            self.chi_squared_family(degrees=0.0)

    @pytest.mark.parametrize("degrees", [1.0, 2.0, 4.5, 30.0])
    def test_moments(self, degrees):
        self.assert_moments_match(self.chi_squared_family(degrees=degrees), chi2(degrees))

    @pytest.mark.parametrize("degrees", [1.0, 2.0, 4.5, 30.0])
    def test_characteristics_match_scipy(self, degrees):
        dist = self.chi_squared_family(degrees=degrees)
        points = np.array([-1.0, 0.1, 1.0, 3.0, degrees, 2.0 * degrees + 10.0])
        self.assert_arrays_almost_equal(dist.pdf(points), chi2(degrees).pdf(points))
        self.assert_arrays_almost_equal(dist.cdf(points), chi2(degrees).cdf(points))

    def test_density_at_zero_for_two_degrees(self):
        assert self.chi_squared_family(degrees=2.0).pdf(0.0) == pytest.approx(0.5)

    def test_sampling(self):
        self.assert_sample_fits(self.chi_squared_family(degrees=3.0), chi2(3.0).cdf)
