"""
Tests for Student's t Distribution Family

This module tests the Student's t family, including the incomplete-beta CDF
and the degrees-of-freedom thresholds at which moments stop existing.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import t

from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestStudentsTFamily(BaseDistributionTest):
    """Test suite for Student's t distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.students_t_family = registry.get(FamilyName.STUDENTS_T)

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="degrees > 0"):
            self.students_t_family(degrees=-3.0)

    @pytest.mark.parametrize("degrees", [0.5, 1.0, 2.5, 5.0, 50.0])
    def test_characteristics_match_scipy(self, degrees):
        dist = self.students_t_family(degrees=degrees)
        points = np.array([-20.0, -2.0, -0.5, 0.0, 0.5, 2.0, 20.0])
        self.assert_arrays_almost_equal(dist.pdf(points), t(degrees).pdf(points))
        self.assert_arrays_almost_equal(dist.cdf(points), t(degrees).cdf(points))

    def test_cdf_symmetry(self):
        dist = self.students_t_family(degrees=3.0)
        assert dist.cdf(0.0) == pytest.approx(0.5)
        assert dist.cdf(-1.7) == pytest.approx(1.0 - dist.cdf(1.7))
        assert dist.cdf(math.inf) == 1.0
        assert dist.cdf(-math.inf) == 0.0

    def test_moments_when_all_exist(self):
        self.assert_moments_match(self.students_t_family(degrees=7.0), t(7.0))

    @pytest.mark.parametrize(
        "degrees, method",
        [
            (1.0, lambda d: d.mean()),
            (0.5, lambda d: d.variance()),
            (3.0, lambda d: d.skewness()),
            (2.0, lambda d: d.kurtosis()),
        ],
        ids=["mean", "variance", "skewness", "kurtosis"],
    )
    def test_undefined_moments(self, degrees, method):
        with pytest.raises(IndeterminateError):
            method(self.students_t_family(degrees=degrees))

    def test_infinite_moments(self):
        assert self.students_t_family(degrees=1.5).variance() == math.inf
        assert self.students_t_family(degrees=3.5).kurtosis(excess=True) == math.inf
        assert self.students_t_family(degrees=1.5).mean() == 0.0

    @pytest.mark.parametrize("degrees", [1.0, 2.0, 6.0])
    def test_sampling(self, degrees):
        self.assert_sample_fits(self.students_t_family(degrees=degrees), t(degrees).cdf)

    def test_support(self):
        support = self.students_t_family(degrees=4.0).support
        assert support.shape == ContinuousSupportShape1D.REAL_LINE
