"""
Tests for Pareto Distribution Family

The Pareto family loses its higher moments as the shape decreases: mean and
variance become infinite, while skewness and kurtosis become undefined.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import pareto

from pysatl_distributions.distributions.support import ContinuousSupport
from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from .base import BaseDistributionTest


class TestParetoFamily(BaseDistributionTest):
    """Test suite for Pareto distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.pareto_family = registry.get(FamilyName.PARETO)
        self.pareto_dist_example = self.pareto_family(scale=2.0, shape=3.0)

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="scale > 0"):
            self.pareto_family(scale=-2.0, shape=3.0)
        with pytest.raises(ValueError, match="shape > 0"):
            self.pareto_family(scale=2.0, shape=0.0)

    def test_moments(self):
        dist = self.pareto_family(scale=1.5, shape=6.0)
        self.assert_moments_match(dist, pareto(6.0, scale=1.5))

    def test_infinite_moments(self):
        assert self.pareto_family(scale=1.0, shape=0.8).mean() == math.inf
        assert self.pareto_family(scale=1.0, shape=1.5).variance() == math.inf
        assert self.pareto_family(scale=1.0, shape=1.5).mean() == pytest.approx(3.0)

    def test_undefined_moments(self):
        with pytest.raises(IndeterminateError):
            self.pareto_dist_example.skewness()
        with pytest.raises(IndeterminateError):
            self.pareto_family(scale=1.0, shape=4.0).kurtosis()

    def test_characteristics_match_scipy(self):
        reference = pareto(3.0, scale=2.0)
        points = np.array([0.0, 1.0, 2.0, 2.5, 4.0, 50.0])
        self.assert_arrays_almost_equal(
            self.pareto_dist_example.pdf(points), reference.pdf(points)
        )
        self.assert_arrays_almost_equal(
            self.pareto_dist_example.cdf(points), reference.cdf(points)
        )
        probabilities = np.array([0.0, 0.3, 0.5, 0.99])
        self.assert_arrays_almost_equal(
            self.pareto_dist_example.ppf(probabilities), reference.ppf(probabilities)
        )

    def test_boundaries(self):
        assert self.pareto_dist_example.cdf(math.inf) == 1.0
        assert self.pareto_dist_example.ppf(1.0) == math.inf
        assert self.pareto_dist_example.ppf(0.0) == pytest.approx(2.0)

    def test_support_starts_at_scale(self):
        support = self.pareto_dist_example.support
        assert isinstance(support, ContinuousSupport)
        assert support.left == 2.0
        assert support.right == math.inf
        assert support.contains(1.99) is False
        assert support.contains(5.0) is True

    def test_sampling(self):
        self.assert_sample_fits(self.pareto_dist_example, pareto(3.0, scale=2.0).cdf)
