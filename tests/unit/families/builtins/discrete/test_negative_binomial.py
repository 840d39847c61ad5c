"""
Tests for Negative binomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import nbinom

from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.configuration import configure_families_register
from pysatl_distributions.types import FamilyName

from ..continuous.base import BaseDistributionTest


class TestNegativeBinomialFamily(BaseDistributionTest):
    """Test suite for Negative binomial distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.negative_binomial_family = registry.get(FamilyName.NEGATIVE_BINOMIAL)

    @pytest.mark.parametrize(
        "parameters, message",
        [
            ({"failures": 0.0, "prob": 0.5}, "failures > 0"),
            ({"failures": 2.0, "prob": 0.0}, "0 < prob <= 1"),
        ],
    )
    def test_parametrization_constraints(self, parameters, message):
        with pytest.raises(ValueError, match=message):
            self.negative_binomial_family(**parameters)

    @pytest.mark.parametrize("failures, prob", [(1.0, 0.5), (3.5, 0.2), (10.0, 0.9)])
    def test_moments(self, failures, prob):
        dist = self.negative_binomial_family(failures=failures, prob=prob)
        self.assert_moments_match(dist, nbinom(failures, prob))

    @pytest.mark.parametrize("failures, prob", [(1.0, 0.5), (3.5, 0.2), (10.0, 0.9)])
    def test_pmf_and_cdf_match_scipy(self, failures, prob):
        dist = self.negative_binomial_family(failures=failures, prob=prob)
        points = np.arange(-1.0, 60.0)
        reference = nbinom(failures, prob)
        self.assert_arrays_almost_equal(dist.pmf(points), reference.pmf(points))
        self.assert_arrays_almost_equal(dist.cdf(points), reference.cdf(points))

    def test_certain_failure(self):
        dist = self.negative_binomial_family(failures=4.0, prob=1.0)
        assert dist.pmf(0) == 1.0
        assert dist.pmf(1) == 0.0
        assert dist.cdf(0) == pytest.approx(1.0)
        assert dist.mean() == 0.0
        with pytest.raises(IndeterminateError):
            dist.skewness()
        with pytest.raises(IndeterminateError):
            dist.kurtosis(excess=True)

    def test_non_integer_points(self):
        dist = self.negative_binomial_family(failures=2.0, prob=0.4)
        assert dist.pmf(0.5) == 0.0
        assert dist.cdf(2.7) == pytest.approx(nbinom(2.0, 0.4).cdf(2))

    @pytest.mark.parametrize("failures, prob", [(2.5, 0.3), (20.0, 0.7)])
    def test_sampling(self, failures, prob):
        dist = self.negative_binomial_family(failures=failures, prob=prob)
        self.assert_sample_moments(dist)
