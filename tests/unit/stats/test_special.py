"""
Tests for the special functions used by the builtin families.

Reference values come from :mod:`scipy.special`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special

from pysatl_distributions.errors import NumericalNonConvergenceError
from pysatl_distributions.stats import (
    IterationLimits,
    beta_function,
    binomial_coefficient,
    incomplete_beta,
    log_beta_function,
    log_binomial_coefficient,
    regularized_gamma_p,
    regularized_gamma_q,
    regularized_incomplete_beta,
    regularized_incomplete_gamma_lower,
    regularized_incomplete_gamma_upper,
)


class TestIncompleteGamma:
    @pytest.mark.parametrize(
        "s, z",
        [(0.5, 0.2), (1.0, 1.0), (2.0, 1.0), (5.0, 3.0), (10.0, 9.5)],
    )
    def test_lower_series_matches_scipy(self, s, z):
        assert regularized_incomplete_gamma_lower(s, z) == pytest.approx(
            special.gammainc(s, z), rel=1e-12, abs=1e-14
        )

    @pytest.mark.parametrize(
        "s, z",
        [(0.5, 3.0), (1.0, 5.0), (2.5, 10.0), (10.0, 30.0), (3.0, 200.0)],
    )
    def test_upper_continued_fraction_matches_scipy(self, s, z):
        assert regularized_incomplete_gamma_upper(s, z) == pytest.approx(
            special.gammaincc(s, z), rel=1e-10, abs=1e-14
        )

    @pytest.mark.parametrize(
        "s, z",
        [
            (0.1, 0.01),
            (0.5, 0.2),
            (1.0, 1.0),
            (2.5, 3.0),
            (10.0, 5.0),
            (10.0, 20.0),
            (100.0, 90.0),
            (100.0, 120.0),
            (0.1, 50.0),
        ],
    )
    def test_regularized_p_and_q_match_scipy(self, s, z):
        p = regularized_gamma_p(s, z)
        q = regularized_gamma_q(s, z)
        assert p == pytest.approx(special.gammainc(s, z), rel=1e-10, abs=1e-13)
        assert q == pytest.approx(special.gammaincc(s, z), rel=1e-10, abs=1e-13)
        assert p + q == pytest.approx(1.0, abs=1e-12)

    def test_lower_reference_value(self):
        # 1 - exp(-2)
        assert regularized_incomplete_gamma_lower(1.0, 2.0) == pytest.approx(
            0.8646647167633873, abs=1e-12
        )

    def test_lower_at_zero_is_zero(self):
        assert regularized_incomplete_gamma_lower(2.0, 0.0) == 0.0
        assert regularized_gamma_p(2.0, 0.0) == 0.0
        assert regularized_gamma_q(2.0, 0.0) == 1.0

    def test_limits_at_infinity(self):
        assert regularized_incomplete_gamma_lower(2.0, math.inf) == 1.0
        assert regularized_gamma_p(2.0, math.inf) == 1.0
        assert regularized_gamma_q(2.0, math.inf) == 0.0

    @pytest.mark.parametrize("s, z", [(0.0, 1.0), (-1.0, 1.0), (1.0, -0.5), (math.nan, 1.0)])
    def test_lower_outside_domain_is_nan(self, s, z):
        assert math.isnan(regularized_incomplete_gamma_lower(s, z))

    def test_negative_argument_is_clamped(self):
        assert regularized_gamma_p(2.0, -3.0) == 0.0
        assert regularized_gamma_q(2.0, -3.0) == 1.0

    def test_truncated_series_stays_in_unit_interval(self):
        value = regularized_incomplete_gamma_lower(1.0, 100.0, max_terms=5)
        assert 0.0 <= value <= 1.0

    def test_non_convergence_raises(self):
        limits = IterationLimits(gamma_max_iterations=2)
        with pytest.raises(NumericalNonConvergenceError) as exc_info:
            regularized_gamma_p(5.0, 4.0, limits=limits)
        assert exc_info.value.iterations == 2


class TestBetaFunctions:
    @pytest.mark.parametrize("a, b", [(4.0, 2.0), (0.5, 0.5), (1.0, 1.0), (30.0, 40.0)])
    def test_beta_function_matches_scipy(self, a, b):
        assert beta_function(a, b) == pytest.approx(special.beta(a, b), rel=1e-12)

    def test_beta_function_integral_arguments_are_exact(self):
        assert beta_function(4, 2) == 0.05
        assert beta_function(1, 2, 3) == 1.0 / 60.0
        assert beta_function(4.0, 2.5) == pytest.approx(special.beta(4.0, 2.5), rel=1e-12)

    def test_beta_function_is_symmetric(self):
        assert beta_function(2.5, 7.0) == pytest.approx(beta_function(7.0, 2.5), rel=1e-14)

    def test_multivariate_beta_function(self):
        # Γ(1)Γ(2)Γ(3) / Γ(6) = 2 / 120
        assert beta_function(1.0, 2.0, 3.0) == pytest.approx(1.0 / 60.0, rel=1e-12)

    def test_large_arguments_do_not_overflow(self):
        value = log_beta_function(500.0, 700.0)
        assert value == pytest.approx(special.betaln(500.0, 700.0), rel=1e-12)

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (-1.0, 2.0)])
    def test_non_positive_arguments_give_nan(self, a, b):
        assert math.isnan(beta_function(a, b))

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (0.5, 0.5, 0.3),
            (1.0, 1.0, 0.7),
            (2.0, 3.0, 0.4),
            (2.0, 3.0, 0.9),
            (10.0, 20.0, 0.3),
            (100.0, 200.0, 0.34),
            (0.1, 5.0, 0.01),
        ],
    )
    def test_regularized_incomplete_beta_matches_scipy(self, a, b, x):
        assert regularized_incomplete_beta(a, b, x) == pytest.approx(
            special.betainc(a, b, x), rel=1e-10, abs=1e-14
        )

    @pytest.mark.parametrize("x, expected", [(0.0, 0.0), (-0.5, 0.0), (1.0, 1.0), (1.5, 1.0)])
    def test_regularized_incomplete_beta_bounds(self, x, expected):
        assert regularized_incomplete_beta(2.0, 3.0, x) == expected

    def test_regularized_incomplete_beta_reference_value(self):
        assert regularized_incomplete_beta(2.0, 4.0, 0.6) == pytest.approx(0.91296, abs=1e-9)

    def test_regularized_incomplete_beta_reflection(self):
        a, b, x = 3.5, 1.5, 0.35
        assert regularized_incomplete_beta(a, b, x) == pytest.approx(
            1.0 - regularized_incomplete_beta(b, a, 1.0 - x), abs=1e-13
        )

    def test_unregularized_incomplete_beta(self):
        expected = special.betainc(2.0, 3.0, 0.4) * special.beta(2.0, 3.0)
        assert incomplete_beta(2.0, 3.0, 0.4) == pytest.approx(expected, rel=1e-12)

    def test_incomplete_beta_non_convergence_raises(self):
        limits = IterationLimits(beta_cf_max_iterations=1)
        with pytest.raises(NumericalNonConvergenceError):
            regularized_incomplete_beta(100.0, 200.0, 0.34, limits=limits)


class TestBinomialCoefficient:
    @pytest.mark.parametrize(
        "n, k",
        [(10, 2), (10, 0), (10, 10), (52, 5), (5.5, 2), (10, 2.5), (100, 50)],
    )
    def test_matches_scipy(self, n, k):
        assert binomial_coefficient(n, k) == pytest.approx(special.binom(n, k), rel=1e-10)

    def test_exact_for_small_integers(self):
        assert binomial_coefficient(10, 2) == 45.0
        assert binomial_coefficient(6, 3) == 20.0
        assert binomial_coefficient(9, 5) == 126.0

    def test_k_greater_than_n_is_nan(self):
        assert math.isnan(binomial_coefficient(5, 6))
        assert math.isnan(log_binomial_coefficient(5, 6))

    def test_negative_k_is_zero(self):
        assert binomial_coefficient(5, -1) == 0.0

    def test_log_binomial_coefficient(self):
        assert log_binomial_coefficient(100, 50) == pytest.approx(
            math.log(special.binom(100, 50)), rel=1e-12
        )


class TestIterationLimits:
    def test_defaults(self):
        limits = IterationLimits()
        assert limits.gamma_series_max_terms == 100
        assert limits.gamma_series_epsilon == 1e-14
        assert limits.binomial_inversion_cutoff == 110

    @pytest.mark.parametrize(
        "field_name", ["gamma_max_iterations", "beta_cf_max_iterations", "max_rejection_attempts"]
    )
    def test_non_positive_caps_rejected(self, field_name):
        with pytest.raises(ValueError, match=field_name):
            IterationLimits(**{field_name: 0})

    def test_non_positive_tolerance_rejected(self):
        with pytest.raises(ValueError):
            IterationLimits(continued_fraction_epsilon=0.0)
