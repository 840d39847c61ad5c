from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_distributions.distributions import (
    AnalyticalComputation,
    ArraySample,
    DefaultComputationStrategy,
    InverseTransformSamplingStrategy,
    Sample,
)
from pysatl_distributions.stats import RandomSource
from pysatl_distributions.types import CharacteristicName
from tests.utils.mocks import SequenceUniformSource


class _PPFOnly:
    """Bare object exposing the pieces the inverse-transform sampler uses."""

    def __init__(self) -> None:
        self.analytical_computations = {
            CharacteristicName.PPF: AnalyticalComputation(
                target=CharacteristicName.PPF, func=lambda q: 10.0 * q
            )
        }

    def query_method(self, state, **options):
        return DefaultComputationStrategy().query_method(state, self, **options)


class TestArraySample:
    def test_requires_2d_array(self):
        with pytest.raises(ValueError):
            ArraySample(np.zeros(3))

    def test_from_values_builds_column(self):
        sample = ArraySample.from_values(float(i) for i in range(4))
        assert isinstance(sample, Sample)
        assert sample.shape == (4, 1)
        assert len(sample) == 4
        assert sample.dimension == 1
        np.testing.assert_array_equal(sample.values, [0.0, 1.0, 2.0, 3.0])
        assert sample.array is sample.data

    def test_from_empty_values(self):
        sample = ArraySample.from_values([])
        assert sample.shape == (0, 1)
        assert len(sample) == 0

    def test_iterates_rows(self):
        sample = ArraySample(np.array([[1.0, 2.0], [3.0, 4.0]]))
        rows = list(sample)
        assert len(rows) == 2
        np.testing.assert_array_equal(rows[1], [3.0, 4.0])


class TestInverseTransformSamplingStrategy:
    def test_draw_applies_ppf_to_uniform(self):
        rng = RandomSource(uniform_source=SequenceUniformSource([0.25, 0.5]))
        strategy = InverseTransformSamplingStrategy()
        assert strategy.draw(_PPFOnly(), rng) == pytest.approx(2.5)
        assert strategy.draw(_PPFOnly(), rng) == pytest.approx(5.0)

    def test_sample_shape_and_values(self):
        rng = RandomSource(uniform_source=SequenceUniformSource([0.1, 0.2, 0.3]))
        sample = InverseTransformSamplingStrategy().sample(3, _PPFOnly(), rng)
        assert sample.shape == (3, 1)
        np.testing.assert_allclose(sample.values, [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("n", [0, -5])
    def test_non_positive_size_gives_empty_sample(self, n):
        rng = RandomSource(uniform_source=SequenceUniformSource([]))
        sample = InverseTransformSamplingStrategy().sample(n, _PPFOnly(), rng)
        assert sample.shape == (0, 1)

    def test_missing_ppf_raises(self):
        distr = _PPFOnly()
        distr.analytical_computations = {}
        with pytest.raises(RuntimeError, match="ppf"):
            InverseTransformSamplingStrategy().draw(distr, RandomSource(seed=0))
