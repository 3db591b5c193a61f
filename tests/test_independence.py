"""Tests for the independence copula."""

from __future__ import annotations

import numpy as np
import pytest

from archcopula import (
    DimensionMismatchError,
    IndependenceCopula,
    InvalidDataError,
    InvalidParameterError,
)


class TestConstruction:
    @pytest.mark.parametrize("dimension", [0, 1, -3])
    def test_rejects_small_dimension(self, dimension: int) -> None:
        with pytest.raises(InvalidParameterError):
            IndependenceCopula(dimension)

    @pytest.mark.parametrize("dimension", [2.5, "2", True])
    def test_rejects_non_integer_dimension(self, dimension) -> None:
        with pytest.raises(InvalidParameterError):
            IndependenceCopula(dimension)

    def test_dimension(self) -> None:
        assert IndependenceCopula(4).dimension == 4
        assert IndependenceCopula().name == "Independence"


class TestAnalytical:
    def test_cdf_is_product(self, unit_points: np.ndarray) -> None:
        cop = IndependenceCopula(2)
        for u in unit_points:
            assert cop.cdf(u) == pytest.approx(u[0] * u[1])

    def test_cdf_vectorized(self, unit_points: np.ndarray) -> None:
        cop = IndependenceCopula(2)
        values = cop.cdf(unit_points)
        assert isinstance(values, np.ndarray)
        np.testing.assert_allclose(values, np.prod(unit_points, axis=1))

    def test_cdf_returns_float_for_single_point(self) -> None:
        value = IndependenceCopula(3).cdf([0.5, 0.5, 0.5])
        assert isinstance(value, float)
        assert value == pytest.approx(0.125)

    def test_cdf_boundaries(self) -> None:
        cop = IndependenceCopula(3)
        assert cop.cdf([0.0, 0.3, 0.9]) == 0.0
        assert cop.cdf([1.0, 1.0, 1.0]) == 1.0

    @pytest.mark.parametrize("u", [[-0.1, 0.5], [0.5, 1.01], [np.nan, 0.5]])
    def test_cdf_rejects_values_outside_unit_interval(self, u) -> None:
        with pytest.raises(InvalidDataError):
            IndependenceCopula(2).cdf(u)

    def test_pdf_is_one(self, unit_points: np.ndarray) -> None:
        cop = IndependenceCopula(2)
        assert cop.pdf([0.2, 0.7]) == 1.0
        np.testing.assert_array_equal(cop.pdf(unit_points), np.ones(len(unit_points)))

    def test_pdf_checks_length_only(self) -> None:
        assert IndependenceCopula(2).pdf([3.0, -1.0]) == 1.0

    @pytest.mark.parametrize("u", [[0.5], [0.5, 0.5, 0.5], 0.5])
    def test_length_mismatch(self, u) -> None:
        cop = IndependenceCopula(2)
        with pytest.raises(DimensionMismatchError):
            cop.cdf(u)
        with pytest.raises(DimensionMismatchError):
            cop.pdf(u)

    def test_kendall_tau_zero(self) -> None:
        assert IndependenceCopula(2).kendall_tau() == 0.0

    def test_log_likelihood_zero(self, unit_points: np.ndarray) -> None:
        assert IndependenceCopula(2).log_likelihood(unit_points) == 0.0


class TestSampling:
    def test_shape_and_range(self) -> None:
        samples = IndependenceCopula(3).sample(500, seed=1)
        assert samples.shape == (500, 3)
        assert np.all((samples >= 0.0) & (samples < 1.0))

    def test_zero_rows(self) -> None:
        assert IndependenceCopula(2).sample(0).shape == (0, 2)

    @pytest.mark.parametrize("n", [-1, 2.0, "10"])
    def test_rejects_bad_sample_count(self, n) -> None:
        with pytest.raises(InvalidParameterError):
            IndependenceCopula(2).sample(n)

    def test_seed_reproducible(self) -> None:
        cop = IndependenceCopula(2)
        np.testing.assert_array_equal(cop.sample(50, seed=3), cop.sample(50, seed=3))

    def test_accepts_generator(self, rng: np.random.Generator) -> None:
        assert IndependenceCopula(2).sample(10, seed=rng).shape == (10, 2)

    def test_columns_uncorrelated(self) -> None:
        samples = IndependenceCopula(2).sample(5000, seed=11)
        assert abs(np.corrcoef(samples.T)[0, 1]) < 0.05


class TestParameters:
    def test_empty_vector(self) -> None:
        params = IndependenceCopula(2).parameters()
        assert params.shape == (0,)

    def test_set_empty_vector(self) -> None:
        cop = IndependenceCopula(2)
        cop.set_parameters([])
        cop.set_parameters(cop.parameters())
        assert cop.cdf([0.5, 0.5]) == pytest.approx(0.25)

    def test_rejects_non_empty_vector(self) -> None:
        with pytest.raises(InvalidParameterError):
            IndependenceCopula(2).set_parameters([0.5])

    def test_repr(self) -> None:
        assert repr(IndependenceCopula(3)) == "IndependenceCopula(dimension=3, parameters=[])"
