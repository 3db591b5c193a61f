"""Tests for pseudo-observations and copula comparison."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from archcopula import (
    ClaytonCopula,
    DimensionMismatchError,
    FrankCopula,
    IndependenceCopula,
    InvalidDataError,
    compare_copulas,
    pseudo_observations,
    qq_plot,
)


class TestPseudoObservations:
    def test_ranks(self) -> None:
        u = pseudo_observations(np.array([[3.0, 10.0], [1.0, 20.0], [2.0, 30.0]]))
        np.testing.assert_allclose(u, [[0.75, 0.25], [0.25, 0.5], [0.5, 0.75]])

    def test_ties_get_average_rank(self) -> None:
        u = pseudo_observations(np.array([[1.0, 1.0], [1.0, 2.0], [5.0, 3.0]]))
        np.testing.assert_allclose(u[:, 0], [0.375, 0.375, 0.75])

    def test_dataframe_keeps_labels(self) -> None:
        df = pd.DataFrame({"a": [0.3, -1.0, 2.0], "b": [5.0, 4.0, 6.0]}, index=list("xyz"))
        u = pseudo_observations(df)
        assert isinstance(u, pd.DataFrame)
        assert list(u.columns) == ["a", "b"]
        assert list(u.index) == ["x", "y", "z"]
        assert ((u > 0) & (u < 1)).all().all()

    @pytest.mark.parametrize("values", [
        np.array([1.0, 2.0, 3.0]),
        np.empty((0, 2)),
        np.array([[1.0, np.nan], [2.0, 3.0]]),
    ])
    def test_rejects_bad_input(self, values: np.ndarray) -> None:
        with pytest.raises(InvalidDataError):
            pseudo_observations(values)


class TestCompareCopulas:
    @pytest.fixture()
    def clayton_data(self) -> np.ndarray:
        return pseudo_observations(ClaytonCopula(theta=3.0).sample(800, seed=21))

    def test_true_family_ranks_first(self, clayton_data: np.ndarray) -> None:
        table = compare_copulas(clayton_data, [
            IndependenceCopula(2), ClaytonCopula(theta=3.0), FrankCopula(theta=1.0),
        ])
        assert list(table["Copula Family"]) == ["Clayton", "Independence", "Frank"]
        assert table.loc[0, "Log-Likelihood"] > 0
        assert table.loc[1, "Log-Likelihood"] == 0.0

    def test_scores(self, clayton_data: np.ndarray) -> None:
        table = compare_copulas(clayton_data, [ClaytonCopula(theta=3.0)])
        row = table.iloc[0]
        n = len(clayton_data)
        assert row["AIC"] == pytest.approx(2 - 2 * row["Log-Likelihood"])
        assert row["BIC"] == pytest.approx(np.log(n) - 2 * row["Log-Likelihood"])
        assert row["Kendall's Tau"] == pytest.approx(0.6)
        assert row["Parameters"] == [3.0]
        assert row["Status"] == "ok"

    def test_family_without_density_is_reported(self, clayton_data: np.ndarray) -> None:
        table = compare_copulas(clayton_data, [FrankCopula(theta=2.0)])
        assert table.loc[0, "Status"] == "not implemented"
        assert np.isnan(table.loc[0, "AIC"])

    def test_dimension_mismatch(self, clayton_data: np.ndarray) -> None:
        with pytest.raises(DimensionMismatchError):
            compare_copulas(clayton_data, [IndependenceCopula(3)])

    def test_rejects_non_matrix(self) -> None:
        with pytest.raises(InvalidDataError):
            compare_copulas(np.array([0.5, 0.5]), [IndependenceCopula(2)])


class TestQQPlot:
    def test_writes_png(self, tmp_path) -> None:
        samples = ClaytonCopula(theta=2.0).sample(300, seed=2)
        img = qq_plot(samples, "Clayton Copula", tmp_path / "plots")
        assert img.name == "qq_clayton_copula.png"
        assert img.exists()
