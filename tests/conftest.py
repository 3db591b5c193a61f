"""Shared fixtures."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(20261019)


@pytest.fixture()
def unit_points(rng: np.random.Generator) -> np.ndarray:
    """Interior points of the unit square."""
    return rng.uniform(0.05, 0.95, size=(25, 2))
