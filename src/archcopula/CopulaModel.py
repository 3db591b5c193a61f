"""
Created on 19/10/2026

Filename: CopulaModel.py
Relative Path: src/archcopula/CopulaModel.py
"""

from __future__ import annotations

from typing import List

import pandas as pd

from archcopula.CopulaDistribution import CopulaDistribution, SeedLike
from archcopula.CopulaErrors import DimensionMismatchError
from archcopula.Marginal import Marginal


class CopulaModel:
    """Joint distribution built from a copula and one marginal per coordinate."""

    def __init__(self, copula: CopulaDistribution, marginals: List[Marginal]):
        """
        Initialize a copula model.

        Args:
            copula: A parametrized copula
            marginals: List of marginal distributions, one per copula coordinate
        """
        if len(marginals) != copula.dimension:
            raise DimensionMismatchError(copula.dimension, len(marginals))
        self.copula = copula
        self.marginals = marginals

    @property
    def dimension(self) -> int:
        return self.copula.dimension

    def simulate(self, n_samples: int, seed: SeedLike = None) -> pd.DataFrame:
        """
        Simulate samples from the copula model.

        Args:
            n_samples: Number of samples to generate
            seed: Random source forwarded to the copula sampler

        Returns:
            DataFrame with samples from the joint distribution
        """
        u = self.copula.sample(n_samples, seed=seed)
        columns = [m.name for m in self.marginals]
        return pd.DataFrame(
            {m.name: m.inverse_cdf(u[:, i]) for i, m in enumerate(self.marginals)},
            columns=columns,
        )

    def to_uniform(self, data: pd.DataFrame) -> pd.DataFrame:
        """Apply each marginal's CDF to the matching column of ``data``."""
        missing = [m.name for m in self.marginals if m.name not in data.columns]
        if missing:
            raise KeyError(f"Columns missing from data: {missing}")
        return pd.DataFrame(
            {m.name: m.cdf(data[m.name].to_numpy()) for m in self.marginals},
            index=data.index,
        )
