"""
Created on 19/10/2026

Filename: Marginal.py
Relative Path: src/archcopula/Marginal.py
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np


class Marginal:
    """One coordinate's marginal law, wrapping a scipy.stats distribution."""

    def __init__(self, name: str, distribution, params: Optional[Dict] = None):
        """
        Initialize a marginal distribution.

        Args:
            name: Name of the variable
            distribution: A scipy.stats distribution, e.g. stats.norm
            params: Keyword arguments forwarded to cdf / ppf (loc, scale, shapes)
        """
        self.name = name
        self.distribution = distribution
        self.params = params or {}

    def __repr__(self) -> str:
        return f"Marginal({self.name!r}, {self.distribution.name}, {self.params})"

    def cdf(self, x: np.ndarray) -> np.ndarray:
        """Map observations onto the uniform scale."""
        return self.distribution.cdf(x, **self.params)

    def inverse_cdf(self, u: np.ndarray) -> np.ndarray:
        """
        Map uniform samples back to the scale of the variable.

        Args:
            u: Values in (0, 1), typically one copula sample column

        Returns:
            Quantiles of the marginal distribution
        """
        return self.distribution.ppf(u, **self.params)
