"""
Created on 19/10/2026

Filename: IndependenceCopula.py
Relative Path: src/archcopula/IndependenceCopula.py
"""

from __future__ import annotations

import numpy as np

from archcopula.CopulaDistribution import CopulaDistribution, SeedLike


class IndependenceCopula(CopulaDistribution):
    """Product copula: no dependence between coordinates, no parameters."""

    n_parameters = 0

    def __init__(self, dimension: int = 2) -> None:
        super().__init__(name="Independence", dimension=dimension)
        self.logger.debug("Created %r", self)

    # ──────────────────────────────────────────────────────────────────────────
    # Analytical functions
    # ──────────────────────────────────────────────────────────────────────────
    def cdf(self, u):
        """C(u) = u₁ · … · u_d."""
        arr = self._check_points(u)
        return self._as_result(np.prod(arr, axis=-1), arr)

    def pdf(self, u):
        """c(u) = 1."""
        arr = self._check_points(u, check_range=False)
        return self._as_result(np.ones(arr.shape[:-1]), arr)

    def kendall_tau(self) -> float:
        return 0.0

    # ──────────────────────────────────────────────────────────────────────────
    # Simulation
    # ──────────────────────────────────────────────────────────────────────────
    def sample(self, n_samples: int, seed: SeedLike = None) -> np.ndarray:
        n = self._check_n_samples(n_samples)
        rng = np.random.default_rng(seed)
        return rng.uniform(0.0, 1.0, size=(n, self._dimension))

    # ──────────────────────────────────────────────────────────────────────────
    # Parameters
    # ──────────────────────────────────────────────────────────────────────────
    def parameters(self) -> np.ndarray:
        return np.empty(0)

    def set_parameters(self, values) -> None:
        # Only the empty vector is accepted.
        self._check_parameter_vector(values)
