"""
Created on 19/10/2026

Filename: ClaytonCopula.py
Relative Path: src/archcopula/ClaytonCopula.py

Clayton copula in arbitrary dimension, generator φ(t) = (t^−θ − 1)/θ.
"""

from __future__ import annotations

import numpy as np
from scipy import special

from archcopula.CopulaDistribution import CopulaDistribution, SeedLike
from archcopula.CopulaErrors import InvalidParameterError


class ClaytonCopula(CopulaDistribution):
    """
    Clayton copula, θ > −1/(d−1).

    Sampling uses the Marshall–Olkin representation and is restricted to
    θ ≥ ``MIN_SAMPLING_THETA``.
    """

    n_parameters = 1

    #: Smallest θ accepted by :meth:`sample`.
    MIN_SAMPLING_THETA = 1e-6

    def __init__(self, theta: float = 2.0, dimension: int = 2) -> None:
        super().__init__(name="Clayton", dimension=dimension)
        theta = float(theta)
        lower = -1.0 / (self._dimension - 1)
        if not np.isfinite(theta) or theta <= lower:
            raise InvalidParameterError(f"Theta must be > -1/(d-1) = {lower}")
        self._theta = theta
        self.logger.debug("Created %r", self)

    @property
    def theta(self) -> float:
        return self._theta

    # ──────────────────────────────────────────────────────────────────────────
    # Analytical functions
    # ──────────────────────────────────────────────────────────────────────────
    def _log_sum_term(self, log_u: np.ndarray):
        """log(Σ u_i^−θ − d + 1) and a mask of points where the term is positive."""
        d = self._dimension
        a = np.concatenate([-self._theta * log_u, np.zeros(log_u.shape[:-1] + (1,))], axis=-1)
        b = np.append(np.ones(d), -(d - 1.0))
        log_s, sign = special.logsumexp(a, axis=-1, b=b, return_sign=True)
        return log_s, sign > 0

    def cdf(self, u):
        """
        Clayton copula CDF.

        C(u) = max( (Σ u_i^−θ − d + 1)^(−1/θ), 0 )

        The sum term is accumulated in log space. θ = 0 is the independence
        limit ∏ u_i.
        """
        arr = self._check_points(u)
        theta = self._theta
        if theta == 0.0:
            return self._as_result(np.prod(arr, axis=-1), arr)

        on_edge = np.any(arr == 0.0, axis=-1)
        safe = np.where(on_edge[..., None], 1.0, arr) if theta > 0.0 else arr
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            log_s, positive = self._log_sum_term(np.log(safe))
            c = np.where(positive, np.exp(-log_s / theta), 0.0)
        if theta > 0.0:
            c = np.where(on_edge, 0.0, c)
        return self._as_result(c, arr)

    def pdf(self, u):
        """
        Clayton copula PDF.

        c(u) = ∏_{i<d}(1 + θ i) · ∏ u_i^−(θ+1) · (Σ u_i^−θ − d + 1)^(−d − 1/θ)

        Evaluated in log space; zero outside the support.
        """
        arr = self._check_points(u)
        theta = self._theta
        d = self._dimension
        if theta == 0.0:
            return self._as_result(np.ones(arr.shape[:-1]), arr)

        on_edge = np.any(arr == 0.0, axis=-1)
        safe = np.where(on_edge[..., None], 1.0, arr) if theta > 0.0 else arr
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            log_u = np.log(safe)
            log_s, positive = self._log_sum_term(log_u)
            log_norm = np.sum(np.log1p(theta * np.arange(d)))
            log_c = (log_norm
                     - (theta + 1.0) * np.sum(log_u, axis=-1)
                     - (d + 1.0 / theta) * log_s)
            density = np.where(positive, np.exp(log_c), 0.0)
        if theta > 0.0:
            # density vanishes as any coordinate goes to 0
            density = np.where(on_edge, 0.0, density)
        return self._as_result(density, arr)

    def kendall_tau(self) -> float:
        """τ = θ / (θ + 2)."""
        return self._theta / (self._theta + 2.0)

    def lower_tail_dependence(self) -> float:
        """λ_L = 2^(−1/θ) for θ > 0, otherwise 0."""
        if self._theta <= 0.0:
            return 0.0
        return float(2.0 ** (-1.0 / self._theta))

    # ──────────────────────────────────────────────────────────────────────────
    # Simulation
    # ──────────────────────────────────────────────────────────────────────────
    def sample(self, n_samples: int, seed: SeedLike = None) -> np.ndarray:
        """
        Marshall–Olkin sampling.

        Each row shares one frailty W ~ Gamma(1/θ, 1); every coordinate gets
        its own E_i ~ Exp(1) and U_i = (1 + E_i / W)^(−1/θ).

        W is drawn as log W = log G + θ log V with G ~ Gamma(1/θ + 1) and
        V ~ Uniform(0, 1], which stays finite when Gamma(1/θ) underflows.
        """
        n = self._check_n_samples(n_samples)
        theta = self._theta
        if theta < self.MIN_SAMPLING_THETA:
            raise InvalidParameterError(
                f"Sampling requires theta >= {self.MIN_SAMPLING_THETA:g}, got {theta:g}")

        rng = np.random.default_rng(seed)
        log_w = (np.log(rng.gamma(shape=1.0 / theta + 1.0, scale=1.0, size=(n, 1)))
                 + theta * np.log(1.0 - rng.random(size=(n, 1))))
        e = rng.exponential(scale=1.0, size=(n, self._dimension))
        with np.errstate(divide="ignore"):
            u = np.exp(-np.logaddexp(0.0, np.log(e) - log_w) / theta)
        self.logger.debug("Drew %d samples with theta=%g", n, theta)
        return np.minimum(u, np.nextafter(1.0, 0.0))

    # ──────────────────────────────────────────────────────────────────────────
    # Parameters
    # ──────────────────────────────────────────────────────────────────────────
    def parameters(self) -> np.ndarray:
        return np.array([self._theta])

    def set_parameters(self, values) -> None:
        (theta,) = self._check_parameter_vector(values)
        if theta < 0.0:
            raise InvalidParameterError("theta must be >= 0 for Clayton sampling")
        self._theta = float(theta)
        self.logger.debug("theta set to %g", self._theta)
