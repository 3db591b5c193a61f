"""
Created on 19/10/2026

Filename: FrankCopula.py
Relative Path: src/archcopula/FrankCopula.py

Frank copula, generator φ(t) = −ln[(e^{−θt} − 1)/(e^{−θ} − 1)].
Only the CDF is available; pdf and sampling raise CopulaNotImplementedError.
"""

from __future__ import annotations

import numpy as np
from scipy import integrate

from archcopula.CopulaDistribution import CopulaDistribution, SeedLike
from archcopula.CopulaErrors import CopulaNotImplementedError, InvalidParameterError


def _debye1(x: float) -> float:
    """First Debye function D₁(x) = (1/x) ∫₀ˣ t/(eᵗ − 1) dt."""
    value, _ = integrate.quad(lambda t: t / np.expm1(t) if t != 0.0 else 1.0, 0.0, x)
    return value / x


def _log_abs_expm1_neg(x):
    """log|e^{−x} − 1|, accurate for large |x|."""
    ax = np.abs(x)
    log1mexp = np.where(ax > np.log(2.0), np.log1p(-np.exp(-ax)), np.log(-np.expm1(-ax)))
    return np.where(x > 0, log1mexp, ax + log1mexp)


class FrankCopula(CopulaDistribution):
    """Frank copula, θ ≠ 0."""

    n_parameters = 1

    def __init__(self, theta: float = 1.0, dimension: int = 2) -> None:
        super().__init__(name="Frank", dimension=dimension)
        self._theta = self._check_theta(theta)
        self.logger.debug("Created %r", self)

    @property
    def theta(self) -> float:
        return self._theta

    @staticmethod
    def _check_theta(theta) -> float:
        theta = float(theta)
        if not np.isfinite(theta) or theta == 0.0:
            raise InvalidParameterError("Theta != 0")
        return theta

    # ──────────────────────────────────────────────────────────────────────────
    # Analytical functions
    # ──────────────────────────────────────────────────────────────────────────
    def cdf(self, u):
        """
        Frank copula CDF.

        C(u) = −(1/θ) · ln( 1 + ∏(e^{−θ u_i} − 1) / (e^{−θ} − 1)^(d−1) )
        """
        arr = self._check_points(u)
        theta = self._theta
        with np.errstate(divide="ignore"):
            # log |ratio|; the ratio is negative for θ > 0 and positive for θ < 0
            log_ratio = (np.sum(_log_abs_expm1_neg(theta * arr), axis=-1)
                         - (self._dimension - 1) * _log_abs_expm1_neg(theta))
            if theta > 0.0:
                c = -np.log(-np.expm1(log_ratio)) / theta
            else:
                c = -np.logaddexp(0.0, log_ratio) / theta
        return self._as_result(c, arr)

    def pdf(self, u):
        self._check_points(u, check_range=False)
        raise CopulaNotImplementedError("pdf not yet implemented for Frank copula")

    def kendall_tau(self) -> float:
        """τ = 1 − 4/θ · (1 − D₁(θ))."""
        theta = self._theta
        return 1.0 - 4.0 / theta * (1.0 - _debye1(theta))

    # ──────────────────────────────────────────────────────────────────────────
    # Simulation
    # ──────────────────────────────────────────────────────────────────────────
    def sample(self, n_samples: int, seed: SeedLike = None) -> np.ndarray:
        # TODO: conditional inversion for d = 2, logarithmic-series frailty for d > 2
        raise CopulaNotImplementedError("Sampling not yet implemented for Frank copula")

    # ──────────────────────────────────────────────────────────────────────────
    # Parameters
    # ──────────────────────────────────────────────────────────────────────────
    def parameters(self) -> np.ndarray:
        return np.array([self._theta])

    def set_parameters(self, values) -> None:
        (theta,) = self._check_parameter_vector(values)
        self._theta = self._check_theta(theta)
        self.logger.debug("theta set to %g", self._theta)
