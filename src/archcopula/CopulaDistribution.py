"""
Created on 19/10/2026

Filename: CopulaDistribution.py
Relative Path: src/archcopula/CopulaDistribution.py

Base class for copula distributions.

Every family exposes the same capability set: its dimension, the joint CDF
and PDF on ``[0, 1]^d``, sampling of uniform pseudo-observations, and a flat
parameter vector that can be read and replaced without knowing the family.
Keep all family maths in the child class; this file is the common skeleton
(input checking, random source handling, likelihood).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

import numpy as np

from archcopula.CopulaErrors import (
    DimensionMismatchError,
    InvalidDataError,
    InvalidParameterError,
)

SeedLike = Union[None, int, np.random.Generator]


class CopulaDistribution(ABC):
    """Abstract copula distribution over ``dimension`` uniform coordinates."""

    #: Length of the vector returned by :meth:`parameters`.
    n_parameters: int = 0

    def __init__(self, name: str, dimension: int):
        """
        Initialize the common state of a copula.

        Args:
            name: Family name, e.g. "Clayton"
            dimension: Number of coupled coordinates (>= 2)
        """
        if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
            raise InvalidParameterError("Dimension must be an integer.")
        if dimension < 2:
            raise InvalidParameterError("Dimension must be >= 2.")
        self.name = name
        self._dimension = int(dimension)
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def dimension(self) -> int:
        """Number of coordinates, fixed for the lifetime of the instance."""
        return self._dimension

    def __repr__(self) -> str:
        params = ", ".join(f"{p:g}" for p in self.parameters())
        return f"{self.__class__.__name__}(dimension={self._dimension}, parameters=[{params}])"

    # ──────────────────────────────────────────────────────────────────────────
    # Contract
    # ──────────────────────────────────────────────────────────────────────────
    @abstractmethod
    def cdf(self, u: np.ndarray) -> Union[float, np.ndarray]:
        """
        Joint cumulative probability C(u).

        Args
        ----
        u : array-like, shape (d,) or (..., d) with values in [0, 1]

        Returns
        -------
        float for a single point, otherwise np.ndarray of shape (...)
        """

    @abstractmethod
    def pdf(self, u: np.ndarray) -> Union[float, np.ndarray]:
        """Joint density c(u); same shape rules as :meth:`cdf`."""

    @abstractmethod
    def sample(self, n_samples: int, seed: SeedLike = None) -> np.ndarray:
        """
        Draw observations from the copula.

        Parameters
        ----------
        n_samples : int
            Number of rows to draw (>= 0).
        seed : None, int or np.random.Generator
            Random source.  ``None`` draws from fresh OS entropy.

        Returns
        -------
        np.ndarray
            Shape ``(n_samples, dimension)`` array of uniforms on (0, 1).
        """

    @abstractmethod
    def parameters(self) -> np.ndarray:
        """Current parameter vector (empty for parameterless families)."""

    @abstractmethod
    def set_parameters(self, values) -> None:
        """Validate and replace the parameter vector; nothing changes on failure."""

    @abstractmethod
    def kendall_tau(self) -> float:
        """Theoretical Kendall's tau of any bivariate margin."""

    # ──────────────────────────────────────────────────────────────────────────
    # Derived quantities
    # ──────────────────────────────────────────────────────────────────────────
    def log_likelihood(self, data: np.ndarray) -> float:
        """
        Sum of log-densities over the rows of ``data``.

        Args:
            data: Pseudo-observations, shape (n, d)

        Returns:
            Log-likelihood (``-inf`` if any row has zero density)
        """
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise InvalidDataError("data must be 2-D (observations x dimension).")
        density = np.atleast_1d(self.pdf(arr))
        with np.errstate(divide="ignore"):
            return float(np.sum(np.log(density)))

    # ──────────────────────────────────────────────────────────────────────────
    # Helpers for sub-classes
    # ──────────────────────────────────────────────────────────────────────────
    def _check_points(self, u, check_range: bool = True) -> np.ndarray:
        """Return ``u`` as a float array whose last axis has length ``dimension``."""
        arr = np.asarray(u, dtype=float)
        actual = arr.shape[-1] if arr.ndim else 1
        if arr.ndim == 0 or actual != self._dimension:
            raise DimensionMismatchError(self._dimension, actual)
        if check_range:
            if not np.all(np.isfinite(arr)) or np.any((arr < 0.0) | (arr > 1.0)):
                raise InvalidDataError("Values must be in [0,1]")
        return arr

    @staticmethod
    def _as_result(values, arr: np.ndarray) -> Union[float, np.ndarray]:
        if arr.ndim == 1:
            return float(values)
        return np.asarray(values, dtype=float)

    @staticmethod
    def _check_n_samples(n_samples) -> int:
        if isinstance(n_samples, bool) or not isinstance(n_samples, (int, np.integer)):
            raise InvalidParameterError("Number of samples must be an integer.")
        if n_samples < 0:
            raise InvalidParameterError("Number of samples must be >= 0.")
        return int(n_samples)

    def _check_parameter_vector(self, values) -> np.ndarray:
        params = np.atleast_1d(np.asarray(values, dtype=float))
        if params.ndim != 1 or params.size != self.n_parameters:
            raise InvalidParameterError(
                f"{self.name} expects exactly {self.n_parameters} parameter(s), got {params.size}")
        if not np.all(np.isfinite(params)):
            raise InvalidParameterError("Parameters must be finite.")
        return params
