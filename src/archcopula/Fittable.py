"""
Created on 19/10/2026

Filename: Fittable.py
Relative Path: src/archcopula/Fittable.py

Extension point for estimating copula parameters from pseudo-observations.
No family implements it yet.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from archcopula.CopulaErrors import DimensionMismatchError, InvalidDataError


class EstimationMethod(Enum):
    """Parameter estimation strategies."""

    # Invert a rank correlation (e.g. Kendall's tau) into theta.
    METHOD_OF_MOMENTS = "mom"
    # Maximize the log-likelihood over the observations.
    MAXIMUM_LIKELIHOOD = "mle"


class Fittable(ABC):
    """
    Mixin for copulas whose parameters can be estimated from data.

    Meant to be combined with :class:`CopulaDistribution`::

        class FittedClayton(ClaytonCopula, Fittable):
            def fit(self, data, method): ...
    """

    @abstractmethod
    def fit(self, data: np.ndarray, method: EstimationMethod) -> None:
        """
        Estimate the parameters in place.

        Parameters
        ----------
        data : np.ndarray
            Pseudo-observations, shape ``(n, dimension)`` with values in [0, 1].
        method : EstimationMethod
            Estimation strategy.

        Raises
        ------
        DimensionMismatchError
            ``data`` does not have ``dimension`` columns.
        EstimationFailedError
            The estimate leaves the family's domain or the optimizer does not
            converge.
        """

    def _validate_fit_data(self, data) -> np.ndarray:
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise InvalidDataError("data must be 2-D (observations x dimension).")
        if arr.shape[1] != self.dimension:
            raise DimensionMismatchError(self.dimension, arr.shape[1])
        if not np.all(np.isfinite(arr)) or np.any((arr < 0.0) | (arr > 1.0)):
            raise InvalidDataError("Values must be in [0,1]")
        return arr
