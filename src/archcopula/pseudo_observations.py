"""
Created on 19/10/2026

Filename: pseudo_observations.py
Relative Path: src/archcopula/pseudo_observations.py

Rank transform of raw observations onto the open unit cube.

Pseudo-observations are what a copula fit consumes: each column is replaced
by ``rank / (n + 1)`` so the marginals no longer matter.
"""

from __future__ import annotations

from typing import Union

import numpy as np
import pandas as pd
from scipy import stats

from archcopula.CopulaErrors import InvalidDataError


def pseudo_observations(values: Union[np.ndarray, pd.DataFrame]) -> Union[np.ndarray, pd.DataFrame]:
    """
    Compute column-wise pseudo-observations.

    Parameters
    ----------
    values
        Shape ``(n, d)`` array or DataFrame of raw observations.

    Returns
    -------
    Same type as ``values`` with entries in (0, 1).  Ties get average ranks.
    """
    if isinstance(values, pd.DataFrame):
        return pd.DataFrame(
            pseudo_observations(values.to_numpy(dtype=float)),
            index=values.index,
            columns=values.columns,
        )

    arr = np.asarray(values, dtype=float)
    if arr.ndim != 2:
        raise InvalidDataError("values must be 2-D (observations x variables).")
    if arr.shape[0] == 0:
        raise InvalidDataError("values contain no observations.")
    if not np.all(np.isfinite(arr)):
        raise InvalidDataError("values contain NaN or infinite entries.")

    ranks = stats.rankdata(arr, axis=0, method="average")
    return ranks / (arr.shape[0] + 1.0)
