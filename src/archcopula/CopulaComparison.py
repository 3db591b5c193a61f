"""
Created on 19/10/2026

Filename: CopulaComparison.py
Relative Path: src/archcopula/CopulaComparison.py

Scores already-parametrized copulas against pseudo-observations
(log-likelihood, AIC, BIC) and draws uniform Q-Q plots of their samples.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy import stats

from archcopula.CopulaDistribution import CopulaDistribution
from archcopula.CopulaErrors import (
    CopulaNotImplementedError,
    DimensionMismatchError,
    InvalidDataError,
)

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------- #
# Internal helpers
# ------------------------------------------------------------------------- #
def _aic(loglik: float, k: int) -> float:
    return 2 * k - 2 * loglik


def _bic(loglik: float, k: int, n: int) -> float:
    return k * np.log(n) - 2 * loglik


# ------------------------------------------------------------------------- #
# Public API
# ------------------------------------------------------------------------- #
def compare_copulas(
    u: np.ndarray | pd.DataFrame,
    copulas: Sequence[CopulaDistribution],
) -> pd.DataFrame:
    """
    Score every copula on the pseudo-observations ``u``.

    Families without a density are kept in the table with NaN scores and
    status ``"not implemented"``.  Rows are sorted by AIC (best first).
    """
    data = np.asarray(u, dtype=float)
    if data.ndim != 2 or data.shape[0] == 0:
        raise InvalidDataError("u must be a non-empty 2-D array (observations x dimension).")
    n, dim = data.shape

    rows = []
    for cop in copulas:
        if cop.dimension != dim:
            raise DimensionMismatchError(cop.dimension, dim)

        k = cop.n_parameters
        row = {
            "Copula Family": cop.name,
            "Parameters": cop.parameters().tolist(),
            "Kendall's Tau": cop.kendall_tau(),
        }
        try:
            loglik = cop.log_likelihood(data)
        except CopulaNotImplementedError as exc:
            logger.warning("Skipping %s: %s", cop.name, exc)
            row.update({
                "Log-Likelihood": np.nan,
                "AIC": np.nan,
                "BIC": np.nan,
                "Status": "not implemented",
            })
        else:
            row.update({
                "Log-Likelihood": loglik,
                "AIC": _aic(loglik, k),
                "BIC": _bic(loglik, k, n),
                "Status": "ok",
            })
        logger.info("Scored %s on %d observations", cop.name, n)
        rows.append(row)

    table = pd.DataFrame(rows, columns=[
        "Copula Family", "Parameters", "Kendall's Tau",
        "Log-Likelihood", "AIC", "BIC", "Status",
    ])
    return table.sort_values("AIC", na_position="last").reset_index(drop=True)


def qq_plot(samples: np.ndarray, family: str, out_dir: str | Path = "qqplots") -> Path:
    """Save a Q-Q plot of all sampled values against Uniform(0, 1)."""
    fig = plt.figure(figsize=(4, 4))
    stats.probplot(np.asarray(samples, dtype=float).flatten(), dist="uniform", plot=plt)
    plt.title(f"Q‑Q Plot – {family}")
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    img = out_dir / f"qq_{family.lower().replace(' ', '_')}.png"
    plt.tight_layout()
    plt.savefig(img, dpi=150)
    plt.close(fig)
    return img
