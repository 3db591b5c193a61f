"""Archimedean copula families: Independence, Clayton and Frank."""

from archcopula.ClaytonCopula import ClaytonCopula
from archcopula.CopulaComparison import compare_copulas, qq_plot
from archcopula.CopulaDistribution import CopulaDistribution
from archcopula.CopulaErrors import (
    CopulaError,
    CopulaMathError,
    CopulaNotImplementedError,
    DimensionMismatchError,
    EstimationFailedError,
    InvalidDataError,
    InvalidParameterError,
)
from archcopula.CopulaModel import CopulaModel
from archcopula.Fittable import EstimationMethod, Fittable
from archcopula.FrankCopula import FrankCopula
from archcopula.IndependenceCopula import IndependenceCopula
from archcopula.Marginal import Marginal
from archcopula.pseudo_observations import pseudo_observations

__version__ = "0.1.0"

__all__ = [
    "ClaytonCopula",
    "CopulaDistribution",
    "CopulaError",
    "CopulaMathError",
    "CopulaModel",
    "CopulaNotImplementedError",
    "DimensionMismatchError",
    "EstimationFailedError",
    "EstimationMethod",
    "Fittable",
    "FrankCopula",
    "IndependenceCopula",
    "InvalidDataError",
    "InvalidParameterError",
    "Marginal",
    "compare_copulas",
    "pseudo_observations",
    "qq_plot",
]
