"""
Created on 19/10/2026

Filename: CopulaErrors.py
Relative Path: src/archcopula/CopulaErrors.py

Failure kinds shared by every copula operation.  Each kind also derives from
the builtin exception a caller would naturally catch (``ValueError`` for bad
input, ``RuntimeError`` for failed estimation, ...).
"""

from __future__ import annotations


class CopulaError(Exception):
    """Base class of all copula errors."""


class InvalidParameterError(CopulaError, ValueError):
    """Bad construction argument or parameter value."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid parameter: {message}")


class DimensionMismatchError(CopulaError, ValueError):
    """Input length does not match the copula dimension."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dimension mismatch: expected {expected}, got {actual}")


class InvalidDataError(CopulaError, ValueError):
    """Values outside the domain an operation requires, e.g. not in [0, 1]."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Data contains invalid values: {message}")


class EstimationFailedError(CopulaError, RuntimeError):
    """Parameter estimation did not converge or left the parameter domain."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Estimation failed: {message}")


class CopulaMathError(CopulaError, ArithmeticError):
    """Numerical failure."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Mathematical error: {message}")


class CopulaNotImplementedError(CopulaError, NotImplementedError):
    """A feature the family does not provide yet."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Not implemented: {feature}")
