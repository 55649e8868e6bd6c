"""
Core infrastructure for pymatalg.

This module provides shared abstractions and utilities used by the
expression, dense and linalg packages.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Shape/type contract and input validators
    compute: Timing and tolerance tiers
"""

from pymatalg.core.protocols import Backend
from pymatalg.core.result import Result
from pymatalg.core.exceptions import (
    PyMatAlgError,
    ValidationError,
    DimensionError,
    ScalarTypeError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatAlgError",
    "ValidationError",
    "DimensionError",
    "ScalarTypeError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
