"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
dense matrix container and the linear algebra routines.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Numeric constants, print format, pivot tolerance
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    RangeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "RangeError",
    "NumericalError",
    "SingularMatrixError",
]
