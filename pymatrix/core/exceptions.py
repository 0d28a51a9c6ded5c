"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Argument and index errors additionally inherit
from the matching builtin (ValueError, IndexError) so callers that only
know the builtins still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    sequences, missing buffers, unsupported element types.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when operand shapes don't match what an operation requires,
    e.g. adding a 3x1 to a 2x1 or multiplying 2x3 by 2x3.
    """
    pass


class RangeError(PyMatrixError, IndexError):
    """
    Element access is out of range.

    Attributes:
        index: The offending (row, column) or row index
        bound: The (rows, columns) or row bound it was checked against
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        bound: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when elimination selects a pivot whose magnitude is at or
    below the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step at which the zero pivot was found
        pivot_value: The selected pivot value
        tolerance: Threshold the pivot magnitude was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance
