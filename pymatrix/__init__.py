"""
PyMatrix: a minimal dense numeric matrix library for Python.

Fixed-shape row-major matrices of a real floating element type with
elementwise arithmetic, matrix multiplication, exact equality and a
Gaussian elimination solver.

Submodules:
    dense: The Matrix container and its operators
    linalg: Linear system solver (solve, solve_system)
    core: Exceptions, validation, precision constants, timing
"""

__version__ = "0.1.0"

from pymatrix.dense import Matrix, format_matrix
from pymatrix.linalg import solve, solve_system
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    RangeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Matrix",
    "format_matrix",
    "solve",
    "solve_system",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "RangeError",
    "NumericalError",
    "SingularMatrixError",
]
