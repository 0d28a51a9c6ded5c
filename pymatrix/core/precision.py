"""
Numerical precision constants and utilities.

Provides machine epsilon, the default element type, the diagnostic
print format, and the pivot tolerance used by the elimination solver.
"""

import numpy as np
from numpy.typing import DTypeLike


# Element type used when none is requested
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = np.finfo(np.float32).eps  # ~1.19e-7

# Diagnostic print format: field width and digits after the decimal point
FORMAT_WIDTH: int = 8
FORMAT_PRECISION: int = 3


def machine_epsilon(dtype: DTypeLike = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def pivot_tolerance(n: int, scale: float, dtype: DTypeLike = np.float64) -> float:
    """
    Magnitude at or below which a pivot is treated as zero.

    System size times machine epsilon times the magnitude of the largest
    entry in the row the pivot came from. Scaling per row keeps a small
    but genuine pivot in a small-valued row from reading as zero next to
    large-valued rows.

    Args:
        n: System size
        scale: Largest absolute entry of the pivot row in the original matrix
        dtype: Element type the elimination runs in

    Returns:
        Non-negative tolerance. Zero when scale is zero, so an all-zero
        row is still caught by the ``<=`` comparison.
    """
    return n * machine_epsilon(dtype) * float(scale)
