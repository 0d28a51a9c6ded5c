"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError, RangeError
from pymatrix.core.precision import DEFAULT_DTYPE


def check_dtype(dtype: DTypeLike | None, name: str) -> np.dtype:
    """
    Resolve and verify an element type.

    Args:
        dtype: Requested dtype, or None for the default
        name: Parameter name for error messages

    Returns:
        numpy.dtype of a real floating type

    Raises:
        ValidationError: If the dtype is not a real floating type
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {e}") from e

    if not np.issubdtype(resolved, np.floating):
        raise ValidationError(
            f"{name}: dtype {resolved} is not a real floating type"
        )
    return resolved


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target element type. If None, floating input keeps its
               dtype and everything else is promoted to float64.

    Returns:
        numpy.ndarray with real floating dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if array is None:
        raise ValidationError(f"{name}: got None, expected array-like data")
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if dtype is not None:
        return result.astype(check_dtype(dtype, 'dtype'))

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(DEFAULT_DTYPE)

    return result


def check_non_empty(array: NDArray[Any], name: str) -> None:
    """
    Verify array holds at least one element.

    Raises:
        ValidationError: If array is empty
    """
    if array.size == 0:
        raise ValidationError(f"{name}: is empty, expected at least one value")


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_size(value: Any, name: str) -> int:
    """
    Verify a dimension is a non-negative integer.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {value}")
    return int(value)


def check_index(value: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in ``[0, bound)``.

    Negative indices are rejected rather than wrapped.

    Args:
        value: Index to check
        bound: Exclusive upper bound (row or column count)
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        RangeError: If value is not an integer or falls outside the bound
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise RangeError(
            f"{name}: expected an integer index, got {type(value).__name__}",
            index=None,
            bound=(bound,),
        )
    if not 0 <= value < bound:
        raise RangeError(
            f"{name}: index {value} out of range for size {bound}",
            index=(int(value),),
            bound=(bound,),
        )
    return int(value)


def check_same_shape(
    lhs: tuple[int, int],
    rhs: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If rows or columns differ
    """
    if lhs != rhs:
        raise DimensionError(
            f"{operation}: operand shapes differ, {lhs[0]}x{lhs[1]} vs {rhs[0]}x{rhs[1]}"
        )


def check_inner_dimensions(
    lhs: tuple[int, int],
    rhs: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left operand's columns match the right operand's rows.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if lhs[1] != rhs[0]:
        raise DimensionError(
            f"{operation}: columns of the left matrix ({lhs[1]}) must equal "
            f"rows of the right matrix ({rhs[0]}), got {lhs[0]}x{lhs[1]} and {rhs[0]}x{rhs[1]}"
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
