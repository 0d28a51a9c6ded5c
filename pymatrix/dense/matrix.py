"""
Dense row-major matrix container.

A Matrix owns one contiguous 1-D numpy buffer of ``rows * columns``
elements of a single real floating dtype. Element (i, j) lives at offset
``i * columns + j``. Copies never share storage; the only view handed out
is the read-only row returned by ``data(i)``.

Arithmetic is built on the public accessors (``size``, ``data``) plus
direct buffer access within this class:

    A + B, A - B     elementwise, shapes must match
    A * s            scale by a real scalar
    A * B, A @ B     matrix product, A.columns must equal B.rows
    A == B           exact elementwise equality, no tolerance
"""

from __future__ import annotations

import sys
from numbers import Real
from typing import Any, TextIO

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import ValidationError, RangeError
from pymatrix.core.validation import (
    check_array,
    check_dtype,
    check_index,
    check_inner_dimensions,
    check_ndim,
    check_non_empty,
    check_same_shape,
    check_size,
)
from pymatrix.dense._format import format_matrix


class Matrix:
    """
    Fixed-shape dense matrix of a real floating element type.

    Construction:
        Matrix()                            # empty, 0x0
        Matrix(m, n)                        # m x n, zero-filled
        Matrix.from_values([1.0, 2.0])      # column vector, 2x1
        Matrix.from_buffer(buf, length)     # first `length` values, column
        Matrix.from_rows([[1, 2], [3, 4]])  # 2x2 from nested rows
        Matrix.identity(3)                  # 3x3 identity
        A.copy()                            # independent deep copy

    Shape is fixed after construction; only ``assign`` may reshape the
    receiver. Instances are mutable and therefore unhashable. Concurrent
    mutation of one instance from several threads is not supported.
    """

    __slots__ = ('_rows', '_columns', '_buffer')

    # Keep numpy from broadcasting over a Matrix operand
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 0, columns: int = 0, *, dtype: DTypeLike | None = None):
        rows = check_size(rows, 'rows')
        columns = check_size(columns, 'columns')
        resolved = check_dtype(dtype, 'dtype')

        self._rows = rows
        self._columns = columns
        self._buffer: NDArray[np.floating[Any]] = np.zeros(rows * columns, dtype=resolved)

    @classmethod
    def _wrap(cls, buffer: NDArray[np.floating[Any]], rows: int, columns: int) -> Matrix:
        """Adopt an owned, flat, contiguous buffer without copying."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._columns = columns
        obj._buffer = buffer
        return obj

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_values(cls, values: ArrayLike, *, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a column vector from a sequence of values.

        Args:
            values: 1-D sequence or array
            dtype: Element type. Floating input keeps its dtype when None;
                   anything else becomes float64.

        Returns:
            Matrix of shape (len(values), 1) holding a copy of the values

        Raises:
            ValidationError: If values is None, empty, or non-numeric
            DimensionError: If values is not one-dimensional
        """
        arr = check_array(values, 'values', dtype)
        check_ndim(arr, 1, 'values')
        check_non_empty(arr, 'values')
        return cls._wrap(np.ascontiguousarray(arr), arr.shape[0], 1)

    @classmethod
    def from_buffer(
        cls,
        buffer: ArrayLike,
        length: int,
        *,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Build a column vector from the first ``length`` values of a buffer.

        The buffer is read in row-major order and copied; the Matrix never
        refers back to it.

        Args:
            buffer: Any array-like or buffer-protocol object (array.array,
                    numpy array, list)
            length: Number of leading values to take
            dtype: Element type, as in from_values

        Returns:
            Matrix of shape (length, 1)

        Raises:
            ValidationError: If buffer is None, length is not positive,
                             or length exceeds the buffer size
        """
        if buffer is None:
            raise ValidationError("buffer: got None, expected a data buffer")
        length = check_size(length, 'length')
        if length == 0:
            raise ValidationError("length: must be positive, got 0")

        arr = check_array(buffer, 'buffer', dtype).reshape(-1)
        if length > arr.size:
            raise ValidationError(
                f"length: {length} exceeds buffer size {arr.size}"
            )
        return cls._wrap(arr[:length].copy(), length, 1)

    @classmethod
    def from_rows(cls, rows: ArrayLike, *, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a matrix from nested row data.

        Raises:
            ValidationError: If data is empty, ragged, or non-numeric
            DimensionError: If data is not two-dimensional
        """
        arr = check_array(rows, 'rows', dtype)
        check_ndim(arr, 2, 'rows')
        check_non_empty(arr, 'rows')
        m, n = arr.shape
        return cls._wrap(np.ascontiguousarray(arr).reshape(-1), m, n)

    @classmethod
    def identity(cls, n: int, *, dtype: DTypeLike | None = None) -> Matrix:
        """Square n x n matrix with ones on the diagonal."""
        result = cls(n, n, dtype=dtype)
        result._buffer[::n + 1] = 1
        return result

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def size(self) -> tuple[int, int]:
        """Return (rows, columns)."""
        return (self._rows, self._columns)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, i: int, j: int) -> int:
        try:
            i = check_index(i, self._rows, 'row')
            j = check_index(j, self._columns, 'column')
        except RangeError as e:
            raise RangeError(
                f"({i!r}, {j!r}) is out of range for a {self._rows}x{self._columns} matrix: {e}",
                index=(i, j),
                bound=(self._rows, self._columns),
            ) from e
        return i * self._columns + j

    def get(self, i: int, j: int) -> np.floating[Any]:
        """
        Element at row i, column j.

        Raises:
            RangeError: Unless 0 <= i < rows and 0 <= j < columns
        """
        return self._buffer[self._offset(i, j)]

    def set(self, value: float, i: int, j: int) -> None:
        """
        Write value to row i, column j.

        Raises:
            RangeError: Unless 0 <= i < rows and 0 <= j < columns
        """
        self._buffer[self._offset(i, j)] = value

    def data(self, i: int) -> NDArray[np.floating[Any]]:
        """
        Read-only view of row i.

        The view aliases this matrix's storage, so it reflects later
        writes and must not be kept past the matrix's own use.

        Raises:
            RangeError: Unless 0 <= i < rows
        """
        i = check_index(i, self._rows, 'row')
        start = i * self._columns
        view = self._buffer[start:start + self._columns]
        view.flags.writeable = False
        return view

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Independent (rows, columns) array copy."""
        return self._buffer.reshape(self._rows, self._columns).copy()

    # ------------------------------------------------------------------
    # Whole-matrix operations
    # ------------------------------------------------------------------

    def norm(self) -> float:
        """Euclidean norm over all elements, ignoring shape."""
        return float(np.sqrt(np.sum(np.square(self._buffer))))

    def uniform_(self, rng: np.random.Generator | None = None) -> None:
        """
        Overwrite every element with an independent draw from U[0, 1).

        Args:
            rng: Generator to draw from. A fresh default generator is
                 used when None.
        """
        if rng is None:
            rng = np.random.default_rng()
        dtype = self._buffer.dtype
        samples = rng.random(self._buffer.size).astype(dtype)
        # Rounding to a narrow dtype can land on 1.0
        below_one = np.nextafter(dtype.type(1), dtype.type(0))
        np.minimum(samples, below_one, out=samples)
        self._buffer[:] = samples

    def copy(self) -> Matrix:
        """Deep copy with its own buffer."""
        return self._wrap(self._buffer.copy(), self._rows, self._columns)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> Matrix:
        """
        Copy other's contents into this matrix.

        Storage is reused when shape and dtype already match, otherwise
        this matrix takes a fresh copy of other's buffer and shape.
        Assigning a matrix to itself does nothing.

        Returns:
            self
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"can only assign a Matrix, got {type(other).__name__}")
        if other is self:
            return self

        if self.shape != other.shape or self.dtype != other.dtype:
            self._rows = other._rows
            self._columns = other._columns
            self._buffer = other._buffer.copy()
        else:
            np.copyto(self._buffer, other._buffer)
        return self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other is self:
            return True
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._buffer, other._buffer))

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'addition')
        return self._wrap(self._buffer + other._buffer, self._rows, self._columns)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self + other * -1.0

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Real):
            return self._scale(other)
        return NotImplemented

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def _scale(self, alpha: float) -> Matrix:
        # Product may promote (e.g. float32 * np.float64); store back as our dtype
        scaled = (self._buffer * alpha).astype(self._buffer.dtype, copy=False)
        return self._wrap(scaled, self._rows, self._columns)

    def _matmul(self, other: Matrix) -> Matrix:
        check_inner_dimensions(self.shape, other.shape, 'multiplication')
        lhs = self._buffer.reshape(self._rows, self._columns)
        rhs = other._buffer.reshape(other._rows, other._columns)
        product = np.ascontiguousarray(lhs @ rhs).reshape(-1)
        return self._wrap(product, self._rows, other._columns)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, dtype={self.dtype})"

    def write(self, stream: TextIO | None = None) -> None:
        """Write the diagnostic rendering to stream (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(format_matrix(self))
