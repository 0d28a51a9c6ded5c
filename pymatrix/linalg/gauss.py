"""
Dense linear solver: Gaussian elimination with partial pivoting.

Solves A x = b for a square A (n x n) and a column b (n x 1) by reducing
the augmented system [A | b] to upper-triangular form, then running
back-substitution from the last row upward.

At each step the remaining row with the largest |entry| in the pivot
column is swapped into place (ties go to the lowest row index). Entries
below the pivot are set to exactly zero rather than computed.

Singular systems:
    With check_singular=True (default) a pivot with
    |pivot| <= n * eps * max|row of A it came from| raises
    SingularMatrixError. The tolerance follows each row's own scale, so
    systems whose rows differ by many orders of magnitude still solve.
    With check_singular=False elimination runs to completion, floating
    point errors are silenced and non-finite values reach the result;
    a RuntimeWarning reports them.
"""

import time
import warnings
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from typing import Any, ContextManager, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionError, SingularMatrixError
from pymatrix.core.precision import pivot_tolerance
from pymatrix.core.validation import check_dtype, check_finite
from pymatrix.dense.matrix import Matrix
from pymatrix.linalg.solution import GaussParams, GaussSolution


NON_FINITE_WARNING = (
    "solution contains non-finite values; the coefficient matrix is singular "
    "or nearly singular"
)


@dataclass
class _Elimination:
    """Raw output of one elimination run."""
    x: NDArray[np.floating[Any]]
    permutation: list[int]
    row_swaps: int
    min_pivot: float


def solve(A: Matrix, b: Matrix, *, check_singular: bool = True) -> Matrix:
    """
    Solve A x = b.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side column (n x 1)
        check_singular: If True, raise SingularMatrixError on a zero pivot

    Returns:
        Solution column x (n x 1)

    Raises:
        ValidationError: If an operand's dtype is not real floating or
                         an operand contains NaN/Inf
        DimensionError: If A.rows != b.rows, A is not square, or b is
                        not a single column
        SingularMatrixError: If a pivot is numerically zero and
                             check_singular is True

    Example:
        >>> A = Matrix.from_rows([[2.0, 1.0], [1.0, 3.0]])
        >>> b = Matrix.from_values([3.0, 5.0])
        >>> x = solve(A, b)
    """
    _check_system(A, b)
    run = _eliminate(A, b, check_singular, timing=None)
    _warn_non_finite(run.x)
    return _as_column(run.x)


def solve_system(A: Matrix, b: Matrix, *, check_singular: bool = True) -> GaussSolution:
    """
    Solve A x = b and report pivoting diagnostics, residual and timing.

    Same arguments, validation and failure modes as solve().

    Returns:
        GaussSolution with the solution, pivot record and per-phase
        wall-clock seconds ('elimination', 'back_substitution',
        'residual', 'total_seconds')
    """
    _check_system(A, b)

    timing: dict[str, float] = {}
    start = time.perf_counter()
    run = _eliminate(A, b, check_singular, timing=timing)
    x = _as_column(run.x)
    with _timed(timing, 'residual'), _errstate(check_singular):
        residual_norm = (A * x - b).norm()
    timing['total_seconds'] = time.perf_counter() - start

    messages = _warn_non_finite(run.x)

    return GaussSolution(
        params=GaussParams(
            x=x,
            permutation=tuple(run.permutation),
            row_swaps=run.row_swaps,
            min_pivot=run.min_pivot,
            residual_norm=residual_norm,
        ),
        info={
            'method': 'gauss_partial_pivot',
            'n': A.rows,
            'check_singular': check_singular,
        },
        timing=timing,
        warnings=tuple(messages),
    )


def _check_system(A: Matrix, b: Matrix) -> None:
    if not isinstance(A, Matrix) or not isinstance(b, Matrix):
        raise TypeError(
            f"solve expects Matrix operands, got {type(A).__name__} and {type(b).__name__}"
        )
    check_dtype(A.dtype, 'A')
    check_dtype(b.dtype, 'b')

    if A.rows != b.rows:
        raise DimensionError(
            f"rows of the matrix ({A.rows}) must equal rows of the vector ({b.rows})"
        )
    if A.rows != A.columns:
        raise DimensionError(
            f"A: expected a square matrix, got {A.rows}x{A.columns}"
        )
    if b.columns != 1:
        raise DimensionError(
            f"b: expected a single column, got {b.rows}x{b.columns}"
        )

    check_finite(A.to_numpy(), 'A')
    check_finite(b.to_numpy(), 'b')


def _errstate(check_singular: bool) -> ContextManager[Any]:
    if check_singular:
        return nullcontext()
    return np.errstate(divide='ignore', invalid='ignore', over='ignore')


@contextmanager
def _timed(timing: dict[str, float] | None, name: str) -> Iterator[None]:
    if timing is None:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        timing[name] = time.perf_counter() - start


def _eliminate(
    A: Matrix,
    b: Matrix,
    check_singular: bool,
    timing: dict[str, float] | None,
) -> _Elimination:
    n = A.rows
    dtype = np.result_type(A.dtype, b.dtype)

    # Augmented system [A | b], n x (n + 1)
    system = np.empty((n, n + 1), dtype=dtype)
    system[:, :n] = A.to_numpy()
    system[:, n] = b.to_numpy()[:, 0]

    # Largest |entry| of each original row, indexed by original row number
    row_scale = np.max(np.abs(system[:, :n]), axis=1) if n else np.zeros(0)

    permutation = list(range(n))
    row_swaps = 0
    min_pivot = float('inf')

    with _errstate(check_singular):
        with _timed(timing, 'elimination'):
            for i in range(n):
                # argmax returns the first maximum: ties keep the lowest row
                pivot_row = i + int(np.argmax(np.abs(system[i:, i])))
                if pivot_row != i:
                    # Columns left of i are already zero in both rows
                    system[[i, pivot_row], i:] = system[[pivot_row, i], i:]
                    permutation[i], permutation[pivot_row] = permutation[pivot_row], permutation[i]
                    row_swaps += 1

                pivot = system[i, i]
                min_pivot = min(min_pivot, float(abs(pivot)))
                tolerance = pivot_tolerance(n, row_scale[permutation[i]], dtype)
                if check_singular and abs(pivot) <= tolerance:
                    raise SingularMatrixError(
                        f"Coefficient matrix is singular: pivot {float(pivot):.3g} at step {i} "
                        f"is within tolerance {tolerance:.3g}",
                        matrix_name='A',
                        pivot_index=i,
                        pivot_value=float(pivot),
                        tolerance=tolerance,
                    )

                if i + 1 < n:
                    factors = system[i + 1:, i] / pivot
                    system[i + 1:, i + 1:] -= np.outer(factors, system[i, i + 1:])
                    system[i + 1:, i] = 0

        with _timed(timing, 'back_substitution'):
            x = np.empty(n, dtype=dtype)
            for i in range(n - 1, -1, -1):
                x[i] = system[i, n] / system[i, i]
                system[:i, n] -= system[:i, i] * x[i]

    return _Elimination(
        x=x,
        permutation=permutation,
        row_swaps=row_swaps,
        min_pivot=min_pivot if n else 0.0,
    )


def _as_column(x: NDArray[np.floating[Any]]) -> Matrix:
    if x.size == 0:
        return Matrix(0, 1, dtype=x.dtype)
    return Matrix.from_values(x, dtype=x.dtype)


def _warn_non_finite(x: NDArray[np.floating[Any]]) -> list[str]:
    if np.all(np.isfinite(x)):
        return []
    warnings.warn(NON_FINITE_WARNING, RuntimeWarning, stacklevel=3)
    return [NON_FINITE_WARNING]
