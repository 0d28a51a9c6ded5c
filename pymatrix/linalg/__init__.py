"""
Linear systems over dense matrices.

Public API:
    solve(A, b) -> Matrix
    solve_system(A, b) -> GaussSolution

Both run Gaussian elimination with partial pivoting followed by
back-substitution. solve_system additionally reports the row
permutation, smallest pivot, residual norm and timing.

Example:
    >>> from pymatrix import Matrix
    >>> from pymatrix.linalg import solve
    >>> A = Matrix(4, 4); A.uniform_()
    >>> b = Matrix(4, 1); b.uniform_()
    >>> x = solve(A, b)
    >>> (A * x - b).norm() < 1e-3
    True
"""

from pymatrix.linalg.gauss import solve, solve_system
from pymatrix.linalg.solution import GaussParams, GaussSolution

__all__ = [
    "solve",
    "solve_system",
    "GaussParams",
    "GaussSolution",
]
