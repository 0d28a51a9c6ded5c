"""
Dense matrix container.

Public API:
    Matrix: fixed-shape row-major matrix of one real floating dtype
    format_matrix: diagnostic fixed-width rendering
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense._format import format_matrix

__all__ = [
    "Matrix",
    "format_matrix",
]
