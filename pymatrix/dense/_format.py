"""
Diagnostic rendering of dense matrices.

One line per row, each element right-justified in a fixed-width field
with fixed-point precision. Meant for human inspection; nothing parses it.
"""

from typing import TYPE_CHECKING

from pymatrix.core.precision import FORMAT_WIDTH, FORMAT_PRECISION

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


def format_matrix(
    matrix: 'Matrix',
    width: int = FORMAT_WIDTH,
    precision: int = FORMAT_PRECISION,
) -> str:
    """
    Render a matrix row by row.

    Args:
        matrix: Matrix to render
        width: Minimum field width per element
        precision: Digits after the decimal point

    Returns:
        Text with every row terminated by a newline. An empty (0x0)
        matrix renders as the empty string.

    Example:
        >>> print(format_matrix(Matrix.from_values([1.0, 2.5])), end='')
           1.000
           2.500
    """
    rows, _ = matrix.size()
    lines = []
    for i in range(rows):
        lines.append("".join(f"{value:{width}.{precision}f}" for value in matrix.data(i)))
    return "".join(line + "\n" for line in lines)
