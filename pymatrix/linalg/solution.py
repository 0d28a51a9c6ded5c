"""
Linear solver solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass, field
from typing import Any

from pymatrix.dense.matrix import Matrix


@dataclass(frozen=True)
class GaussParams:
    """
    Parameter payload for Gaussian elimination.

    Attributes:
        x: Solution column (n x 1)
        permutation: Original row index that ended up in each position
        row_swaps: Number of pivot row exchanges performed
        min_pivot: Smallest absolute pivot selected
        residual_norm: ||A x - b||_2
    """
    x: Matrix
    permutation: tuple[int, ...]
    row_swaps: int
    min_pivot: float
    residual_norm: float


@dataclass(frozen=True)
class GaussSolution:
    """
    User-facing solver results.

    Attributes:
        params: Solution vector and pivot record
        info: Method name, system size, whether singularity was checked
        timing: Wall-clock seconds per phase plus 'total_seconds'
        warnings: Non-fatal issues (non-finite solution in unchecked mode)
    """
    params: GaussParams
    info: dict[str, Any]
    timing: dict[str, float]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def x(self) -> Matrix:
        return self.params.x

    @property
    def permutation(self) -> tuple[int, ...]:
        return self.params.permutation

    @property
    def row_swaps(self) -> int:
        return self.params.row_swaps

    @property
    def min_pivot(self) -> float:
        return self.params.min_pivot

    @property
    def residual_norm(self) -> float:
        return self.params.residual_norm

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def summary(self) -> str:
        """Plain-text report of the solve."""
        lines = [
            "Gaussian elimination with partial pivoting",
            f"System size:     {self.info['n']}",
            f"Row swaps:       {self.row_swaps}",
            f"Min |pivot|:     {self.min_pivot:.6g}",
            f"Residual norm:   {self.residual_norm:.6g}",
            f"Time (s):        {self.timing['total_seconds']:.6f}",
        ]
        for message in self.warnings:
            lines.append(f"Warning: {message}")
        lines.append("")
        lines.append("Solution:")
        lines.append(str(self.x).rstrip("\n"))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GaussSolution(n={self.info['n']}, row_swaps={self.row_swaps}, "
            f"residual_norm={self.residual_norm:.3g})"
        )
