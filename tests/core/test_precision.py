"""
Tests for precision constants and the pivot tolerance.
"""

import numpy as np

from pymatrix.core.precision import (
    EPSILON_32,
    EPSILON_64,
    machine_epsilon,
    pivot_tolerance,
)


class TestMachineEpsilon:

    def test_float64(self):
        assert machine_epsilon(np.float64) == EPSILON_64

    def test_float32(self):
        assert machine_epsilon(np.float32) == EPSILON_32


class TestPivotTolerance:

    def test_scales_with_row_magnitude(self):
        assert pivot_tolerance(2, 1e-8, np.float64) == 2 * EPSILON_64 * 1e-8

    def test_small_row_tolerance_below_small_pivot(self):
        # A -7e-8 pivot from a row whose largest entry is 3e-8 is genuine
        assert 7e-8 > pivot_tolerance(2, 3e-8, np.float64)

    def test_zero_row_gives_zero(self):
        assert pivot_tolerance(5, 0.0) == 0.0

    def test_wider_for_float32(self):
        assert pivot_tolerance(3, 1.0, np.float32) > pivot_tolerance(3, 1.0, np.float64)
