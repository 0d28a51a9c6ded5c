"""
Tests for Matrix construction, copying and assignment.

Validates:
    - Empty, dimensioned, sequence, buffer, rows and identity constructors
    - Buffer length always equals rows * columns
    - Copies and assignment never share storage
"""

import array
import copy

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, ValidationError


def _buffer_len(m):
    return m._buffer.size


# ═══════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════


class TestEmptyAndDimensioned:

    def test_default_is_empty(self):
        A = Matrix()
        assert A.size() == (0, 0)
        assert _buffer_len(A) == 0

    def test_dimensioned_is_zero_filled(self):
        B = Matrix(4, 4)
        assert B.size() == (4, 4)
        assert _buffer_len(B) == 16
        assert B.norm() == 0.0

    def test_size_reports_rows_then_columns(self):
        A = Matrix(3, 5)
        assert A.size()[0] == 3
        assert A.size()[1] == 5
        assert A.rows == 3
        assert A.columns == 5
        assert A.shape == (3, 5)

    def test_zero_rows_with_columns(self):
        A = Matrix(0, 3)
        assert A.size() == (0, 3)
        assert _buffer_len(A) == 0

    def test_default_dtype(self):
        assert Matrix(2, 2).dtype == np.float64

    def test_float32_dtype(self):
        assert Matrix(2, 2, dtype=np.float32).dtype == np.float32

    def test_integer_dtype_rejected(self):
        with pytest.raises(ValidationError, match="not a real floating type"):
            Matrix(2, 2, dtype=np.int32)

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(-1, 2)

    def test_float_size_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(2.0, 2)


class TestFromValues:

    def test_column_vector(self):
        C = Matrix.from_values([1.0, 2.0, 3.0, 4.0, 5.0])
        assert C.size() == (5, 1)
        assert C.get(3, 0) == 4.0

    def test_integers_promoted(self):
        C = Matrix.from_values([1, 2, 3])
        assert C.dtype == np.float64
        assert C.get(2, 0) == 3.0

    def test_values_are_copied(self):
        values = np.array([1.0, 2.0])
        C = Matrix.from_values(values)
        values[0] = 99.0
        assert C.get(0, 0) == 1.0

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="is empty"):
            Matrix.from_values([])

    def test_none_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.from_values(None)

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            Matrix.from_values([[1.0, 2.0]])


class TestFromBuffer:

    def test_array_module_buffer(self):
        arr = array.array('d', [1.0, 2.0, 3.0, 4.0, 5.0])
        D = Matrix.from_buffer(arr, 5)
        assert D.size() == (5, 1)
        assert D.data(4)[0] == 5.0

    def test_prefix_only(self):
        D = Matrix.from_buffer(np.arange(10.0), 3)
        assert D.size() == (3, 1)
        np.testing.assert_array_equal(D.to_numpy().ravel(), [0.0, 1.0, 2.0])

    def test_buffer_not_aliased(self):
        source = np.arange(4.0)
        D = Matrix.from_buffer(source, 4)
        source[:] = -1.0
        assert D.get(0, 0) == 0.0

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="got None"):
            Matrix.from_buffer(None, 3)

    def test_zero_length_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Matrix.from_buffer([1.0], 0)

    def test_length_beyond_buffer_rejected(self):
        with pytest.raises(ValidationError, match="exceeds buffer size"):
            Matrix.from_buffer([1.0, 2.0], 3)


class TestFromRowsAndIdentity:

    def test_from_rows_row_major(self):
        M = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert M.size() == (2, 3)
        assert M.get(0, 2) == 3.0
        assert M.get(1, 0) == 4.0
        assert M._buffer.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_from_rows_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows([1.0, 2.0])

    def test_from_rows_rejects_empty(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[]])

    def test_from_rows_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[1.0, 2.0], [3.0]])

    def test_identity_matches_set_diagonal(self, identity3):
        assert Matrix.identity(3) == identity3

    def test_identity_zero(self):
        assert Matrix.identity(0).size() == (0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Copy and assignment
# ═══════════════════════════════════════════════════════════════════════


class TestCopy:

    def test_copy_equals_source(self):
        D = Matrix.from_values([1.0, 2.0, 3.0, 4.0, 5.0])
        E = D.copy()
        assert E == D

    @pytest.mark.parametrize("make_copy", [
        lambda m: m.copy(),
        copy.copy,
        copy.deepcopy,
    ])
    def test_copy_is_independent(self, make_copy):
        A = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        B = make_copy(A)
        B.set(-7.0, 0, 0)
        assert A.get(0, 0) == 1.0
        assert B._buffer is not A._buffer

    def test_copy_of_empty(self):
        assert Matrix().copy().size() == (0, 0)


class TestAssign:

    def test_assign_into_empty_reshapes(self):
        A = Matrix.from_values([1.0, 2.0, 3.0, 4.0, 5.0])
        B = Matrix()
        B.assign(A)
        assert B.size() == (5, 1)
        assert B == A
        assert _buffer_len(B) == 5

    def test_assign_same_shape_reuses_storage(self):
        A = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        B = Matrix(2, 2)
        storage = B._buffer
        B.assign(A)
        assert B._buffer is storage
        assert B == A

    def test_assign_does_not_alias(self):
        A = Matrix.from_values([1.0, 2.0])
        B = Matrix(5, 5)
        B.assign(A)
        B.set(10.0, 0, 0)
        assert A.get(0, 0) == 1.0

    def test_self_assignment_is_noop(self):
        A = Matrix.from_values([1.0, 2.0])
        storage = A._buffer
        assert A.assign(A) is A
        assert A._buffer is storage
        assert A.get(1, 0) == 2.0

    def test_assign_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix().assign([1.0, 2.0])
