"""
Tests for Matrix construction, element access and value semantics.

Validates:
    - Fill construction (default zero, explicit value, dtype handling)
    - Bulk construction from flat sequences and 2-D arrays
    - Size-mismatch and zero-extent rejection
    - Checked and unchecked element access
    - Deep-copy value semantics and equality
"""

import copy

import numpy as np
import pytest

from fixedmat import Matrix
from fixedmat.core.exceptions import (
    DimensionError,
    OutOfBoundsError,
    SizeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Fill construction
# ═══════════════════════════════════════════════════════════════════════


class TestFillConstruction:

    def test_default_is_float64_zero(self):
        m = Matrix(2, 3)
        assert m.dtype == np.float64
        assert m.shape == (2, 3)
        assert all(value == 0 for value in m)

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4), (8, 1)])
    def test_every_element_equals_fill(self, rows, cols):
        m = Matrix(rows, cols, 7, dtype=np.int32)
        assert m.size == rows * cols
        assert len(m) == rows * cols
        assert all(value == 7 for value in m)

    def test_fill_converted_to_element_type(self):
        m = Matrix(2, 2, 2.9, dtype=np.int16)
        assert m.dtype == np.int16
        assert m.at(1, 1) == 2

    def test_extents(self):
        m = Matrix(3, 5)
        assert m.rows == 3
        assert m.cols == 5
        assert m.size == 15
        assert not m.is_square
        assert Matrix(4, 4).is_square

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (0, 0), (-1, 2)])
    def test_zero_extent_rejected(self, rows, cols):
        with pytest.raises(ValidationError, match="at least 1"):
            Matrix(rows, cols)

    @pytest.mark.parametrize("dtype", [bool, np.complex128, object])
    def test_unsupported_dtype_rejected(self, dtype):
        with pytest.raises(ValidationError, match="unsupported element type"):
            Matrix(2, 2, dtype=dtype)

    def test_non_numeric_fill_rejected(self):
        with pytest.raises(ValidationError, match="value"):
            Matrix(2, 2, "x")


# ═══════════════════════════════════════════════════════════════════════
# Bulk construction
# ═══════════════════════════════════════════════════════════════════════


class TestBulkConstruction:

    def test_row_major_order(self):
        m = Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.tolist() == [[1, 2, 3], [4, 5, 6]]
        assert m.at(1, 0) == 4

    def test_dtype_inferred(self):
        assert Matrix.from_values(1, 2, [1, 2]).dtype == np.int64
        assert Matrix.from_values(1, 2, [1.0, 2]).dtype == np.float64

    def test_explicit_dtype(self):
        m = Matrix.from_values(2, 2, [1.5, 2.5, -3.5, 4], dtype=np.int32)
        assert m.dtype == np.int32
        assert m.tolist() == [[1, 2], [-3, 4]]

    def test_accepts_tuple(self):
        m = Matrix.from_values(2, 2, (1.0, 2.0, 3.0, 4.0))
        assert m.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_too_few_values(self):
        with pytest.raises(SizeMismatchError, match="expected 4 values for a 2x2 matrix, got 3") as exc_info:
            Matrix.from_values(2, 2, [1, 2, 3])
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_too_many_values(self):
        with pytest.raises(SizeMismatchError):
            Matrix.from_values(2, 2, [1, 2, 3, 4, 5])

    def test_empty_values(self):
        with pytest.raises(SizeMismatchError):
            Matrix.from_values(1, 1, [])

    def test_nested_values_rejected(self):
        with pytest.raises(DimensionError, match="flat sequence"):
            Matrix.from_values(2, 2, [[1, 2], [3, 4]])

    def test_non_numeric_values_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.from_values(1, 2, ["a", "b"])

    def test_input_not_aliased(self):
        source = np.array([1.0, 2.0, 3.0, 4.0])
        m = Matrix.from_values(2, 2, source)
        source[0] = 99.0
        assert m.at(0, 0) == 1.0


class TestFromArray:

    def test_shape_from_array(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.at(0, 2) == 3

    def test_dtype_override(self):
        m = Matrix.from_array(np.eye(2), dtype=np.int8)
        assert m.dtype == np.int8
        assert m.tolist() == [[1, 0], [0, 1]]

    def test_one_dimensional_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array([1, 2, 3])

    def test_empty_axis_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.from_array(np.zeros((0, 3)))

    def test_input_not_aliased(self):
        source = np.ones((2, 2))
        m = Matrix.from_array(source)
        source[1, 1] = 5.0
        assert m.at(1, 1) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_at_reads_row_major(self, a2):
        assert a2.at(0, 0) == 1
        assert a2.at(0, 1) == 2
        assert a2.at(1, 0) == 3
        assert a2.at(1, 1) == 4

    def test_set_at(self, a2):
        a2.set_at(1, 0, 30)
        assert a2.tolist() == [[1, 2], [30, 4]]

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (3, 2)])
    def test_at_row_extent_out_of_bounds(self, rows, cols):
        m = Matrix(rows, cols)
        with pytest.raises(OutOfBoundsError, match="row index"):
            m.at(rows, 0)

    @pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (3, 2)])
    def test_at_col_extent_out_of_bounds(self, rows, cols):
        m = Matrix(rows, cols)
        with pytest.raises(OutOfBoundsError, match="column index"):
            m.at(0, cols)

    def test_set_at_out_of_bounds(self, a2):
        with pytest.raises(OutOfBoundsError):
            a2.set_at(2, 0, 1)
        assert a2.tolist() == [[1, 2], [3, 4]]

    def test_negative_index_rejected(self, a2):
        with pytest.raises(OutOfBoundsError):
            a2.at(-1, 0)

    def test_element_unchecked_in_range(self, a2):
        assert a2.element(1, 1) == 4
        a2.set_element(0, 1, 20)
        assert a2.element(0, 1) == 20

    def test_element_uses_row_major_offset(self):
        m = Matrix.from_values(2, 3, [0, 1, 2, 3, 4, 5])
        # offset 0 * 3 + 4 lands on the second row
        assert m.element(0, 4) == 4

    def test_subscript_is_checked(self, a2):
        assert a2[1, 0] == 3
        a2[1, 0] = 9
        assert a2.at(1, 0) == 9
        with pytest.raises(IndexError):
            a2[0, 2]

    def test_write_converts_to_element_type(self, a2):
        a2.set_at(0, 0, 7.8)
        assert a2.at(0, 0) == 7
        assert a2.dtype == np.int64


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_copy_is_deep(self, a2):
        b = a2.copy()
        b.set_at(0, 0, 100)
        assert a2.at(0, 0) == 1

    def test_copy_module(self, a2):
        shallow = copy.copy(a2)
        deep = copy.deepcopy(a2)
        shallow.set_at(0, 0, 5)
        deep.set_at(0, 1, 5)
        assert a2.tolist() == [[1, 2], [3, 4]]

    def test_to_numpy_is_a_copy(self, a2):
        array = a2.to_numpy()
        array[0, 0] = 50
        assert a2.at(0, 0) == 1
        assert array.shape == (2, 2)

    def test_equality(self, a2):
        assert a2 == Matrix.from_values(2, 2, [1, 2, 3, 4])
        assert a2 == Matrix.from_values(2, 2, [1.0, 2.0, 3.0, 4.0])
        assert a2 != Matrix.from_values(2, 2, [1, 2, 3, 5])

    def test_different_extents_not_equal(self):
        assert Matrix(1, 4) != Matrix(2, 2)
        assert Matrix(2, 3) != Matrix(3, 2)

    def test_not_equal_to_non_matrix(self, a2):
        assert a2 != [[1, 2], [3, 4]]

    def test_unhashable(self, a2):
        with pytest.raises(TypeError):
            hash(a2)

    def test_iteration_is_row_major(self):
        m = Matrix.from_values(2, 2, [4, 3, 2, 1])
        assert [int(v) for v in m] == [4, 3, 2, 1]
