"""
Tests for FixedMatrix and the concrete matrix types.
"""

import copy
import pickle

import numpy as np
import pytest

from pycurves.core.exceptions import DimensionMismatch, InvalidAxisKey, ValidationError
from pycurves.linalg import (
    Axis,
    FixedMatrix,
    as_matrix,
    mat2,
    mat3,
    mat3i,
    mat4,
    matrix_type,
    vec2,
    vec3,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_square_is_identity(self):
        np.testing.assert_array_equal(np.asarray(mat3()), np.eye(3))

    def test_default_non_square_is_zero(self):
        M = matrix_type(2, 3)()
        np.testing.assert_array_equal(np.asarray(M), np.zeros((2, 3)))

    def test_flat_row_major(self):
        M = mat2([1, 2,
                  3, 4])
        assert M[0, 1] == 2.0
        assert M[1, 0] == 3.0

    def test_nested(self):
        assert mat2([[1, 2], [3, 4]]) == mat2([1, 2, 3, 4])

    def test_wrong_count(self):
        with pytest.raises(DimensionMismatch):
            mat3([1, 2, 3])

    def test_wrong_nested_shape(self):
        with pytest.raises(DimensionMismatch):
            mat2([[1, 2, 3], [4, 5, 6]])

    def test_filled_square_is_diagonal(self):
        np.testing.assert_array_equal(np.asarray(mat3.filled(2.0)), 2.0 * np.eye(3))

    def test_filled_non_square_is_full(self):
        M = matrix_type(2, 3).filled(2.0)
        np.testing.assert_array_equal(np.asarray(M), np.full((2, 3), 2.0))

    def test_integer_filled(self):
        assert mat3i.filled(2) == mat3i([2, 0, 0, 0, 2, 0, 0, 0, 2])

    def test_float_input_to_integer_type(self):
        with pytest.raises(ValidationError, match="without loss"):
            mat3i([1.5] * 9)

    def test_astype_truncates(self):
        M = mat2([1.5, 0, 0, -2.7]).astype(np.int64)
        assert type(M) is matrix_type(2, 2, np.int64)
        assert M == mat2([1, 0, 0, -2])

    def test_diagonal(self):
        M = mat3.diagonal(vec3([1, 2, 3]))
        np.testing.assert_array_equal(np.asarray(M), np.diag([1.0, 2.0, 3.0]))

    def test_diagonal_requires_square(self):
        with pytest.raises(DimensionMismatch):
            matrix_type(2, 3).diagonal([1, 2])

    def test_type_names(self):
        assert mat3.__name__ == "Matrix3"
        assert mat3i.__name__ == "Matrix3i"
        assert matrix_type(2, 3).__name__ == "Matrix2x3"
        assert matrix_type(3) is mat3

    def test_abstract_base(self):
        with pytest.raises(TypeError, match="abstract"):
            FixedMatrix()

    def test_as_matrix(self):
        M = as_matrix([[1, 2, 3]])
        assert M.shape == (1, 3)


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_access_paths_agree(self):
        M = mat3(np.arange(9))
        assert M[0, 1] == M[0][1] == M["xy"] == M[Axis.X, Axis.Y] == 1.0
        assert M["z"] == M[2, 2] == M[Axis.Z] == 8.0

    def test_write_through_every_path(self):
        M = mat3()
        M["yz"] = 5.0
        assert M[1, 2] == 5.0
        M[2][0] = 6.0
        assert M["zx"] == 6.0
        M[Axis.Y, Axis.X] = 7.0
        assert M[1][0] == 7.0

    def test_row_assignment_checks_length(self):
        M = mat3()
        M[0] = [1, 2, 3]
        assert M.row(0) == vec3([1, 2, 3])
        with pytest.raises(DimensionMismatch):
            M[0] = [1, 2]

    def test_unknown_name(self):
        with pytest.raises(InvalidAxisKey):
            mat3()["xq"]

    def test_name_outside_matrix(self):
        with pytest.raises(InvalidAxisKey):
            mat3()["w"]

    def test_rows_and_columns(self):
        M = mat2([1, 2, 3, 4])
        assert M.column(1) == vec2([2, 4])
        assert list(M.iter_rows()) == [vec2([1, 2]), vec2([3, 4])]

    def test_iteration_is_row_major(self):
        M = mat2([1, 2, 3, 4])
        assert list(M) == [1.0, 2.0, 3.0, 4.0]
        assert list(reversed(M)) == [4.0, 3.0, 2.0, 1.0]


# ═══════════════════════════════════════════════════════════════════════
# Value semantics and arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_copy_is_independent(self):
        M = mat2()
        for C in (M.copy(), copy.deepcopy(M)):
            C[0, 0] = 5.0
            assert M[0, 0] == 1.0

    def test_pickle(self):
        M = matrix_type(2, 3)([1, 2, 3, 4, 5, 6])
        assert pickle.loads(pickle.dumps(M)) == M

    def test_exact_equality(self):
        assert mat2([0.1 + 0.2, 0, 0, 1]) != mat2([0.3, 0, 0, 1])
        assert mat3() != mat4()


class TestArithmetic:

    def test_add_sub_scalar(self):
        A = mat2([1, 2, 3, 4])
        assert A + A == 2 * A == A * 2
        assert A - A == mat2.filled(0.0)
        assert A / 2 == mat2([0.5, 1.0, 1.5, 2.0])
        assert -A == mat2([-1, -2, -3, -4])

    def test_numpy_scalar_on_left(self):
        M = np.float64(2) * mat3()
        assert type(M) is mat3
        assert M == mat3.filled(2.0)
        assert type(np.int64(3) * mat2([1, 2, 3, 4])) is mat2

    def test_in_place(self):
        A = mat2()
        A += mat2.filled(1.0)
        assert A == mat2.filled(2.0)
        A -= mat2()
        assert A == mat2()

    def test_matrix_product(self):
        A = mat2([1, 2, 3, 4])
        B = mat2([0, 1, 1, 0])
        assert A @ B == mat2([2, 1, 4, 3])
        assert A @ mat2() == A

    def test_product_shape(self):
        A = matrix_type(2, 3)([1, 2, 3, 4, 5, 6])
        B = matrix_type(3, 4)()
        assert (A @ B).shape == (2, 4)

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch) as exc_info:
            matrix_type(2, 3)() @ mat2()
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_matrix_vector_product_has_row_dimension(self):
        A = matrix_type(2, 3)([1, 0, 0,
                               0, 1, 0])
        assert A @ vec3([4, 5, 6]) == vec2([4, 5])

    def test_matrix_vector_mismatch(self):
        with pytest.raises(DimensionMismatch):
            mat3() @ vec2()

    def test_shape_mismatch(self):
        with pytest.raises(DimensionMismatch):
            mat2() + mat3()

    def test_str(self):
        assert str(mat2()) == "1.0 0.0\n0.0 1.0"
