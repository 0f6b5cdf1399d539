"""
Tests for FixedVector and the concrete vector types.
"""

import copy
import pickle

import numpy as np
import pytest

from pycurves.core.exceptions import DimensionMismatch, InvalidAxisKey, ValidationError
from pycurves.linalg import Axis, FixedVector, as_vector, vec2, vec3, vec3f, vec3i, vec4, vector_type


# ═══════════════════════════════════════════════════════════════════════
# Types
# ═══════════════════════════════════════════════════════════════════════


class TestVectorType:

    def test_cached(self):
        assert vector_type(3) is vec3
        assert vector_type(3, np.int64) is vec3i

    def test_names(self):
        assert vec3.__name__ == "Vector3"
        assert vec3f.__name__ == "Vector3f"
        assert vec3i.__name__ == "Vector3i"

    def test_rejects_zero_dimension(self):
        with pytest.raises(ValidationError):
            vector_type(0)

    def test_rejects_non_numeric_dtype(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            vector_type(3, np.str_)

    def test_abstract_base(self):
        with pytest.raises(TypeError, match="abstract"):
            FixedVector()


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_is_zero(self):
        assert list(vec3()) == [0.0, 0.0, 0.0]

    def test_from_list(self):
        v = vec3([1, 2, 3])
        assert list(v) == [1.0, 2.0, 3.0]
        assert v.dtype == np.float64

    def test_wrong_length(self):
        with pytest.raises(DimensionMismatch) as exc_info:
            vec3([1.0, 2.0])
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_nested_rejected(self):
        with pytest.raises(DimensionMismatch):
            vec2([[1.0, 2.0]])

    def test_filled(self):
        assert vec4.filled(2.5) == vec4([2.5, 2.5, 2.5, 2.5])

    def test_float_input_to_integer_type(self):
        with pytest.raises(ValidationError, match="float64 to int64"):
            vec3i([1.5, 2.7, 3.9])
        assert vec3i(np.array([1, 2, 3], dtype=np.int32)) == vec3i([1, 2, 3])

    def test_input_not_aliased(self):
        data = np.array([1.0, 2.0, 3.0])
        v = vec3(data)
        data[0] = 99.0
        assert v.x == 1.0

    def test_as_vector_infers_dimension(self):
        v = as_vector([1, 2, 3, 4, 5])
        assert v.dim == 5
        assert type(v) is vector_type(5)

    def test_as_vector_rejects_empty(self):
        with pytest.raises(DimensionMismatch):
            as_vector([])


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_index_and_name_agree(self):
        v = vec4([1.0, 2.0, 3.0, 4.0])
        for i, name in enumerate("xyzw"):
            assert v[i] == v[name] == v[Axis(i)] == getattr(v, name)

    def test_write_by_name_visible_by_index(self):
        v = vec3()
        v["y"] = 7.0
        assert v[1] == 7.0
        v[2] = -1.0
        assert v.z == -1.0
        v.x = 4.0
        assert v[Axis.X] == 4.0

    def test_unknown_name(self):
        with pytest.raises(InvalidAxisKey):
            vec3()["q"]

    def test_name_outside_dimension(self):
        with pytest.raises(InvalidAxisKey):
            vec2().z

    def test_integer_dtype_returns_int(self):
        assert isinstance(vec3i([1, 2, 3])["x"], int)

    def test_reverse_iteration(self):
        assert list(reversed(vec3([1, 2, 3]))) == [3.0, 2.0, 1.0]

    def test_fill(self):
        v = vec3([1, 2, 3])
        v.fill(0.5)
        assert v == vec3.filled(0.5)


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_copy_is_independent(self):
        v = vec3([1, 2, 3])
        for w in (v.copy(), copy.copy(v), copy.deepcopy(v)):
            w.x = 100.0
            assert v.x == 1.0

    def test_pickle(self):
        v = vec3f([1.5, 2.5, 3.5])
        restored = pickle.loads(pickle.dumps(v))
        assert restored == v
        assert type(restored) is vec3f

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(vec3())

    def test_astype(self):
        v = vec3([1.0, 2.0, 3.0]).astype(np.int64)
        assert type(v) is vec3i

    def test_astype_truncates(self):
        assert vec3([1.5, 2.7, -3.9]).astype(np.int64) == vec3i([1, 2, -3])

    def test_to_numpy_is_copy(self):
        v = vec3([1, 2, 3])
        arr = v.to_numpy()
        arr[0] = 10.0
        assert v.x == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Comparison and arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_exact_equality(self):
        assert vec3([0.1 + 0.2, 0, 0]) != vec3([0.3, 0, 0])
        assert vec3([1, 2, 3]) == vec3([1, 2, 3])

    def test_different_dimensions_not_equal(self):
        assert vec3() != vec4()

    def test_int_and_float_compare_by_value(self):
        assert vec3i([1, 2, 3]) == vec3([1.0, 2.0, 3.0])


class TestArithmetic:

    def test_add_sub(self):
        a = vec3([1, 2, 3])
        b = vec3([4, 5, 6])
        assert a + b == vec3([5, 7, 9])
        assert b - a == vec3([3, 3, 3])
        assert a == vec3([1, 2, 3])

    def test_in_place(self):
        a = vec3([1, 2, 3])
        alias = a
        a += vec3([1, 1, 1])
        assert alias is a
        assert a == vec3([2, 3, 4])
        a -= vec3([2, 2, 2])
        assert a == vec3([0, 1, 2])

    def test_scalar_both_orders(self):
        a = vec3([1, 2, 3])
        assert a * 2 == 2 * a == vec3([2, 4, 6])
        assert a / 2 == vec3([0.5, 1.0, 1.5])
        assert -a == vec3([-1, -2, -3])

    def test_numpy_scalar_on_left(self):
        v = np.float64(2) * vec3([1, 2, 3])
        assert type(v) is vec3
        assert v == vec3([2, 4, 6])
        assert type(np.float32(0.5) * vec3f([2, 4, 6])) is vec3f

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            vec3() + vec4()

    def test_vector_product_not_supported(self):
        with pytest.raises(TypeError):
            vec3() * vec3()

    def test_repr_and_str(self):
        v = vec3([1, 2, 3])
        assert repr(v) == "Vector3([1.0, 2.0, 3.0])"
        assert str(v) == "1.0 2.0 3.0"
