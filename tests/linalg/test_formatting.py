"""
Tests for plain-text formatting and parsing.
"""

import numpy as np
import pytest

from pycurves.core.exceptions import DimensionMismatch, ValidationError
from pycurves.linalg import (
    format_matrix,
    format_vector,
    mat2,
    mat3,
    mat3f,
    mat3i,
    matrix_type,
    parse_matrix,
    parse_vector,
    vec3,
    vec3f,
    vec3i,
    vec4,
)


class TestFormat:

    def test_vector(self):
        assert format_vector(vec3([1, 2.5, -3])) == "1.0 2.5 -3.0"

    def test_integer_vector(self):
        assert format_vector(vec3i([1, 2, 3])) == "1 2 3"

    def test_matrix(self):
        assert format_matrix(mat2([1, 2, 3, 4])) == "1.0 2.0\n3.0 4.0"

    def test_str_uses_formatter(self):
        M = mat3(np.arange(9))
        assert str(M) == format_matrix(M)


class TestParse:

    def test_vector(self):
        assert parse_vector("1 2.5\t-3", vec3) == vec3([1, 2.5, -3])

    def test_classmethod(self):
        assert vec4.parse("1 2 3 4") == vec4([1, 2, 3, 4])
        assert mat2.parse("1 0\n0 1") == mat2()

    def test_matrix_line_breaks_not_significant(self):
        assert parse_matrix("1 2 3 4", mat2) == parse_matrix("1 2\n3 4", mat2)

    def test_too_few_values(self):
        with pytest.raises(DimensionMismatch) as exc_info:
            parse_vector("1 2", vec3)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_too_many_values(self):
        with pytest.raises(DimensionMismatch):
            parse_matrix("1 2 3 4 5", mat2)

    def test_not_a_number(self):
        with pytest.raises(ValidationError, match="cannot parse"):
            parse_vector("1 two 3", vec3)

    def test_float_token_in_integer_vector(self):
        with pytest.raises(ValidationError):
            parse_vector("1 2.5 3", vec3i)


class TestRoundTrip:
    """Parsing formatted output restores the exact value."""

    def test_vectors(self, rng):
        for vtype in (vec3, vec3f):
            v = vtype(rng.standard_normal(3))
            assert parse_vector(format_vector(v), vtype) == v
        v = vec3i(rng.integers(-1000, 1000, size=3))
        assert parse_vector(format_vector(v), vec3i) == v

    def test_matrices(self, rng):
        for mtype in (mat3, mat3f, matrix_type(2, 4)):
            M = mtype(rng.standard_normal(mtype.rows * mtype.cols))
            assert parse_matrix(format_matrix(M), mtype) == M
        M = mat3i(rng.integers(-1000, 1000, size=9))
        assert parse_matrix(format_matrix(M), mat3i) == M
