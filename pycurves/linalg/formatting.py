"""
Plain-text representation of vectors and matrices.

Vectors are written as their components separated by single spaces;
matrices as one such line per row. The parsers accept any whitespace
between tokens and require exactly the element count of the target type,
read in the same (row-major) order. Floats are written with repr(), so
parsing formatted output restores the exact values.
"""

from __future__ import annotations

import numpy as np

from pycurves.core.exceptions import DimensionMismatch, ValidationError
from pycurves.linalg.matrix import FixedMatrix
from pycurves.linalg.vector import FixedVector


def format_vector(vector: FixedVector) -> str:
    """Components separated by single spaces, e.g. '1.0 2.0 3.0'."""
    return ' '.join(repr(v) for v in vector)


def format_matrix(matrix: FixedMatrix) -> str:
    """One line per row, entries separated by single spaces."""
    return '\n'.join(format_vector(row) for row in matrix.iter_rows())


def _read_tokens(text: str, expected: int, target: str, dtype: np.dtype) -> list:
    tokens = text.split()
    if len(tokens) != expected:
        raise DimensionMismatch(
            f"{target}: expected {expected} values, got {len(tokens)}",
            expected=expected,
            actual=len(tokens),
        )
    convert = int if np.issubdtype(dtype, np.integer) else float
    try:
        return [convert(token) for token in tokens]
    except ValueError as e:
        raise ValidationError(f"{target}: cannot parse value: {e}") from e


def parse_vector(text: str, vector_cls: type[FixedVector]) -> FixedVector:
    """
    Read a vector of type vector_cls from whitespace-separated text.

    Raises:
        DimensionMismatch: If the token count differs from vector_cls.dim
        ValidationError: If a token is not a number of the element type
    """
    values = _read_tokens(text, vector_cls.dim, vector_cls.__name__, vector_cls.dtype)
    return vector_cls(values)


def parse_matrix(text: str, matrix_cls: type[FixedMatrix]) -> FixedMatrix:
    """
    Read a matrix of type matrix_cls from whitespace-separated text.

    Line breaks are not significant; values are consumed in row-major order.

    Raises:
        DimensionMismatch: If the token count differs from rows * cols
        ValidationError: If a token is not a number of the element type
    """
    expected = matrix_cls.rows * matrix_cls.cols
    values = _read_tokens(text, expected, matrix_cls.__name__, matrix_cls.dtype)
    return matrix_cls(values)
