"""
Free operations over fixed-size vectors and matrices.

Geometry helpers (angles, lengths, cross product), the recursive
determinant, and constructors for the transforms used by the curve family:
Euler rotation, scaling, homogeneous translation and change of basis.

Every function returns a new value and leaves its arguments untouched.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pycurves.core.exceptions import DegenerateInput, DimensionMismatch
from pycurves.linalg.matrix import FixedMatrix, mat3, matrix_type
from pycurves.linalg.matrix import _wrap as _wrap_matrix
from pycurves.linalg.vector import FixedVector, as_vector, vector_type
from pycurves.linalg.vector import _wrap as _wrap_vector

_DEG_TO_RAD = math.pi / 180.0


def _check_dim(vector: FixedVector, dim: int, name: str) -> None:
    if vector.dim != dim:
        raise DimensionMismatch(
            f"{name}: expected a {dim}-vector, got dimension {vector.dim}",
            expected=dim,
            actual=vector.dim,
        )


def _check_square(matrix: FixedMatrix, name: str) -> None:
    if not matrix.is_square:
        raise DimensionMismatch(
            f"{name}: expected a square matrix, got {matrix.rows}x{matrix.cols}",
            expected=(matrix.rows, matrix.rows),
            actual=matrix.shape,
        )


def _ensure_vector(values: FixedVector | ArrayLike) -> FixedVector:
    if isinstance(values, FixedVector):
        return values
    return as_vector(values)


# ═══════════════════════════════════════════════════════════════════════
# Angles
# ═══════════════════════════════════════════════════════════════════════


def rad(angle: float | FixedVector) -> float | FixedVector:
    """Degrees to radians, for a scalar or componentwise for a vector."""
    if isinstance(angle, FixedVector):
        return _wrap_vector(np.asarray(angle, dtype=np.float64) * _DEG_TO_RAD)
    return float(angle) * _DEG_TO_RAD


def deg(angle: float | FixedVector) -> float | FixedVector:
    """Radians to degrees, for a scalar or componentwise for a vector."""
    if isinstance(angle, FixedVector):
        return _wrap_vector(np.asarray(angle, dtype=np.float64) / _DEG_TO_RAD)
    return float(angle) / _DEG_TO_RAD


# ═══════════════════════════════════════════════════════════════════════
# Vector geometry
# ═══════════════════════════════════════════════════════════════════════


def dot(a: FixedVector, b: FixedVector) -> float:
    """Inner product of two vectors of equal dimension."""
    _check_dim(b, a.dim, 'b')
    result = 0.0
    for left, right in zip(a, b):
        result += left * right
    return float(result)


def length(vector: FixedVector) -> float:
    """Euclidean length."""
    return math.sqrt(dot(vector, vector))


def normalize(vector: FixedVector) -> FixedVector:
    """
    Unit vector in the direction of vector.

    Raises:
        DegenerateInput: If the vector has zero length
    """
    norm = length(vector)
    if norm == 0.0:
        raise DegenerateInput(
            f"Cannot normalize a zero-length {vector.dim}-vector",
            operation='normalize',
        )
    return _wrap_vector(np.asarray(vector, dtype=np.float64) / norm)


def cross(a: FixedVector, b: FixedVector) -> FixedVector:
    """
    Right-handed cross product of two 3-vectors.

    Each component is the determinant of a 2x2 minor of the stacked
    operands; the middle one is negated.
    """
    _check_dim(a, 3, 'a')
    _check_dim(b, 3, 'b')
    dtype = np.result_type(a.dtype, b.dtype)
    Mat2 = matrix_type(2, 2, dtype)

    mat_i = Mat2([a.y, b.y,
                  a.z, b.z])
    mat_j = Mat2([a.x, b.x,
                  a.z, b.z])
    mat_k = Mat2([a.x, b.x,
                  a.y, b.y])
    return _wrap_vector(np.array([det(mat_i), -det(mat_j), det(mat_k)], dtype=dtype))


# ═══════════════════════════════════════════════════════════════════════
# Matrix structure
# ═══════════════════════════════════════════════════════════════════════


def transpose(matrix: FixedMatrix) -> FixedMatrix:
    """rows x cols matrix -> cols x rows matrix."""
    return _wrap_matrix(np.asarray(matrix).T.copy())


def minor(matrix: FixedMatrix, row: int, col: int) -> FixedMatrix:
    """Matrix with the given row and column removed."""
    if matrix.rows < 2 or matrix.cols < 2:
        raise DimensionMismatch(
            f"minor: matrix {matrix.rows}x{matrix.cols} has no minors",
            actual=matrix.shape,
        )
    data = np.asarray(matrix)
    data = np.delete(np.delete(data, row, axis=0), col, axis=1)
    return _wrap_matrix(data)


def det(matrix: FixedMatrix) -> float:
    """
    Determinant by cofactor expansion along the first row.

    A non-square matrix has determinant 0. The expansion is O(n!), which is
    fine for the small geometric matrices this package targets (n <= 4).
    """
    if not matrix.is_square:
        return 0.0

    n = matrix.rows
    if n == 1:
        return float(matrix[0, 0])
    if n == 2:
        return float(matrix['x'] * matrix['y'] - matrix['xy'] * matrix['yx'])

    result = 0.0
    for k in range(n):
        sign = -1.0 if k % 2 else 1.0
        result += sign * det(minor(matrix, 0, k)) * matrix[0, k]
    return result


def shrink(value: FixedVector | FixedMatrix) -> FixedVector | FixedMatrix:
    """
    Drop the last component of a vector, or the last row and column of a
    square matrix (e.g. homogeneous 4x4 -> linear 3x3 part).
    """
    if isinstance(value, FixedVector):
        if value.dim < 2:
            raise DimensionMismatch("shrink: vector has a single component", actual=1)
        return _wrap_vector(np.asarray(value)[:-1].copy())

    _check_square(value, 'shrink')
    if value.rows < 2:
        raise DimensionMismatch("shrink: matrix is 1x1", actual=value.shape)
    return _wrap_matrix(np.asarray(value)[:-1, :-1].copy())


def extend(
    value: FixedVector | FixedMatrix,
    last: Any,
) -> FixedVector | FixedMatrix:
    """
    Append a component to a vector, or border a square matrix with a zero
    row and column whose corner element is last.
    """
    if isinstance(value, FixedVector):
        data = np.asarray(value)
        return vector_type(value.dim + 1, value.dtype)(np.append(data, last))

    _check_square(value, 'extend')
    n = value.rows
    data = np.zeros((n + 1, n + 1), dtype=value.dtype)
    data[:n, :n] = np.asarray(value)
    data[n, n] = last
    return _wrap_matrix(data)


# ═══════════════════════════════════════════════════════════════════════
# Transforms
# ═══════════════════════════════════════════════════════════════════════


def basis_change(matrix: FixedMatrix, basis: FixedMatrix) -> FixedMatrix:
    """Representation of matrix in another basis: basis^T @ matrix @ basis."""
    _check_square(matrix, 'matrix')
    _check_square(basis, 'basis')
    return transpose(basis) @ matrix @ basis


def rotate_euler(angles: FixedVector | ArrayLike) -> FixedMatrix:
    """
    3x3 rotation from Euler angles in radians.

    angles.x turns about the y axis (psi), angles.y about the z axis (theta)
    and angles.z about the x axis (gamma). The result is
    transpose(gamma @ theta @ psi); callers rely on exactly this order.
    """
    angles = _ensure_vector(angles)
    _check_dim(angles, 3, 'angles')

    cx, sx = math.cos(angles.x), math.sin(angles.x)
    cy, sy = math.cos(angles.y), math.sin(angles.y)
    cz, sz = math.cos(angles.z), math.sin(angles.z)

    psi = mat3([cx, 0.0, -sx,
                0.0, 1.0, 0.0,
                sx, 0.0, cx])
    theta = mat3([cy, sy, 0.0,
                  -sy, cy, 0.0,
                  0.0, 0.0, 1.0])
    gamma = mat3([1.0, 0.0, 0.0,
                  0.0, cz, sz,
                  0.0, -sz, cz])
    return transpose(gamma @ theta @ psi)


def scale(factors: FixedVector | ArrayLike) -> FixedMatrix:
    """Diagonal matrix with factors on the diagonal (3-vector -> 3x3)."""
    factors = _ensure_vector(factors)
    return matrix_type(factors.dim, factors.dim, factors.dtype).diagonal(factors)


def translation(offset: FixedVector | ArrayLike) -> FixedMatrix:
    """
    Homogeneous translation: identity of order dim + 1 with offset in the
    last column (3-vector -> 4x4).
    """
    offset = _ensure_vector(offset)
    n = offset.dim
    result = matrix_type(n + 1, n + 1, offset.dtype)()
    for i, component in enumerate(offset):
        result[i, n] = component
    return result
