"""
Symbolic axis names for vectors and matrices.

Vectors accept the component names ``x, y, z, w`` (indices 0..3). Matrices
accept the two-letter ``row+column`` names of the leading 4x4 block, with
the diagonal abbreviated to a single letter::

    x   xy  xz  xw
    yx  y   yz  yw
    zx  zy  z   zw
    wx  wy  wz  w

Names are resolved through fixed lookup tables. A name that is not in the
table, or that points outside the object being indexed, raises
InvalidAxisKey before any element is accessed.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pycurves.core.exceptions import InvalidAxisKey


class Axis(IntEnum):
    """Coordinate axis. The integer value is the component index."""
    X = 0
    Y = 1
    Z = 2
    W = 3

    @property
    def label(self) -> str:
        return self.name.lower()


VECTOR_AXES: dict[str, int] = {axis.label: int(axis) for axis in Axis}


def _build_matrix_axes() -> dict[str, tuple[int, int]]:
    table = {}
    for row in Axis:
        for col in Axis:
            key = row.label if row == col else row.label + col.label
            table[key] = (int(row), int(col))
    return table


MATRIX_AXES: dict[str, tuple[int, int]] = _build_matrix_axes()

MATRIX_AXES_BY_POSITION: dict[tuple[int, int], str] = {
    position: name for name, position in MATRIX_AXES.items()
}


def vector_axis_names(dim: int) -> tuple[str, ...]:
    """Axis names addressable on a vector of the given dimension."""
    return tuple(name for name, index in VECTOR_AXES.items() if index < dim)


def matrix_axis_names(rows: int, cols: int) -> tuple[str, ...]:
    """Axis names addressable on a rows x cols matrix."""
    return tuple(
        name for name, (r, c) in MATRIX_AXES.items() if r < rows and c < cols
    )


def resolve_vector_axis(key: Any, dim: int) -> int:
    """
    Map a symbolic vector component name to its index.

    Args:
        key: Axis member or one of 'x', 'y', 'z', 'w'
        dim: Dimension of the vector being indexed

    Returns:
        Component index in [0, dim)

    Raises:
        InvalidAxisKey: If the name is unknown or addresses a component
            the vector does not have
    """
    if isinstance(key, Axis):
        name, index = key.label, int(key)
    elif isinstance(key, str) and key in VECTOR_AXES:
        name, index = key, VECTOR_AXES[key]
    else:
        raise InvalidAxisKey(
            f"Unknown vector axis {key!r}, expected one of {vector_axis_names(dim)}",
            key=key,
            valid_keys=vector_axis_names(dim),
        )

    if index >= dim:
        raise InvalidAxisKey(
            f"Axis {name!r} is outside a {dim}-dimensional vector",
            key=key,
            valid_keys=vector_axis_names(dim),
        )
    return index


def resolve_matrix_axis(key: Any, rows: int, cols: int) -> tuple[int, int]:
    """
    Map a symbolic matrix element name to its (row, col) position.

    Args:
        key: Two-letter name such as 'xy' (or 'x' for the diagonal), or a
            pair of Axis members
        rows: Number of rows of the matrix being indexed
        cols: Number of columns of the matrix being indexed

    Returns:
        (row, col) inside the matrix

    Raises:
        InvalidAxisKey: If the name is unknown or addresses an element
            outside the matrix
    """
    valid = matrix_axis_names(rows, cols)

    if (
        isinstance(key, tuple)
        and len(key) == 2
        and all(isinstance(k, Axis) for k in key)
    ):
        row, col = key
        position = (int(row), int(col))
        name = MATRIX_AXES_BY_POSITION[position]
    elif isinstance(key, str) and key in MATRIX_AXES:
        position = MATRIX_AXES[key]
        name = key
    else:
        raise InvalidAxisKey(
            f"Unknown matrix axis {key!r}, expected one of {valid}",
            key=key,
            valid_keys=valid,
        )

    if position[0] >= rows or position[1] >= cols:
        raise InvalidAxisKey(
            f"Axis {name!r} is outside a {rows}x{cols} matrix",
            key=key,
            valid_keys=valid,
        )
    return position

