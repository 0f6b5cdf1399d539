"""
Fixed-size numeric matrices.

A concrete matrix type fixes its row count, column count and element type::

    Mat3 = matrix_type(3, 3)         # float64, also exported as mat3
    I = Mat3()                       # identity (zero matrix if not square)
    A = Mat3([1, 2, 3,
              4, 5, 6,
              7, 8, 10])             # row-major, exactly rows*cols values
    A[0, 1], A[0][1], A["xy"]        # the same element
    B = A @ I                        # matrix product
    v = A @ vec3([1, 0, 0])          # matrix-vector product

Element lists of the wrong length and products with mismatched inner
dimensions raise DimensionMismatch.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pycurves.core.exceptions import DimensionMismatch
from pycurves.core.validation import check_array, check_positive_int, check_shape
from pycurves.linalg._common import dtype_suffix, is_scalar, normalize_dtype
from pycurves.linalg.axes import Axis, resolve_matrix_axis
from pycurves.linalg.vector import FixedVector
from pycurves.linalg.vector import _wrap as _wrap_vector


class FixedMatrix:
    """
    rows x cols numeric matrix in row-major layout.

    Do not instantiate FixedMatrix itself; use a concrete type returned by
    matrix_type() (or one of the aliases mat2 ... mat4i).

    Construction:
        M()                 identity if square, zeros otherwise
        M(values)           rows*cols values (flat, row-major) or nested rows
        M.filled(value)     diagonal fill if square, full fill otherwise
        M.diagonal(vector)  square matrix with vector on the diagonal
        M.parse(text)       one row per line, whitespace-separated

    Float input to an integer type raises ValidationError; use astype().

    Indexing:
        M[i, j]             element
        M[i]                row i as a writable numpy view, so M[i][j] = v works
        M["xy"], M[Axis.X]  symbolic element (first 4x4 block)

    Iteration walks the elements in row-major order; use iter_rows() for rows.
    """
    __slots__ = ('_data',)

    rows: ClassVar[int] = 0
    cols: ClassVar[int] = 0
    dtype: ClassVar[np.dtype] = np.dtype(np.float64)

    __hash__ = None  # type: ignore[assignment]

    __array_ufunc__ = None

    def __init__(self, values: ArrayLike | None = None):
        cls = type(self)
        if cls.rows == 0:
            raise TypeError(
                "FixedMatrix is abstract; create a concrete type with matrix_type(rows, cols)"
            )
        if values is None:
            if cls.rows == cls.cols:
                self._data = np.eye(cls.rows, dtype=cls.dtype)
            else:
                self._data = np.zeros((cls.rows, cls.cols), dtype=cls.dtype)
            return

        data = check_array(values, 'values', dtype=cls.dtype)
        if data.ndim == 1 and data.size == cls.rows * cls.cols:
            data = data.reshape(cls.rows, cls.cols)
        elif data.shape != (cls.rows, cls.cols):
            raise DimensionMismatch(
                f"{cls.__name__}: expected {cls.rows * cls.cols} elements "
                f"or shape ({cls.rows}, {cls.cols}), got shape {data.shape}",
                expected=(cls.rows, cls.cols),
                actual=data.shape,
            )
        self._data = data.copy()

    # --- Alternative constructors ---

    @classmethod
    def filled(cls, value: float) -> FixedMatrix:
        """Diagonal fill when square, full fill otherwise."""
        if cls.rows == cls.cols:
            return cls(np.eye(cls.rows, dtype=np.int64) * value)
        return cls(np.full((cls.rows, cls.cols), value))

    @classmethod
    def diagonal(cls, values: FixedVector | ArrayLike) -> FixedMatrix:
        """Square matrix with values on the diagonal and zeros elsewhere."""
        if cls.rows != cls.cols:
            raise DimensionMismatch(
                f"{cls.__name__}: diagonal construction needs a square matrix",
                expected=(cls.rows, cls.rows),
                actual=(cls.rows, cls.cols),
            )
        diag = check_array(values, 'values')
        check_shape(diag, (cls.rows,), 'values')
        return cls(np.diag(diag))

    @classmethod
    def parse(cls, text: str) -> FixedMatrix:
        """Read a matrix written by format_matrix()."""
        from pycurves.linalg.formatting import parse_matrix
        return parse_matrix(text, cls)

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # --- Element access ---

    def _position(self, key: Any) -> Any:
        if isinstance(key, (str, Axis)):
            if isinstance(key, Axis):
                key = key.label
            return resolve_matrix_axis(key, self.rows, self.cols)
        if isinstance(key, tuple) and key and all(isinstance(k, Axis) for k in key):
            return resolve_matrix_axis(key, self.rows, self.cols)
        return key

    def __getitem__(self, key: Any) -> Any:
        position = self._position(key)
        if isinstance(position, tuple):
            return self._data[position].item()
        return self._data[position]

    def __setitem__(self, key: Any, value: Any) -> None:
        position = self._position(key)
        if not isinstance(position, tuple):
            row = check_array(value, 'value')
            check_shape(row, (self.cols,), 'value')
            value = row
        self._data[position] = value

    def row(self, index: int) -> FixedVector:
        """Copy of row index as a vector."""
        return _wrap_vector(self._data[index].copy())

    def column(self, index: int) -> FixedVector:
        """Copy of column index as a vector."""
        return _wrap_vector(self._data[:, index].copy())

    def iter_rows(self) -> Iterator[FixedVector]:
        for i in range(self.rows):
            yield self.row(i)

    # --- Container protocol ---

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.ravel().tolist())

    def __reversed__(self) -> Iterator[Any]:
        return iter(self._data.ravel()[::-1].tolist())

    def fill(self, value: Any) -> None:
        """Set every element to value (in place)."""
        self._data.fill(value)

    # --- Copies and conversion ---

    def copy(self) -> FixedMatrix:
        """Independent copy of this matrix."""
        return _wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> FixedMatrix:
        return self.copy()

    def __reduce__(self):
        return (
            _restore_matrix,
            (self.rows, self.cols, self.dtype.str, self._data.tolist()),
        )

    def astype(self, dtype: DTypeLike) -> FixedMatrix:
        """Copy converted to another element type of the same shape."""
        return _wrap(self._data.astype(normalize_dtype(dtype)))

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a 2D numpy array."""
        return self._data.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None):
        if dtype is None:
            return self._data if copy is False else self._data.copy()
        return self._data.astype(dtype)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        if other.shape != self.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # --- Arithmetic ---

    def _operand(self, other: FixedMatrix, op: str) -> NDArray[Any]:
        if other.shape != self.shape:
            raise DimensionMismatch(
                f"Cannot apply '{op}' to matrices of shape {self.shape} and {other.shape}",
                expected=self.shape,
                actual=other.shape,
            )
        return other._data

    def __add__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return _wrap(self._data + self._operand(other, '+'))

    def __sub__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return _wrap(self._data - self._operand(other, '-'))

    def __iadd__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        self._data += self._operand(other, '+=').astype(self.dtype, copy=False)
        return self

    def __isub__(self, other: object) -> FixedMatrix:
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        self._data -= self._operand(other, '-=').astype(self.dtype, copy=False)
        return self

    def __neg__(self) -> FixedMatrix:
        return _wrap(-self._data)

    def __mul__(self, scalar: object) -> FixedMatrix:
        if not is_scalar(scalar):
            return NotImplemented
        return _wrap(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> FixedMatrix:
        if not is_scalar(scalar):
            return NotImplemented
        return _wrap(self._data / scalar)

    def __matmul__(self, other: object) -> FixedMatrix | FixedVector:
        if isinstance(other, FixedMatrix):
            if other.rows != self.cols:
                raise DimensionMismatch(
                    f"Cannot multiply {self.rows}x{self.cols} by "
                    f"{other.rows}x{other.cols}: inner dimensions differ",
                    expected=self.cols,
                    actual=other.rows,
                )
            return _wrap(self._data @ other._data)
        if isinstance(other, FixedVector):
            if other.dim != self.cols:
                raise DimensionMismatch(
                    f"Cannot multiply {self.rows}x{self.cols} matrix by "
                    f"{other.dim}-vector",
                    expected=self.cols,
                    actual=other.dim,
                )
            return _wrap_vector(self._data @ np.asarray(other))
        return NotImplemented

    # --- Text ---

    def __str__(self) -> str:
        from pycurves.linalg.formatting import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()})"


@lru_cache(maxsize=None)
def _matrix_type(rows: int, cols: int, dtype: np.dtype) -> type[FixedMatrix]:
    shape = f"{rows}" if rows == cols else f"{rows}x{cols}"
    name = f"Matrix{shape}{dtype_suffix(dtype)}"
    return type(name, (FixedMatrix,), {
        '__slots__': (),
        '__module__': __name__,
        '__qualname__': name,
        'rows': rows,
        'cols': cols,
        'dtype': dtype,
    })


def matrix_type(
    rows: int,
    cols: int | None = None,
    dtype: DTypeLike = np.float64,
) -> type[FixedMatrix]:
    """
    Concrete matrix type with fixed shape and element type.

    Args:
        rows: Number of rows, >= 1
        cols: Number of columns, >= 1 (defaults to rows)
        dtype: Numeric element type (default float64)

    Returns:
        Cached FixedMatrix subclass; repeated calls return the same class

    Raises:
        ValidationError: If a dimension is < 1 or dtype is not numeric
    """
    rows = check_positive_int(rows, 'rows')
    cols = rows if cols is None else check_positive_int(cols, 'cols')
    return _matrix_type(rows, cols, normalize_dtype(dtype))


def as_matrix(values: ArrayLike, dtype: DTypeLike | None = np.float64) -> FixedMatrix:
    """
    Build a matrix whose shape is taken from a nested (2D) input.

    Raises:
        DimensionMismatch: If values is not a non-empty 2D array-like
    """
    data = check_array(values, 'values', dtype=dtype)
    if data.ndim != 2 or data.size == 0:
        raise DimensionMismatch(
            f"values: expected a non-empty 2D array, got shape {data.shape}",
            actual=data.shape,
        )
    return matrix_type(data.shape[0], data.shape[1], data.dtype)(data)


def _wrap(data: NDArray[Any]) -> FixedMatrix:
    """Adopt an already-validated 2D array without copying."""
    result = object.__new__(matrix_type(data.shape[0], data.shape[1], data.dtype))
    result._data = data
    return result


def _restore_matrix(rows: int, cols: int, dtype: str, values: list) -> FixedMatrix:
    return matrix_type(rows, cols, dtype)(values)


mat2 = matrix_type(2)
mat3 = matrix_type(3)
mat4 = matrix_type(4)

mat2f = matrix_type(2, dtype=np.float32)
mat3f = matrix_type(3, dtype=np.float32)
mat4f = matrix_type(4, dtype=np.float32)

mat2i = matrix_type(2, dtype=np.int64)
mat3i = matrix_type(3, dtype=np.int64)
mat4i = matrix_type(4, dtype=np.int64)
