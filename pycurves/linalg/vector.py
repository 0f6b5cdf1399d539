"""
Fixed-length numeric vectors.

A concrete vector type fixes both its dimension and its element type::

    Vec3 = vector_type(3)            # float64, also exported as vec3
    v = Vec3([1.0, 2.0, 3.0])
    v["x"], v[Axis.Y], v.z           # symbolic access
    v += Vec3.filled(1.0)            # in-place arithmetic

Types are cached, so ``vector_type(3) is vector_type(3)``. Constructing a
vector from an explicit list whose length differs from the type's dimension
raises DimensionMismatch. Instances own their storage: copies never alias,
and every arithmetic operator returns a new vector (except the in-place
``+=`` and ``-=``).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pycurves.core.exceptions import DimensionMismatch
from pycurves.core.validation import check_array, check_positive_int
from pycurves.linalg._common import dtype_suffix, is_scalar, normalize_dtype
from pycurves.linalg.axes import Axis, resolve_vector_axis


class FixedVector:
    """
    Ordered, fixed-length tuple of numeric elements.

    Do not instantiate FixedVector itself; use a concrete type returned by
    vector_type() (or one of the aliases vec2 ... vec4i).

    Construction:
        V()               all zeros
        V(values)         exactly V.dim values, in order
        V.filled(value)   every component set to value
        V.parse(text)     whitespace-separated components

    Float input to an integer type raises ValidationError instead of
    truncating; astype() is the explicit conversion.
    """
    __slots__ = ('_data',)

    dim: ClassVar[int] = 0
    dtype: ClassVar[np.dtype] = np.dtype(np.float64)

    # Mutable (element assignment, +=), so not hashable
    __hash__ = None  # type: ignore[assignment]

    # numpy scalars defer to __rmul__ instead of converting via __array__
    __array_ufunc__ = None

    def __init__(self, values: ArrayLike | None = None):
        cls = type(self)
        if cls.dim == 0:
            raise TypeError(
                "FixedVector is abstract; create a concrete type with vector_type(dim)"
            )
        if values is None:
            self._data = np.zeros(cls.dim, dtype=cls.dtype)
            return

        data = check_array(values, 'values', dtype=cls.dtype)
        if data.ndim != 1 or data.shape[0] != cls.dim:
            raise DimensionMismatch(
                f"{cls.__name__}: expected {cls.dim} elements, got {data.size}",
                expected=cls.dim,
                actual=data.size,
            )
        self._data = data.copy()

    # --- Alternative constructors ---

    @classmethod
    def filled(cls, value: float) -> FixedVector:
        """Vector with every component equal to value."""
        return cls(np.full(cls.dim, value))

    @classmethod
    def parse(cls, text: str) -> FixedVector:
        """Read a vector written by format_vector()."""
        from pycurves.linalg.formatting import parse_vector
        return parse_vector(text, cls)

    # --- Element access ---

    def _index(self, key: Any) -> int:
        if isinstance(key, (str, Axis)):
            return resolve_vector_axis(key, self.dim)
        return key

    def __getitem__(self, key: int | str | Axis) -> Any:
        return self._data[self._index(key)].item()

    def __setitem__(self, key: int | str | Axis, value: Any) -> None:
        self._data[self._index(key)] = value

    @property
    def x(self) -> Any:
        return self['x']

    @x.setter
    def x(self, value: Any) -> None:
        self['x'] = value

    @property
    def y(self) -> Any:
        return self['y']

    @y.setter
    def y(self, value: Any) -> None:
        self['y'] = value

    @property
    def z(self) -> Any:
        return self['z']

    @z.setter
    def z(self, value: Any) -> None:
        self['z'] = value

    @property
    def w(self) -> Any:
        return self['w']

    @w.setter
    def w(self, value: Any) -> None:
        self['w'] = value

    # --- Container protocol ---

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.tolist())

    def __reversed__(self) -> Iterator[Any]:
        return iter(self._data[::-1].tolist())

    def fill(self, value: Any) -> None:
        """Set every component to value (in place)."""
        self._data.fill(value)

    # --- Copies and conversion ---

    def copy(self) -> FixedVector:
        """Independent copy of this vector."""
        return _wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> FixedVector:
        return self.copy()

    def __reduce__(self):
        return (_restore_vector, (self.dim, self.dtype.str, self._data.tolist()))

    def astype(self, dtype: DTypeLike) -> FixedVector:
        """Copy converted to another element type of the same dimension."""
        return _wrap(self._data.astype(normalize_dtype(dtype)))

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the components as a 1D numpy array."""
        return self._data.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None):
        if dtype is None:
            return self._data if copy is False else self._data.copy()
        return self._data.astype(dtype)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        if other.dim != self.dim:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # --- Arithmetic ---

    def _operand(self, other: FixedVector, op: str) -> NDArray[Any]:
        if other.dim != self.dim:
            raise DimensionMismatch(
                f"Cannot apply '{op}' to vectors of dimension {self.dim} and {other.dim}",
                expected=self.dim,
                actual=other.dim,
            )
        return other._data

    def __add__(self, other: object) -> FixedVector:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return _wrap(self._data + self._operand(other, '+'))

    def __sub__(self, other: object) -> FixedVector:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return _wrap(self._data - self._operand(other, '-'))

    def __iadd__(self, other: object) -> FixedVector:
        if not isinstance(other, FixedVector):
            return NotImplemented
        self._data += self._operand(other, '+=').astype(self.dtype, copy=False)
        return self

    def __isub__(self, other: object) -> FixedVector:
        if not isinstance(other, FixedVector):
            return NotImplemented
        self._data -= self._operand(other, '-=').astype(self.dtype, copy=False)
        return self

    def __neg__(self) -> FixedVector:
        return _wrap(-self._data)

    def __mul__(self, scalar: object) -> FixedVector:
        if not is_scalar(scalar):
            return NotImplemented
        return _wrap(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> FixedVector:
        if not is_scalar(scalar):
            return NotImplemented
        return _wrap(self._data / scalar)

    # --- Text ---

    def __str__(self) -> str:
        from pycurves.linalg.formatting import format_vector
        return format_vector(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()})"


@lru_cache(maxsize=None)
def _vector_type(dim: int, dtype: np.dtype) -> type[FixedVector]:
    name = f"Vector{dim}{dtype_suffix(dtype)}"
    return type(name, (FixedVector,), {
        '__slots__': (),
        '__module__': __name__,
        '__qualname__': name,
        'dim': dim,
        'dtype': dtype,
    })


def vector_type(dim: int, dtype: DTypeLike = np.float64) -> type[FixedVector]:
    """
    Concrete vector type with fixed dimension and element type.

    Args:
        dim: Number of components, >= 1
        dtype: Numeric element type (default float64)

    Returns:
        Cached FixedVector subclass; repeated calls return the same class

    Raises:
        ValidationError: If dim < 1 or dtype is not numeric
    """
    return _vector_type(check_positive_int(dim, 'dim'), normalize_dtype(dtype))


def as_vector(values: ArrayLike, dtype: DTypeLike | None = np.float64) -> FixedVector:
    """
    Build a vector whose dimension is taken from the input length.

    Args:
        values: 1D array-like with at least one element
        dtype: Element type; None keeps the dtype of the input

    Returns:
        Instance of vector_type(len(values), dtype)

    Raises:
        DimensionMismatch: If values is not 1D or is empty
    """
    data = check_array(values, 'values', dtype=dtype)
    if data.ndim != 1 or data.size == 0:
        raise DimensionMismatch(
            f"values: expected a non-empty 1D sequence, got shape {data.shape}",
            actual=data.shape,
        )
    return vector_type(data.shape[0], data.dtype)(data)


def _wrap(data: NDArray[Any]) -> FixedVector:
    """Adopt an already-validated 1D array without copying."""
    result = object.__new__(vector_type(data.shape[0], data.dtype))
    result._data = data
    return result


def _restore_vector(dim: int, dtype: str, values: list) -> FixedVector:
    return vector_type(dim, dtype)(values)


vec2 = vector_type(2)
vec3 = vector_type(3)
vec4 = vector_type(4)

vec2f = vector_type(2, np.float32)
vec3f = vector_type(3, np.float32)
vec4f = vector_type(4, np.float32)

vec2i = vector_type(2, np.int64)
vec3i = vector_type(3, np.int64)
vec4i = vector_type(4, np.int64)
