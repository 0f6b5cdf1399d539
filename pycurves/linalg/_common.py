"""
Helpers shared by the fixed-size vector and matrix types.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pycurves.core.exceptions import ValidationError


def normalize_dtype(dtype: DTypeLike) -> np.dtype:
    """Convert a dtype-like to np.dtype, rejecting non-numeric types."""
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a valid numpy dtype: {dtype!r}") from e
    if not np.issubdtype(result, np.number):
        raise ValidationError(f"dtype: non-numeric dtype {result}, expected numeric")
    return result


def dtype_suffix(dtype: np.dtype) -> str:
    """Short type-name suffix: '' for float64, 'f' for float32, 'i' for int64."""
    if dtype == np.float64:
        return ''
    if dtype == np.float32:
        return 'f'
    if dtype == np.int64:
        return 'i'
    return f'_{dtype.name}'


def is_scalar(value: Any) -> bool:
    """True for real numbers usable as scalar multipliers (bool excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
