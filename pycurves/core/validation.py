"""
Input validation utilities for PyCurves.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pycurves.core.exceptions import (
    DimensionMismatch,
    InvalidParameter,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target element type. If None, numeric input keeps its dtype.
            Only conversions within the same kind or to a wider kind are
            made (int -> float, float64 -> float32); float -> int is refused.

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array,
            or converting it to dtype would drop the fractional part
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if dtype is not None and result.dtype != np.dtype(dtype):
        if not np.can_cast(result.dtype, dtype, casting='same_kind'):
            raise ValidationError(
                f"{name}: cannot convert {result.dtype} to {np.dtype(dtype)} without loss"
            )
        result = result.astype(dtype)

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_shape(
    array: NDArray[Any],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the specified shape.

    Args:
        array: Array to check
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionMismatch: If array has a different shape
    """
    if array.shape != tuple(shape):
        raise DimensionMismatch(
            f"{name}: expected shape {tuple(shape)}, got {array.shape}",
            expected=tuple(shape),
            actual=array.shape,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or is NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_non_negative(value: Any, name: str) -> float:
    """
    Verify a curve shape parameter is a finite number >= 0.

    Exactly zero is accepted (degenerate but physically valid curve).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        InvalidParameter: If value is negative, NaN, Inf or not a number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(
            f"Curve is not physically correct: {name} must be a real number, "
            f"got {type(value).__name__}",
            parameter=name,
        )
    result = float(value)
    if not math.isfinite(result) or result < 0.0:
        raise InvalidParameter(
            f"Curve is not physically correct: {name} must be finite and >= 0, "
            f"got {result}",
            parameter=name,
            value=result,
        )
    return result
