"""
Validated construction of curves.

The builder is the only way to obtain a curve. Explicit factories check
every shape parameter before constructing the variant; the randomized
factories draw parameters that are valid by construction.

    make_circle(5.0)
    make_ellipse(3.0, 2.0, linear_operator=rotate_euler(vec3([0, 0, 0.5])))
    make_helix(1.0, 2.0)
    make_curve(CurveKind.HELIX, 1.0, -0.5)
    make_random_curve(rng=np.random.default_rng(7))

Randomness always comes from the rng argument: a numpy Generator, an int
seed, or None for a fresh generator seeded from OS entropy. There is no
module-level generator. A single Generator is not safe to share between
threads without locking; give each thread its own (SeedSequence.spawn).
"""

from __future__ import annotations

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike

from pycurves.core.exceptions import InvalidParameter, ValidationError
from pycurves.core.validation import check_array, check_non_negative, check_shape
from pycurves.curves._common import (
    CurveKind,
    RANDOM_PARAM_HIGH,
    RANDOM_PARAM_LOW,
    _BUILD_TOKEN,
)
from pycurves.curves.shapes import VARIANTS, Circle, Ellipse, Helix, ParametricCurve
from pycurves.linalg.matrix import FixedMatrix, mat3
from pycurves.linalg.operations import det

RandomSource = np.random.Generator | int | None

# Shape parameters whose sign is free; all others must be >= 0
_SIGNED_PARAMS = frozenset({'pitch'})


def _resolve_rng(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or (isinstance(rng, (int, np.integer)) and not isinstance(rng, bool)):
        return np.random.default_rng(rng)
    raise ValidationError(
        f"rng: expected numpy Generator, int seed or None, got {type(rng).__name__}"
    )


def _resolve_kind(kind: CurveKind | int | str) -> CurveKind:
    if isinstance(kind, str):
        try:
            return CurveKind[kind.upper()]
        except KeyError:
            pass
    else:
        try:
            return CurveKind(kind)
        except ValueError:
            pass
    names = ', '.join(k.name.lower() for k in CurveKind)
    raise ValidationError(f"Unknown curve kind {kind!r}, expected one of: {names}")


def _variant_for(kind: CurveKind) -> type[ParametricCurve]:
    variant = VARIANTS.get(kind)
    if variant is None:
        # CurveKind and VARIANTS are defined together; reaching this is a bug
        raise RuntimeError(f"No curve variant registered for {kind!r}")
    return variant


def _check_shape_param(name: str, value) -> float:
    if name not in _SIGNED_PARAMS:
        return check_non_negative(value, name)

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(
            f"Curve is not physically correct: {name} must be a real number, "
            f"got {type(value).__name__}",
            parameter=name,
        )
    result = float(value)
    if not np.isfinite(result):
        raise InvalidParameter(
            f"Curve is not physically correct: {name} must be finite, got {result}",
            parameter=name,
            value=result,
        )
    return result


def _check_operator(linear_operator: FixedMatrix | ArrayLike | None) -> FixedMatrix:
    if linear_operator is None:
        return mat3()

    data = check_array(linear_operator, 'linear_operator', dtype=np.float64)
    if data.ndim == 1:
        check_shape(data, (9,), 'linear_operator')
    else:
        check_shape(data, (3, 3), 'linear_operator')
    operator = mat3(data)

    if det(operator) == 0.0:
        warnings.warn(
            "linear_operator is singular; the curve is flattened onto a plane or line",
            RuntimeWarning,
            # caller -> make_* -> _build -> _check_operator
            stacklevel=4,
        )
    return operator


# ═══════════════════════════════════════════════════════════════════════
# Explicit construction
# ═══════════════════════════════════════════════════════════════════════


def make_curve(
    kind: CurveKind | int | str,
    *params: float,
    linear_operator: FixedMatrix | ArrayLike | None = None,
) -> ParametricCurve:
    """
    Construct a curve of the given kind after validating its parameters.

    Parameters
    ----------
    kind : CurveKind, int or str
        CurveKind member, its value (0, 1, 2) or name ('circle', ...).
    *params : float
        Shape parameters in the variant's order: circle (radius),
        ellipse (rx, ry), helix (radius, pitch).
    linear_operator : FixedMatrix or array-like, optional
        3x3 matrix applied to every point and velocity. Defaults to the
        identity. Its entries are not constrained.

    Returns
    -------
    The constructed Circle, Ellipse or Helix.

    Raises
    ------
    InvalidParameter
        If a radius or semi-axis is negative or not finite, or the helix
        pitch is not finite.
    DimensionMismatch
        If linear_operator is not 3x3.
    ValidationError
        If kind is unknown or the number of parameters is wrong.
    """
    return _build(_resolve_kind(kind), params, linear_operator)


def _build(kind: CurveKind, params, linear_operator) -> ParametricCurve:
    variant = _variant_for(kind)

    if len(params) != len(variant.param_names):
        raise ValidationError(
            f"{kind.name.lower()} takes {len(variant.param_names)} shape "
            f"parameter(s) {variant.param_names}, got {len(params)}"
        )
    values = [
        _check_shape_param(name, value)
        for name, value in zip(variant.param_names, params)
    ]
    operator = _check_operator(linear_operator)
    return variant(*values, _operator=operator, _token=_BUILD_TOKEN)


def make_circle(
    radius: float,
    linear_operator: FixedMatrix | ArrayLike | None = None,
) -> Circle:
    """Circle of the given radius (>= 0)."""
    return _build(CurveKind.CIRCLE, (radius,), linear_operator)


def make_ellipse(
    rx: float,
    ry: float,
    linear_operator: FixedMatrix | ArrayLike | None = None,
) -> Ellipse:
    """Ellipse with semi-axes rx, ry (both >= 0)."""
    return _build(CurveKind.ELLIPSE, (rx, ry), linear_operator)


def make_helix(
    radius: float,
    pitch: float,
    linear_operator: FixedMatrix | ArrayLike | None = None,
) -> Helix:
    """Helix of the given radius (>= 0) and pitch (any sign)."""
    return _build(CurveKind.HELIX, (radius, pitch), linear_operator)


# ═══════════════════════════════════════════════════════════════════════
# Randomized construction
# ═══════════════════════════════════════════════════════════════════════


def _draw(rng: np.random.Generator, size: int | None = None):
    # integers() excludes the upper bound
    return rng.integers(RANDOM_PARAM_LOW, RANDOM_PARAM_HIGH + 1, size=size)


def _random_curve(rng: np.random.Generator, operator: FixedMatrix) -> ParametricCurve:
    kind = CurveKind(int(rng.integers(len(CurveKind))))
    variant = _variant_for(kind)
    values = [float(v) for v in _draw(rng, size=len(variant.param_names))]
    return variant(*values, _operator=operator, _token=_BUILD_TOKEN)


def make_random_curve(rng: RandomSource = None) -> ParametricCurve:
    """
    Curve of a uniformly chosen kind with integer shape parameters drawn
    uniformly from [RANDOM_PARAM_LOW, RANDOM_PARAM_HIGH].

    Args:
        rng: numpy Generator, int seed, or None for a fresh generator

    Returns:
        Circle, Ellipse or Helix with the identity operator
    """
    rng = _resolve_rng(rng)
    return _random_curve(rng, mat3())


def make_random_curve_with_random_transform(rng: RandomSource = None) -> ParametricCurve:
    """
    Like make_random_curve(), with a 3x3 operator whose nine entries are
    independent integers from [RANDOM_PARAM_LOW, RANDOM_PARAM_HIGH].

    Args:
        rng: numpy Generator, int seed, or None for a fresh generator
    """
    rng = _resolve_rng(rng)
    operator = mat3(_draw(rng, size=9).astype(np.float64))
    return _random_curve(rng, operator)
