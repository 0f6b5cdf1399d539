"""
Curve variants: Circle, Ellipse and Helix.

Each variant is an immutable mapping t -> (position, velocity) in 3D:

    Circle(R)       position (R cos t, R sin t, 0)
                    velocity (-R sin t, R cos t, 0)
    Ellipse(Rx, Ry) position (Rx cos t, Ry sin t, 0)
                    velocity (-Rx sin t, Ry cos t, 0)
    Helix(R, h)     position (R cos t, R sin t, h t)
                    velocity (-R sin t, R cos t, h)

Both results are multiplied by the curve's 3x3 linear operator (identity
unless the builder was given one). Angles are in radians and t may be any
finite real number.

Instances are created only by pycurves.curves.builder, which validates the
shape parameters first; calling a variant class directly raises TypeError.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurves.core.exceptions import DimensionMismatch
from pycurves.core.validation import check_array, check_finite, check_finite_scalar
from pycurves.curves._common import CurveKind, _BUILD_TOKEN
from pycurves.linalg.matrix import FixedMatrix
from pycurves.linalg.vector import FixedVector, vec3


class ParametricCurve:
    """
    Behaviour shared by every variant.

    Subclasses provide the raw (untransformed) parametric components in
    _raw_position() and _raw_velocity(); both must work elementwise for a
    float or a 1D array of parameters.
    """
    kind: ClassVar[CurveKind]
    param_names: ClassVar[tuple[str, ...]]

    _operator: FixedMatrix

    # _token is an InitVar of each variant; it is never stored
    def __post_init__(self, _token: object) -> None:
        if _token is not _BUILD_TOKEN:
            raise TypeError(
                f"{type(self).__name__} cannot be constructed directly; "
                f"use pycurves.curves.make_curve() or make_{self.kind.name.lower()}()"
            )

    def _raw_position(self, t: Any) -> tuple[Any, Any, Any]:
        raise NotImplementedError

    def _raw_velocity(self, t: Any) -> tuple[Any, Any, Any]:
        raise NotImplementedError

    # --- Evaluation ---

    def evaluate(self, t: float) -> FixedVector:
        """Position at parameter t."""
        t = check_finite_scalar(t, 't')
        return self._operator @ vec3(self._raw_position(t))

    def derivative(self, t: float) -> FixedVector:
        """Velocity (d position / dt) at parameter t."""
        t = check_finite_scalar(t, 't')
        return self._operator @ vec3(self._raw_velocity(t))

    def sample(self, ts: ArrayLike, *, derivative: bool = False) -> NDArray[np.floating[Any]]:
        """
        Evaluate at many parameters at once.

        Args:
            ts: 1D array-like of parameters
            derivative: Return velocities instead of positions

        Returns:
            Array of shape (len(ts), 3), one point (or velocity) per row

        Raises:
            ValidationError: If ts holds NaN or Inf
            DimensionMismatch: If ts is not 1D
        """
        ts = check_array(ts, 'ts', dtype=np.float64)
        check_finite(ts, 'ts')
        if ts.ndim != 1:
            raise DimensionMismatch(
                f"ts: expected 1D array of parameters, got {ts.ndim}D",
                expected=1,
                actual=ts.ndim,
            )
        raw_fn = self._raw_velocity if derivative else self._raw_position
        raw = np.column_stack(np.broadcast_arrays(*raw_fn(ts)))
        return raw @ np.asarray(self._operator).T

    # --- Accessors ---

    @property
    def linear_operator(self) -> FixedMatrix:
        """Copy of the 3x3 operator applied to every point and velocity."""
        return self._operator.copy()

    @property
    def parameters(self) -> dict[str, float]:
        """Shape parameters by name, e.g. {'rx': 3.0, 'ry': 2.0}."""
        return {name: getattr(self, name) for name in self.param_names}


@dataclass(frozen=True, eq=False)
class Circle(ParametricCurve):
    """Circle of the given radius in the xy plane, centred at the origin."""
    kind: ClassVar[CurveKind] = CurveKind.CIRCLE
    param_names: ClassVar[tuple[str, ...]] = ('radius',)

    _radius: float
    _operator: FixedMatrix
    _token: InitVar[object] = None

    @property
    def radius(self) -> float:
        return self._radius

    def _raw_position(self, t):
        return (self._radius * np.cos(t), self._radius * np.sin(t), np.zeros_like(t))

    def _raw_velocity(self, t):
        return (self._radius * (-np.sin(t)), self._radius * np.cos(t), np.zeros_like(t))


@dataclass(frozen=True, eq=False)
class Ellipse(ParametricCurve):
    """Axis-aligned ellipse with semi-axes rx (along x) and ry (along y)."""
    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE
    param_names: ClassVar[tuple[str, ...]] = ('rx', 'ry')

    _rx: float
    _ry: float
    _operator: FixedMatrix
    _token: InitVar[object] = None

    @property
    def rx(self) -> float:
        return self._rx

    @property
    def ry(self) -> float:
        return self._ry

    def _raw_position(self, t):
        return (self._rx * np.cos(t), self._ry * np.sin(t), np.zeros_like(t))

    def _raw_velocity(self, t):
        return (self._rx * (-np.sin(t)), self._ry * np.cos(t), np.zeros_like(t))


@dataclass(frozen=True, eq=False)
class Helix(ParametricCurve):
    """
    Circular helix around the z axis.

    Rises by pitch per radian of t; a negative pitch gives a left-handed
    helix.
    """
    kind: ClassVar[CurveKind] = CurveKind.HELIX
    param_names: ClassVar[tuple[str, ...]] = ('radius', 'pitch')

    _radius: float
    _pitch: float
    _operator: FixedMatrix
    _token: InitVar[object] = None

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def pitch(self) -> float:
        return self._pitch

    def _raw_position(self, t):
        return (self._radius * np.cos(t), self._radius * np.sin(t), self._pitch * t)

    def _raw_velocity(self, t):
        return (self._radius * (-np.sin(t)), self._radius * np.cos(t), self._pitch * np.ones_like(t))


VARIANTS: dict[CurveKind, type[ParametricCurve]] = {
    CurveKind.CIRCLE: Circle,
    CurveKind.ELLIPSE: Ellipse,
    CurveKind.HELIX: Helix,
}
