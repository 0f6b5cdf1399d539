"""
Core protocols for PyCurves.

These define structural interfaces that curve implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
callers such as the demo driver depend only on the evaluation capability,
not on the concrete variant classes.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Total functions: evaluation is defined for every real parameter
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pycurves.linalg.vector import FixedVector


@runtime_checkable
class Curve(Protocol):
    """
    Capability interface of a parametric space curve.

    A curve is a pure mapping ``t -> (position, velocity)``. Implementations
    are immutable; evaluating a curve never changes it, so one instance may
    be shared freely between holders and threads.
    """

    def evaluate(self, t: float) -> FixedVector:
        """
        Position on the curve at parameter t (radians).

        Args:
            t: Curve parameter, any real number

        Returns:
            3-vector with the (transformed) point
        """
        ...

    def derivative(self, t: float) -> FixedVector:
        """
        Velocity (first derivative with respect to t) at parameter t.

        Args:
            t: Curve parameter, any real number

        Returns:
            3-vector with the (transformed) tangent
        """
        ...
