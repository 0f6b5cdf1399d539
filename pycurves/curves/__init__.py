"""
Parametric curves in 3D.

Circle, Ellipse and Helix evaluate a point and its velocity at a parameter
t, each through an optional 3x3 linear operator. Curves are obtained only
from the builder functions, which validate shape parameters.

Public API:
    make_circle(radius, linear_operator=None)
    make_ellipse(rx, ry, linear_operator=None)
    make_helix(radius, pitch, linear_operator=None)
    make_curve(kind, *params, linear_operator=None)
    make_random_curve(rng=None)
    make_random_curve_with_random_transform(rng=None)
"""

from pycurves.curves._common import CurveKind, RANDOM_PARAM_LOW, RANDOM_PARAM_HIGH
from pycurves.curves.shapes import ParametricCurve, Circle, Ellipse, Helix
from pycurves.curves.builder import (
    make_curve,
    make_circle,
    make_ellipse,
    make_helix,
    make_random_curve,
    make_random_curve_with_random_transform,
)

__all__ = [
    "CurveKind",
    "RANDOM_PARAM_LOW",
    "RANDOM_PARAM_HIGH",
    "ParametricCurve",
    "Circle",
    "Ellipse",
    "Helix",
    "make_curve",
    "make_circle",
    "make_ellipse",
    "make_helix",
    "make_random_curve",
    "make_random_curve_with_random_transform",
]
