"""
Fixed-size linear algebra.

Small, dimension-parameterized vectors and matrices with named-axis access
and the geometric operations used by the curve family.

Public API:
    vector_type(dim), matrix_type(rows, cols)  - concrete fixed-size types
    vec2 ... vec4i, mat2 ... mat4i              - ready-made aliases
    det, cross, dot, length, normalize          - geometry
    transpose, minor, shrink, extend            - structure
    rotate_euler, scale, translation, basis_change - transforms
    format_vector, parse_vector, ...            - text representation
"""

from pycurves.linalg.axes import Axis, resolve_matrix_axis, resolve_vector_axis
from pycurves.linalg.vector import (
    FixedVector,
    vector_type,
    as_vector,
    vec2, vec3, vec4,
    vec2f, vec3f, vec4f,
    vec2i, vec3i, vec4i,
)
from pycurves.linalg.matrix import (
    FixedMatrix,
    matrix_type,
    as_matrix,
    mat2, mat3, mat4,
    mat2f, mat3f, mat4f,
    mat2i, mat3i, mat4i,
)
from pycurves.linalg.operations import (
    rad,
    deg,
    dot,
    length,
    normalize,
    cross,
    transpose,
    minor,
    det,
    shrink,
    extend,
    basis_change,
    rotate_euler,
    scale,
    translation,
)
from pycurves.linalg.formatting import (
    format_vector,
    format_matrix,
    parse_vector,
    parse_matrix,
)

__all__ = [
    # Axes
    "Axis",
    "resolve_vector_axis",
    "resolve_matrix_axis",
    # Vectors
    "FixedVector",
    "vector_type",
    "as_vector",
    "vec2", "vec3", "vec4",
    "vec2f", "vec3f", "vec4f",
    "vec2i", "vec3i", "vec4i",
    # Matrices
    "FixedMatrix",
    "matrix_type",
    "as_matrix",
    "mat2", "mat3", "mat4",
    "mat2f", "mat3f", "mat4f",
    "mat2i", "mat3i", "mat4i",
    # Operations
    "rad",
    "deg",
    "dot",
    "length",
    "normalize",
    "cross",
    "transpose",
    "minor",
    "det",
    "shrink",
    "extend",
    "basis_change",
    "rotate_euler",
    "scale",
    "translation",
    # Text
    "format_vector",
    "format_matrix",
    "parse_vector",
    "parse_matrix",
]
