"""
PyCurves: fixed-size linear algebra and parametric space curves.

Submodules:
    linalg: Fixed-dimension vectors and matrices, named axes, transforms
    curves: Circle, Ellipse and Helix with a validating builder
    demo: Random-batch demonstration driver
"""

__version__ = "0.1.0"

from pycurves import linalg
from pycurves import curves

__all__ = [
    "__version__",
    "linalg",
    "curves",
]
