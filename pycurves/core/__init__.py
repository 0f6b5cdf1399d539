"""
Core infrastructure for PyCurves.

This module provides shared abstractions and utilities used by the linear
algebra engine (linalg), the curve family (curves) and the demo driver.

Key components:
    protocols: Curve capability protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pycurves.core.exceptions import (
    PyCurvesError,
    ValidationError,
    DimensionMismatch,
    InvalidAxisKey,
    InvalidParameter,
    NumericalError,
    DegenerateInput,
)
from pycurves.core.protocols import Curve
from pycurves.core.result import Result

__all__ = [
    # Protocols
    "Curve",
    # Result
    "Result",
    # Exceptions
    "PyCurvesError",
    "ValidationError",
    "DimensionMismatch",
    "InvalidAxisKey",
    "InvalidParameter",
    "NumericalError",
    "DegenerateInput",
]
