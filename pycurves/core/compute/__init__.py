"""
Shared compute infrastructure for PyCurves.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for floating-point comparisons
"""

from pycurves.core.compute.timing import Timer
from pycurves.core.compute.tolerances import (
    ToleranceTier,
    FP64_ALGEBRA,
    FP64_TRIG,
    FINITE_DIFFERENCE,
    FINITE_DIFFERENCE_STEP,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP64_ALGEBRA",
    "FP64_TRIG",
    "FINITE_DIFFERENCE",
    "FINITE_DIFFERENCE_STEP",
]
