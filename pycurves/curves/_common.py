"""
Shared definitions for the curve family.

CurveKind enumerates the closed set of variants. The range constants
configure the randomized builder functions.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class CurveKind(IntEnum):
    """Closed set of curve variants."""
    CIRCLE = 0
    ELLIPSE = 1
    HELIX = 2


# Randomized shape parameters and operator entries are uniform integers in
# [RANDOM_PARAM_LOW, RANDOM_PARAM_HIGH], both ends included.
RANDOM_PARAM_LOW: Final[int] = 1
RANDOM_PARAM_HIGH: Final[int] = 50

# Capability token: variant constructors accept only this object, and only
# the builder module passes it.
_BUILD_TOKEN: Final[object] = object()
