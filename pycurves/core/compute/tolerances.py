"""
Tolerance tiers for numerical validation.

Equality of vectors and matrices is always exact; these tiers are only for
checks that compare results of different floating-point paths:
- FP64 exact algebra: identities such as R @ R.T == I, det(A @ B)
- Trig evaluation: curve points near zero crossings of sin/cos
- Finite differences: numeric derivative vs. analytic velocity

Used by the test suite and by callers that need to compare curve output.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Algebraic identities on small double-precision matrices
FP64_ALGEBRA = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64_algebra',
    description='double precision, small fixed-size matrices',
)

# Curve evaluation; sin(pi) etc. land near, not on, zero
FP64_TRIG = ToleranceTier(
    rtol=1e-12,
    atol=1e-9,
    name='fp64_trig',
    description='double precision trigonometric evaluation',
)

# Central finite differences with step 1e-6
FINITE_DIFFERENCE = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='finite_difference',
    description='central difference, h = 1e-6',
)

# Recommended step for central differences in FINITE_DIFFERENCE checks
FINITE_DIFFERENCE_STEP = 1e-6
