"""
Exception hierarchy for PyCurves.

All exceptions inherit from PyCurvesError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyCurvesError(Exception):
    """Base exception for all PyCurves errors."""
    pass


class ValidationError(PyCurvesError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatch(ValidationError):
    """
    Element count or operand shapes disagree with the declared dimensions.

    Raised when an explicit element list does not match the fixed dimension
    of a vector or matrix type, or when two operands cannot be combined
    (e.g. matrix product with incompatible inner dimensions).

    Attributes:
        expected: Expected dimension or shape, if known
        actual: Dimension or shape that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidAxisKey(ValidationError):
    """
    Symbolic axis name is not recognised.

    Raised by the axis accessor before any element is read or written,
    either because the name is unknown or because it addresses a component
    outside the vector/matrix.

    Attributes:
        key: The rejected key
        valid_keys: Keys accepted by the object that raised
    """

    def __init__(
        self,
        message: str,
        key: Any = None,
        valid_keys: tuple[str, ...] | None = None,
    ):
        super().__init__(message)
        self.key = key
        self.valid_keys = valid_keys


class InvalidParameter(ValidationError):
    """
    Curve shape parameter is not physically valid.

    Raised by the curve builder when a shape parameter (radius, semi-axis)
    is negative or not finite. Never silently clamped.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(PyCurvesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInput(NumericalError):
    """
    Operation is undefined for the given input.

    Raised instead of propagating NaN/Inf, e.g. when normalizing a
    zero-length vector.

    Attributes:
        operation: Name of the operation that failed
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
