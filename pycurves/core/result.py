"""
Generic result container for PyCurves batch computations.

The Result class provides a standardized envelope for runs that produce
more than a single value (e.g. the demo driver). This enables shared
tooling for timing and reporting while letting each caller define its own
parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (seed, counts, worker count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed payload
        info: Structured metadata (seed, number of curves, workers)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result

    Examples:
        >>> Result(
        ...     params=DemoParams(...),
        ...     info={'seed': 42, 'n_curves': 250},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='threaded_reduce'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
