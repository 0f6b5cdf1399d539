"""
DemoDesign: configuration for the demonstration run.

Holds the validated inputs of run_demo(). Follows the Design pattern used
across the package: immutable after construction, built through a
validating classmethod.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

from pycurves.core.exceptions import ValidationError
from pycurves.core.validation import check_finite_scalar, check_positive_int

# When n_curves is not given, the batch size is drawn uniformly from
# [DEMO_MIN_CURVES, DEMO_MAX_CURVES], both ends included.
DEMO_MIN_CURVES: Final[int] = 100
DEMO_MAX_CURVES: Final[int] = 1000

DEFAULT_PARAMETER: Final[float] = math.pi / 4
DEFAULT_WORKERS: Final[int] = 4


@dataclass(frozen=True)
class DemoDesign:
    """
    Demo configuration.

    Construction:
        DemoDesign.build(seed=42)
        DemoDesign.build(seed=42, n_curves=250, t=0.5, n_workers=8)
    """
    _seed: int | None
    _n_curves: int | None
    _t: float
    _n_workers: int

    @classmethod
    def build(
        cls,
        *,
        seed: int | None = None,
        n_curves: int | None = None,
        t: float = DEFAULT_PARAMETER,
        n_workers: int = DEFAULT_WORKERS,
    ) -> DemoDesign:
        """
        Validate and wrap demo inputs.

        Parameters
        ----------
        seed : int, optional
            Seed for numpy.random.default_rng. None draws fresh OS entropy.
        n_curves : int, optional
            Number of random curves. None draws it from
            [DEMO_MIN_CURVES, DEMO_MAX_CURVES] with the seeded generator.
        t : float
            Parameter at which every curve is evaluated.
        n_workers : int
            Thread count for the radius reduction.
        """
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, int):
                raise ValidationError(f"seed: expected int or None, got {type(seed).__name__}")
            if seed < 0:
                raise ValidationError(f"seed: must be >= 0, got {seed}")
        if n_curves is not None:
            n_curves = check_positive_int(n_curves, 'n_curves')
        t = check_finite_scalar(t, 't')
        n_workers = check_positive_int(n_workers, 'n_workers')
        return cls(_seed=seed, _n_curves=n_curves, _t=t, _n_workers=n_workers)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def n_curves(self) -> int | None:
        """Requested batch size, or None when it is drawn at run time."""
        return self._n_curves

    @property
    def t(self) -> float:
        return self._t

    @property
    def n_workers(self) -> int:
        return self._n_workers
