"""
Demo driver.

Generates a batch of random curves, evaluates each at one parameter,
collects the circles sorted by radius and sums their radii in parallel.
Consumes only the public curve API.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from pycurves.core.compute.timing import Timer
from pycurves.core.result import Result
from pycurves.core.validation import check_positive_int
from pycurves.curves.builder import make_random_curve
from pycurves.curves.shapes import Circle
from pycurves.demo.design import (
    DEFAULT_PARAMETER,
    DEFAULT_WORKERS,
    DEMO_MAX_CURVES,
    DEMO_MIN_CURVES,
    DemoDesign,
)
from pycurves.demo.solution import DemoParams, DemoSolution


def _chunks(items: Sequence, n_chunks: int) -> list[Sequence]:
    """Split items into at most n_chunks contiguous, non-empty slices."""
    n_chunks = min(n_chunks, len(items))
    if n_chunks == 0:
        return []
    bounds = np.linspace(0, len(items), n_chunks + 1).astype(int)
    return [items[lo:hi] for lo, hi in zip(bounds[:-1], bounds[1:])]


def _partial_sum(circles: Sequence[Circle]) -> float:
    return float(sum(circle.radius for circle in circles))


def sum_radii(circles: Sequence[Circle], n_workers: int = DEFAULT_WORKERS) -> float:
    """
    Sum circle radii with a partitioned parallel reduction.

    Each worker sums a contiguous slice into its own partial; the partials
    are added in slice order once all workers finish. Nothing is shared
    between workers.

    Args:
        circles: Circles to reduce
        n_workers: Maximum number of worker threads

    Returns:
        Sum of radii (0.0 for an empty sequence)
    """
    n_workers = check_positive_int(n_workers, 'n_workers')
    chunks = _chunks(list(circles), n_workers)
    if len(chunks) <= 1:
        return sum((_partial_sum(c) for c in chunks), 0.0)

    with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        partials = list(executor.map(_partial_sum, chunks))
    return sum(partials, 0.0)


def run_demo(
    seed: int | None = None,
    n_curves: int | None = None,
    t: float = DEFAULT_PARAMETER,
    n_workers: int = DEFAULT_WORKERS,
) -> DemoSolution:
    """
    Run the demonstration pipeline.

    Parameters
    ----------
    seed : int, optional
        Seed for the random generator; the same seed reproduces the run.
    n_curves : int, optional
        Batch size. Drawn from [DEMO_MIN_CURVES, DEMO_MAX_CURVES] if None.
    t : float
        Parameter at which positions and derivatives are evaluated.
    n_workers : int
        Thread count for the radius reduction.

    Returns
    -------
    DemoSolution
    """
    design = DemoDesign.build(seed=seed, n_curves=n_curves, t=t, n_workers=n_workers)
    rng = np.random.default_rng(design.seed)

    timer = Timer()
    timer.start()

    count = design.n_curves
    if count is None:
        count = int(rng.integers(DEMO_MIN_CURVES, DEMO_MAX_CURVES + 1))

    with timer.section('generate'):
        curves = tuple(make_random_curve(rng) for _ in range(count))

    with timer.section('evaluate'):
        points = tuple(curve.evaluate(design.t) for curve in curves)
        derivatives = tuple(curve.derivative(design.t) for curve in curves)

    with timer.section('filter_sort'):
        circles = tuple(sorted(
            (curve for curve in curves if isinstance(curve, Circle)),
            key=lambda circle: circle.radius,
        ))

    with timer.section('reduce'):
        radius_sum = sum_radii(circles, design.n_workers)

    timer.stop()

    result = Result(
        params=DemoParams(
            curves=curves,
            points=points,
            derivatives=derivatives,
            circles=circles,
            radius_sum=radius_sum,
        ),
        info={
            'seed': design.seed,
            'n_curves': count,
            'n_circles': len(circles),
            'n_workers': design.n_workers,
        },
        timing=timer.result(),
        backend_name='threaded_reduce',
    )
    return DemoSolution(_result=result, _design=design)
