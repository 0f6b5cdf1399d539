"""
Tests for the demonstration driver.
"""

import math

import numpy as np
import pytest

from pycurves.core.exceptions import ValidationError
from pycurves.curves import Circle, make_circle
from pycurves.demo import (
    DEMO_MAX_CURVES,
    DEMO_MIN_CURVES,
    DemoDesign,
    DemoSolution,
    run_demo,
    sum_radii,
)
from pycurves.demo.__main__ import main


# ═══════════════════════════════════════════════════════════════════════
# sum_radii
# ═══════════════════════════════════════════════════════════════════════


class TestSumRadii:

    @pytest.fixture
    def circles(self, rng):
        return [make_circle(float(r)) for r in rng.integers(1, 51, size=137)]

    @pytest.mark.parametrize("n_workers", [1, 2, 3, 4, 8, 200])
    def test_matches_serial_sum(self, circles, n_workers):
        expected = sum(c.radius for c in circles)
        assert sum_radii(circles, n_workers) == expected

    def test_empty(self):
        assert sum_radii([], 4) == 0.0

    def test_single(self):
        assert sum_radii([make_circle(2.5)], 4) == 2.5

    def test_invalid_workers(self):
        with pytest.raises(ValidationError):
            sum_radii([make_circle(1)], 0)


# ═══════════════════════════════════════════════════════════════════════
# DemoDesign
# ═══════════════════════════════════════════════════════════════════════


class TestDemoDesign:

    def test_defaults(self):
        design = DemoDesign.build()
        assert design.seed is None
        assert design.n_curves is None
        assert design.t == math.pi / 4
        assert design.n_workers == 4

    @pytest.mark.parametrize("kwargs", [
        {'seed': -1},
        {'seed': 1.5},
        {'n_curves': 0},
        {'t': math.nan},
        {'n_workers': 0},
    ])
    def test_rejects(self, kwargs):
        with pytest.raises(ValidationError):
            DemoDesign.build(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# run_demo
# ═══════════════════════════════════════════════════════════════════════


class TestRunDemo:

    def test_batch_size_drawn_in_range(self):
        solution = run_demo(seed=3)
        assert isinstance(solution, DemoSolution)
        assert DEMO_MIN_CURVES <= len(solution.curves) <= DEMO_MAX_CURVES
        assert solution.info['n_curves'] == len(solution.curves)

    def test_explicit_count(self):
        solution = run_demo(seed=1, n_curves=50)
        assert len(solution.curves) == len(solution.points) == len(solution.derivatives) == 50

    def test_points_match_curves(self):
        solution = run_demo(seed=2, n_curves=20, t=0.3)
        for curve, point, velocity in zip(solution.curves, solution.points, solution.derivatives):
            assert point == curve.evaluate(0.3)
            assert velocity == curve.derivative(0.3)

    def test_circles_filtered_and_sorted(self):
        solution = run_demo(seed=4, n_curves=300)
        expected = [c for c in solution.curves if isinstance(c, Circle)]
        assert len(solution.circles) == len(expected)
        assert all(isinstance(c, Circle) for c in solution.circles)
        radii = [c.radius for c in solution.circles]
        assert radii == sorted(radii)
        assert set(map(id, solution.circles)) == set(map(id, expected))

    def test_radius_sum(self):
        solution = run_demo(seed=5, n_curves=300, n_workers=3)
        assert solution.radius_sum == sum(c.radius for c in solution.circles)

    def test_reproducible(self):
        a = run_demo(seed=11, n_curves=40)
        b = run_demo(seed=11, n_curves=40)
        assert [p for p in a.points] == [p for p in b.points]
        assert a.radius_sum == b.radius_sum

    def test_timing_sections(self):
        timing = run_demo(seed=6, n_curves=10).timing
        assert {'total_seconds', 'generate', 'evaluate', 'filter_sort', 'reduce'} <= set(timing)

    def test_summary(self):
        solution = run_demo(seed=7, n_curves=12)
        text = solution.summary(max_curves=2)
        assert text.startswith("Curve points:")
        assert "... 10 more curve(s)" in text
        assert f"Sum of circles radius: {solution.radius_sum:g}" in text

    def test_repr(self):
        solution = run_demo(seed=8, n_curves=5)
        assert repr(solution).startswith("DemoSolution(n_curves=5")

    def test_main(self, capsys):
        assert main(["42"]) == 0
        out = capsys.readouterr().out
        assert "Sum of circles radius:" in out

    @pytest.mark.parametrize("seed", ["abc", "4.5"])
    def test_main_bad_seed(self, capsys, seed):
        assert main([seed]) == 2
        captured = capsys.readouterr()
        assert "usage: python -m pycurves.demo [seed]" in captured.err
        assert captured.out == ""
