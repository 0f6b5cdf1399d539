"""
Demonstration driver for the curve family.

Public API:
    run_demo(seed=None, n_curves=None, t=pi/4, n_workers=4)
    sum_radii(circles, n_workers=4)
"""

from pycurves.demo.design import DEMO_MIN_CURVES, DEMO_MAX_CURVES, DemoDesign
from pycurves.demo.solution import DemoParams, DemoSolution
from pycurves.demo.solvers import run_demo, sum_radii

__all__ = [
    "run_demo",
    "sum_radii",
    "DEMO_MIN_CURVES",
    "DEMO_MAX_CURVES",
    "DemoDesign",
    "DemoParams",
    "DemoSolution",
]
