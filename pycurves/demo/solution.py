"""
Demo solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pycurves.core.result import Result
from pycurves.core.protocols import Curve
from pycurves.curves.shapes import Circle
from pycurves.linalg.formatting import format_vector
from pycurves.linalg.vector import FixedVector

if TYPE_CHECKING:
    from pycurves.demo.design import DemoDesign


@dataclass(frozen=True)
class DemoParams:
    """
    Parameter payload for a demo run.

    curves, points and derivatives are aligned: entry i of points and
    derivatives belongs to curves[i].
    """
    curves: tuple[Curve, ...]
    points: tuple[FixedVector, ...]
    derivatives: tuple[FixedVector, ...]
    circles: tuple[Circle, ...]          # ascending radius, stable
    radius_sum: float


@dataclass
class DemoSolution:
    """
    User-facing demo results.

    Wraps Result[DemoParams] and provides convenient accessors.
    """
    _result: Result[DemoParams]
    _design: 'DemoDesign'

    @property
    def curves(self) -> tuple[Curve, ...]:
        return self._result.params.curves

    @property
    def points(self) -> tuple[FixedVector, ...]:
        """Position of every curve at t."""
        return self._result.params.points

    @property
    def derivatives(self) -> tuple[FixedVector, ...]:
        """Velocity of every curve at t."""
        return self._result.params.derivatives

    @property
    def circles(self) -> tuple[Circle, ...]:
        """The Circle instances among curves, sorted by ascending radius."""
        return self._result.params.circles

    @property
    def radius_sum(self) -> float:
        return self._result.params.radius_sum

    @property
    def t(self) -> float:
        return self._design.t

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self, max_curves: int | None = None) -> str:
        """
        Console-style report: point and derivative of each curve, then the
        circle radius sum.

        Args:
            max_curves: Show at most this many curves (all if None)
        """
        shown = self.curves if max_curves is None else self.curves[:max_curves]
        lines = ["Curve points:"]
        for i, curve in enumerate(shown):
            lines.append(
                f"{type(curve).__name__}: value({self.t:g}) - {{ "
                f"{format_vector(self.points[i])} }}"
            )
            lines.append(
                f"derivative({self.t:g}) - {{ {format_vector(self.derivatives[i])} }}"
            )
            lines.append("")
        hidden = len(self.curves) - len(shown)
        if hidden > 0:
            lines.append(f"... {hidden} more curve(s)")
            lines.append("")
        lines.append(f"Circles: {len(self.circles)} of {len(self.curves)} curves")
        lines.append(f"Sum of circles radius: {self.radius_sum:g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DemoSolution(n_curves={len(self.curves)}, "
            f"n_circles={len(self.circles)}, radius_sum={self.radius_sum:g})"
        )
