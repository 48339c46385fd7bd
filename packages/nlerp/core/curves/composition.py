"""Curve combinators.

This module provides curves built from other curves or from control points:
sequential composition, reflection about the centre, and piecewise linear
interpolation through stops.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from nlerp.core.curves.numeric import bisect_inverse
from nlerp.core.curves.protocols import NonLinear


@dataclass(frozen=True)
class CompoundCurve:
    """Apply several curves one after another.

    ``transform`` feeds t through the curves in order; ``inv_transform``
    undoes them in reverse order. Values are not clamped between stages, so
    the children must have compatible ranges.

    Args:
        curves: Curves to chain, first applied first.

    Example:
        >>> from nlerp.core.curves.functions.basic import SquareCurve
        >>> curve = CompoundCurve([SquareCurve(), SquareCurve()])
        >>> curve.transform(0.5)
        0.0625
    """

    curves: tuple[NonLinear, ...]

    def __init__(self, curves: Iterable[NonLinear]) -> None:
        object.__setattr__(self, "curves", tuple(curves))

    def transform(self, t: float) -> float:
        for curve in self.curves:
            t = curve.transform(t)
        return t

    def inv_transform(self, v: float) -> float:
        for curve in reversed(self.curves):
            v = curve.inv_transform(v)
        return v


@dataclass(frozen=True)
class ReflectedCurve:
    """Point reflection of a curve about (0.5, 0.5): v = 1 - f(1 - t).

    Turns an ease-in into the matching ease-out. The child is never
    evaluated at 0; both directions return 1 directly at the upper end.

    Attributes:
        curve: The curve to reflect.
    """

    curve: NonLinear

    def transform(self, t: float) -> float:
        u = 1.0 - t
        if u > 0.0:
            return 1.0 - self.curve.transform(u)
        return 1.0

    def inv_transform(self, v: float) -> float:
        w = 1.0 - v
        if w > 0.0:
            return 1.0 - self.curve.inv_transform(w)
        return 1.0


@dataclass(frozen=True)
class StoppedCurve:
    """Piecewise linear curve through control points.

    The stops are (t, v) pairs strictly ascending in both coordinates. The
    curve is anchored at (0, 0) and (1, 1), which need not be listed. Stops
    are taken as given; use :meth:`CurveRegistry.resolve` for validated
    construction.

    Args:
        stops: Control points as (t, v) pairs.

    Example:
        >>> curve = StoppedCurve([(0.25, 0.3), (0.5, 0.6), (0.75, 0.9)])
        >>> round(curve.transform(0.375), 12)
        0.45
    """

    stops: tuple[tuple[float, float], ...]

    def __init__(self, stops: Iterable[Sequence[float]]) -> None:
        object.__setattr__(self, "stops", tuple((float(t), float(v)) for t, v in stops))

    def transform(self, t: float) -> float:
        t0, v0 = 0.0, 0.0
        t1, v1 = 1.0, 1.0
        for stop_t, stop_v in self.stops:
            if stop_t > t:
                t1, v1 = stop_t, stop_v
                break
            t0, v0 = stop_t, stop_v

        dt = t1 - t0
        if dt <= 0.0:
            # Stop at t=1 coincides with the anchor
            return v1
        alpha = (t - t0) / dt
        return (1.0 - alpha) * v0 + alpha * v1

    def inv_transform(self, v: float) -> float:
        # TODO: invert the bracketing segment directly instead of bisecting.
        return bisect_inverse(v, self)
