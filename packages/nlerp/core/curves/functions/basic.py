"""Polynomial curves."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nlerp.core.curves.numeric import bisect_inverse


@dataclass(frozen=True)
class LinearCurve:
    """Identity curve: v = t.

    Example:
        >>> LinearCurve().transform(0.3)
        0.3
    """

    def transform(self, t: float) -> float:
        return t

    def inv_transform(self, v: float) -> float:
        return v


@dataclass(frozen=True)
class SquareCurve:
    """Quadratic ease-in: v = t².

    Example:
        >>> SquareCurve().transform(0.5)
        0.25
    """

    def transform(self, t: float) -> float:
        return t * t

    def inv_transform(self, v: float) -> float:
        return math.sqrt(v)


@dataclass(frozen=True)
class CubeCurve:
    """Cubic ease-in: v = t³."""

    def transform(self, t: float) -> float:
        return t * t * t

    def inv_transform(self, v: float) -> float:
        return math.cbrt(v)


@dataclass(frozen=True)
class P3Curve:
    """Smooth-step (Hermite) curve.

    First derivative is 0 at t=0 and t=1. There is no convenient closed form
    for the inverse, so it is found by bisection.

    Formula:
        v(t) = t²(3 - 2t)
    """

    def transform(self, t: float) -> float:
        return t * t * (3.0 - 2.0 * t)

    def inv_transform(self, v: float) -> float:
        return bisect_inverse(v, self)


@dataclass(frozen=True)
class P5Curve:
    """Smoother-step curve (Ken Perlin's improved smoothstep).

    First and second derivatives are 0 at t=0 and t=1. Inverse by bisection.

    Formula:
        v(t) = 6t⁵ - 15t⁴ + 10t³
    """

    def transform(self, t: float) -> float:
        return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

    def inv_transform(self, v: float) -> float:
        return bisect_inverse(v, self)
