"""Trigonometric, circular and hyperbolic curves."""

from __future__ import annotations

import math
from dataclasses import dataclass

_COSH_1_MINUS_1 = math.cosh(1.0) - 1.0


@dataclass(frozen=True)
class SinCurve:
    """Sine ease-in-out over [-π/2, π/2].

    First derivative is 0 at t=0 and t=1.

    Formula:
        v(t) = (sin((t - 0.5)π) + 1) / 2
    """

    def transform(self, t: float) -> float:
        return (math.sin((t - 0.5) * math.pi) + 1.0) / 2.0

    def inv_transform(self, v: float) -> float:
        return math.asin(v * 2.0 - 1.0) / math.pi + 0.5


@dataclass(frozen=True)
class Sin1Curve:
    """Sine ease-out over [0, π/2]; first derivative is 0 at t=1."""

    def transform(self, t: float) -> float:
        return math.sin(t * math.pi / 2.0)

    def inv_transform(self, v: float) -> float:
        return math.asin(v) / math.pi * 2.0


@dataclass(frozen=True)
class Sin2Curve:
    """Sine ease-in over [-π/2, 0]; first derivative is 0 at t=0."""

    def transform(self, t: float) -> float:
        return math.sin((t - 1.0) * math.pi / 2.0) + 1.0

    def inv_transform(self, v: float) -> float:
        return math.asin(v - 1.0) * 2.0 / math.pi + 1.0


@dataclass(frozen=True)
class Circle1Curve:
    """Quarter circle, ease-in: v = 1 - √(1 - t²).

    Both directions short-circuit at 1 so the square root never sees a
    rounding-negative argument.
    """

    def transform(self, t: float) -> float:
        if t < 1.0:
            return 1.0 - math.sqrt(1.0 - t * t)
        return 1.0

    def inv_transform(self, v: float) -> float:
        if v < 1.0:
            return math.sqrt(1.0 - (v - 1.0) * (v - 1.0))
        return 1.0


@dataclass(frozen=True)
class Circle2Curve:
    """Quarter circle, ease-out: v = √(t(2 - t))."""

    def transform(self, t: float) -> float:
        return math.sqrt(t * (2.0 - t))

    def inv_transform(self, v: float) -> float:
        return 1.0 - math.sqrt(1.0 - v * v)


@dataclass(frozen=True)
class CatenaryCurve:
    """Hanging-chain curve, normalized cosh.

    Formula:
        v(t) = (cosh(t) - 1) / (cosh(1) - 1)
    """

    def transform(self, t: float) -> float:
        return (math.cosh(t) - 1.0) / _COSH_1_MINUS_1

    def inv_transform(self, v: float) -> float:
        return math.acosh(v * _COSH_1_MINUS_1 + 1.0)
