"""Parameterized curves.

Each curve takes its shape parameters at construction and derives the
normalization constants that pin transform(0) to 0 and transform(1) to 1.
The constants are computed once in ``__post_init__``; after that the curve
is immutable.

Parameters are not validated. A zero rate, or a logistic midpoint outside
(0, 1), produces a ZeroDivisionError or meaningless constants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _logistic(x: float) -> float:
    """Standard logistic: L=1, k=1, midpoint 0. Saturates instead of overflowing."""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def _logit(v: float) -> float:
    """Inverse of the standard logistic on the open interval (0, 1)."""
    return math.log(v) - math.log1p(-v)


@dataclass(frozen=True)
class ExponentialCurve:
    """Exponential curve: v = (e^(tk) - 1) · s with s = 1 / (e^k - 1).

    Positive k eases in; negative k eases out.

    Attributes:
        k: Rate; larger magnitudes bend the curve harder.
        scale: Derived normalization factor.

    Example:
        >>> curve = ExponentialCurve(10.0)
        >>> round(curve.transform(1.0), 12)
        1.0
    """

    k: float
    scale: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scale", 1.0 / math.expm1(self.k))

    def transform(self, t: float) -> float:
        return math.expm1(t * self.k) * self.scale

    def inv_transform(self, v: float) -> float:
        return math.log1p(v / self.scale) / self.k


@dataclass(frozen=True)
class LogarithmicCurve:
    """Logarithmic curve: v = ln(1 + tk) · s with s = 1 / ln(1 + k).

    Attributes:
        k: Rate, must be > -1 and non-zero.
        scale: Derived normalization factor.
    """

    k: float
    scale: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scale", 1.0 / math.log1p(self.k))

    def transform(self, t: float) -> float:
        return math.log1p(t * self.k) * self.scale

    def inv_transform(self, v: float) -> float:
        return math.expm1(v / self.scale) / self.k


@dataclass(frozen=True)
class LameCurve:
    """Lamé curve (superellipse): v = 1 - (1 - tⁿ)^(1/m).

    n = m = 2 is the quarter circle of :class:`Circle1Curve`. Larger
    exponents square off the corner, exponents below 1 pinch it.

    Attributes:
        n: Exponent applied to t.
        m: Exponent applied to the complement of v.
    """

    n: float
    m: float
    inv_n: float = field(init=False, repr=False)
    inv_m: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inv_n", 1.0 / self.n)
        object.__setattr__(self, "inv_m", 1.0 / self.m)

    def transform(self, t: float) -> float:
        if t < 1.0:
            vm = 1.0 - math.pow(t, self.n)
            return 1.0 - math.pow(vm, self.inv_m)
        return 1.0

    def inv_transform(self, v: float) -> float:
        if v < 1.0:
            tn = 1.0 - math.pow(1.0 - v, self.m)
            return math.pow(tn, self.inv_n)
        return 1.0


@dataclass(frozen=True)
class GaussCurve:
    """Rising half of a Gaussian bell, peak at t=1.

    The bell exp(-x²/2) is evaluated at x = k(t - 1), shifted down by its
    value at t=0 and rescaled so the output spans exactly [0, 1].

    Attributes:
        k: Width control; larger values give a sharper bell.
        offset: Bell value at t=0.
        scale: 1 / (1 - offset).
    """

    k: float
    offset: float = field(init=False, repr=False)
    scale: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        offset = math.exp(-self.k * self.k * 0.5)
        object.__setattr__(self, "offset", offset)
        object.__setattr__(self, "scale", 1.0 / (1.0 - offset))

    def transform(self, t: float) -> float:
        x = self.k * (t - 1.0)
        x *= -0.5 * x
        return (math.exp(x) - self.offset) * self.scale

    def inv_transform(self, v: float) -> float:
        x = v / self.scale + self.offset
        if x <= 0.0:
            # Bell underflowed at t=0 (large k)
            return 0.0
        x = -2.0 * math.log(x)
        # log can round just above 0 at v=1
        x = math.sqrt(max(x, 0.0))
        return 1.0 - x / self.k


@dataclass(frozen=True)
class LogisticCurve:
    """Logistic (sigmoid) curve normalized onto [0, 1].

    The standard logistic is evaluated at x = (t - midpoint) · k, then
    shifted and scaled using its values at t=0 and t=1.

    Attributes:
        k: Steepness, must be > 0.
        midpoint: Position of the inflection point, in (0, 1).
        offset: Logistic value at t=0.
        scale: 1 / (logistic value at t=1 - offset).

    Example:
        >>> curve = LogisticCurve(12.0, 0.5)
        >>> round(curve.transform(0.5), 12)
        0.5
    """

    k: float
    midpoint: float = 0.5
    offset: float = field(init=False, repr=False)
    scale: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        v0 = _logistic(-self.midpoint * self.k)
        v1 = _logistic((1.0 - self.midpoint) * self.k)
        object.__setattr__(self, "offset", v0)
        object.__setattr__(self, "scale", 1.0 / (v1 - v0))

    def transform(self, t: float) -> float:
        x = (t - self.midpoint) * self.k
        return (_logistic(x) - self.offset) * self.scale

    def inv_transform(self, v: float) -> float:
        x = v / self.scale + self.offset
        # Steep curves saturate to exactly 0 or 1 at the ends
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return _logit(x) / self.k + self.midpoint
