"""Numerical inverse for curves without a closed form."""

from __future__ import annotations

from nlerp.core.curves.protocols import NonLinear

DEFAULT_BISECT_ITERATIONS = 16


def bisect_inverse(
    v: float,
    curve: NonLinear,
    iterations: int = DEFAULT_BISECT_ITERATIONS,
) -> float:
    """Find t with curve.transform(t) ~= v by fixed-step binary search.

    Starts at t=0.5 with a step of 0.25 and halves the step every iteration,
    moving down when the curve overshoots the target and up otherwise. There
    is no convergence check; 16 iterations resolve t to about 2^-16.

    Args:
        v: Target value in [0, 1].
        curve: Monotonic increasing curve to invert.
        iterations: Number of halvings to perform.

    Returns:
        Approximate inverse of v.

    Example:
        >>> from nlerp.core.curves.functions.basic import SquareCurve
        >>> round(bisect_inverse(0.25, SquareCurve()), 4)
        0.5
    """
    t = 0.5
    step = 0.25
    for _ in range(iterations):
        if curve.transform(t) > v:
            t -= step
        else:
            t += step
        step /= 2
    return t
