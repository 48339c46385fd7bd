"""Non-linear interpolation between arbitrary endpoints.

The curves themselves are only defined on [0, 1]. These functions clamp
before handing a value to a curve, so they are safe for any input.
"""

from __future__ import annotations

import logging

from nlerp.core.curves.protocols import NonLinear

logger = logging.getLogger(__name__)


def lerp(t: float, start: float, end: float, curve: NonLinear) -> float:
    """Interpolate from start to end along a curve.

    Args:
        t: Interpolation position; values outside [0, 1] clamp to the
            endpoints without evaluating the curve.
        start: Value at t=0.
        end: Value at t=1.
        curve: Shape of the transition.

    Returns:
        Interpolated value.

    Example:
        >>> from nlerp.core.curves.functions.basic import SquareCurve
        >>> lerp(0.5, 10.0, 20.0, SquareCurve())
        12.5
    """
    if t < 0:
        return start
    if t > 1:
        return end
    t = curve.transform(t)
    return (1 - t) * start + t * end


def inverse_lerp(v: float, start: float, end: float, curve: NonLinear) -> float:
    """Find the position t at which ``lerp`` would produce v.

    v is first normalized against [start, end]. Positions outside [0, 1]
    clamp to 0 or 1 without evaluating the curve.

    A zero-width range (start == end) has no meaningful position: values at
    or below start give 0.0 and values above give 1.0.

    Args:
        v: Value in the start..end range.
        start: Value corresponding to t=0.
        end: Value corresponding to t=1.
        curve: Shape used by the matching ``lerp``.

    Returns:
        Position t in [0, 1].
    """
    span = end - start
    if span == 0:
        logger.debug("Degenerate range in inverse_lerp: start == end == %s", start)
        return 0.0 if v <= start else 1.0

    t = (v - start) / span
    if t < 0:
        return 0.0
    if t > 1:
        return 1.0
    return curve.inv_transform(t)


def remap(
    v: float,
    istart: float,
    iend: float,
    ostart: float,
    oend: float,
    fin: NonLinear,
    fout: NonLinear,
) -> float:
    """Convert v from one interpolation space to another.

    ``inverse_lerp`` with ``fin`` finds t in the input range, then ``lerp``
    with ``fout`` maps t into the output range.

    Args:
        v: Value in the input range.
        istart: Input range start.
        iend: Input range end.
        ostart: Output range start.
        oend: Output range end.
        fin: Curve describing the input space.
        fout: Curve describing the output space.

    Returns:
        Corresponding value in the output range.

    Example:
        >>> from nlerp.core.curves.functions.basic import LinearCurve
        >>> remap(5.0, 0.0, 10.0, 100.0, 200.0, LinearCurve(), LinearCurve())
        150.0
    """
    return lerp(inverse_lerp(v, istart, iend, fin), ostart, oend, fout)
