"""Non-linear curves and interpolation."""

from nlerp.core.curves.composition import CompoundCurve, ReflectedCurve, StoppedCurve
from nlerp.core.curves.functions.basic import (
    CubeCurve,
    LinearCurve,
    P3Curve,
    P5Curve,
    SquareCurve,
)
from nlerp.core.curves.functions.parametric import (
    ExponentialCurve,
    GaussCurve,
    LameCurve,
    LogarithmicCurve,
    LogisticCurve,
)
from nlerp.core.curves.functions.trigonometric import (
    CatenaryCurve,
    Circle1Curve,
    Circle2Curve,
    Sin1Curve,
    Sin2Curve,
    SinCurve,
)
from nlerp.core.curves.interpolation import inverse_lerp, lerp, remap
from nlerp.core.curves.library import CURVE_PRESETS, CurveLibrary, build_default_registry
from nlerp.core.curves.models import CurveDefinition, CurvePoint
from nlerp.core.curves.numeric import bisect_inverse
from nlerp.core.curves.protocols import NonLinear
from nlerp.core.curves.registry import CurveFactorySpec, CurveKind, CurveRegistry
from nlerp.core.curves.sampling import sample_curve, sample_unit_interval

__all__ = [
    "CURVE_PRESETS",
    "CatenaryCurve",
    "Circle1Curve",
    "Circle2Curve",
    "CompoundCurve",
    "CubeCurve",
    "CurveDefinition",
    "CurveFactorySpec",
    "CurveKind",
    "CurveLibrary",
    "CurvePoint",
    "CurveRegistry",
    "ExponentialCurve",
    "GaussCurve",
    "LameCurve",
    "LinearCurve",
    "LogarithmicCurve",
    "LogisticCurve",
    "NonLinear",
    "P3Curve",
    "P5Curve",
    "ReflectedCurve",
    "Sin1Curve",
    "Sin2Curve",
    "SinCurve",
    "SquareCurve",
    "StoppedCurve",
    "bisect_inverse",
    "build_default_registry",
    "inverse_lerp",
    "lerp",
    "remap",
    "sample_curve",
    "sample_unit_interval",
]
