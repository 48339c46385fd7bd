"""Curve library: built-in curve IDs, presets, and the default registry."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

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
from nlerp.core.curves.models import CurveDefinition, CurvePoint
from nlerp.core.curves.protocols import NonLinear
from nlerp.core.curves.registry import CurveFactorySpec, CurveKind, CurveRegistry


class CurveLibrary(str, Enum):
    """Identifiers for built-in curves."""

    # Polynomial
    LINEAR = "linear"
    SQUARE = "square"
    CUBE = "cube"
    P3 = "p3"  # Smooth-step, 3t² - 2t³
    P5 = "p5"  # Smoother-step, 6t⁵ - 15t⁴ + 10t³

    # Exponential / Logarithmic
    EXPONENTIAL = "exponential"
    LOGARITHMIC = "logarithmic"

    # Trigonometric
    SIN = "sin"  # Ease in-out
    SIN1 = "sin1"  # Ease out
    SIN2 = "sin2"  # Ease in

    # Circular / Hyperbolic
    CIRCLE1 = "circle1"  # Quarter circle, ease in
    CIRCLE2 = "circle2"  # Quarter circle, ease out
    LAME = "lame"  # Superellipse
    CATENARY = "catenary"

    # Bell / Sigmoid
    GAUSS = "gauss"
    LOGISTIC = "logistic"

    # Combinators
    COMPOUND = "compound"
    REFLECT = "reflect"
    STOPPED = "stopped"


def _preset(curve_id: CurveLibrary, **params: float) -> CurveDefinition:
    return CurveDefinition(curve_id=curve_id.value, params=params)


# Catalogue of named shapes, in display order
CURVE_PRESETS: dict[str, CurveDefinition] = {
    "linear": _preset(CurveLibrary.LINEAR),
    "square": _preset(CurveLibrary.SQUARE),
    "cube": _preset(CurveLibrary.CUBE),
    "circle1": _preset(CurveLibrary.CIRCLE1),
    "circle2": _preset(CurveLibrary.CIRCLE2),
    "sin": _preset(CurveLibrary.SIN),
    "sin1": _preset(CurveLibrary.SIN1),
    "sin2": _preset(CurveLibrary.SIN2),
    "lame_1": _preset(CurveLibrary.LAME, n=2.0, m=2.0),
    "lame_2": _preset(CurveLibrary.LAME, n=4.0, m=4.0),
    "lame_3": _preset(CurveLibrary.LAME, n=8.0, m=8.0),
    "lame_4": _preset(CurveLibrary.LAME, n=0.5, m=0.5),
    "lame_5": _preset(CurveLibrary.LAME, n=0.25, m=0.25),
    "lame_6": _preset(CurveLibrary.LAME, n=0.125, m=0.125),
    "lame_7": _preset(CurveLibrary.LAME, n=0.5, m=2.0),
    "lame_8": _preset(CurveLibrary.LAME, n=2.0, m=0.5),
    "exponential_1": _preset(CurveLibrary.EXPONENTIAL, k=1.0),
    "exponential_2": _preset(CurveLibrary.EXPONENTIAL, k=10.0),
    "exponential_3": _preset(CurveLibrary.EXPONENTIAL, k=100.0),
    "logarithmic_1": _preset(CurveLibrary.LOGARITHMIC, k=1.0),
    "logarithmic_2": _preset(CurveLibrary.LOGARITHMIC, k=10.0),
    "logarithmic_3": _preset(CurveLibrary.LOGARITHMIC, k=100.0),
    "gauss_1": _preset(CurveLibrary.GAUSS, k=1.0),
    "gauss_2": _preset(CurveLibrary.GAUSS, k=3.0),
    "gauss_3": _preset(CurveLibrary.GAUSS, k=6.0),
    "logistic_1": _preset(CurveLibrary.LOGISTIC, k=1.0, midpoint=0.5),
    "logistic_2": _preset(CurveLibrary.LOGISTIC, k=12.0, midpoint=0.5),
    "logistic_3": _preset(CurveLibrary.LOGISTIC, k=60.0, midpoint=0.5),
    "logistic_4": _preset(CurveLibrary.LOGISTIC, k=1.0, midpoint=0.2),
    "logistic_5": _preset(CurveLibrary.LOGISTIC, k=12.0, midpoint=0.2),
    "logistic_6": _preset(CurveLibrary.LOGISTIC, k=38.0, midpoint=0.2),
    "logistic_7": _preset(CurveLibrary.LOGISTIC, k=1.0, midpoint=0.8),
    "logistic_8": _preset(CurveLibrary.LOGISTIC, k=12.0, midpoint=0.8),
    "logistic_9": _preset(CurveLibrary.LOGISTIC, k=100.0, midpoint=0.8),
    "catenary": _preset(CurveLibrary.CATENARY),
    "p3": _preset(CurveLibrary.P3),
    "p5": _preset(CurveLibrary.P5),
    "stopped": CurveDefinition(
        curve_id=CurveLibrary.STOPPED.value,
        stops=[
            CurvePoint(t=0.24, v=0.1),
            CurvePoint(t=0.25, v=0.3),
            CurvePoint(t=0.49, v=0.4),
            CurvePoint(t=0.5, v=0.6),
            CurvePoint(t=0.74, v=0.7),
            CurvePoint(t=0.75, v=0.9),
        ],
        description="Three steep risers joined by shallow treads",
    ),
}


def build_default_registry() -> CurveRegistry:
    """Construct a registry containing all built-in curves and presets."""
    registry = CurveRegistry()

    def register(
        curve_id: CurveLibrary,
        factory: Callable[..., NonLinear],
        kind: CurveKind = CurveKind.PRIMITIVE,
        params: dict[str, float] | None = None,
    ) -> None:
        registry.register(
            CurveFactorySpec(
                curve_id=curve_id.value,
                factory=factory,
                kind=kind,
                default_params=params,
            )
        )

    # Stateless
    register(CurveLibrary.LINEAR, LinearCurve)
    register(CurveLibrary.SQUARE, SquareCurve)
    register(CurveLibrary.CUBE, CubeCurve)
    register(CurveLibrary.P3, P3Curve)
    register(CurveLibrary.P5, P5Curve)
    register(CurveLibrary.SIN, SinCurve)
    register(CurveLibrary.SIN1, Sin1Curve)
    register(CurveLibrary.SIN2, Sin2Curve)
    register(CurveLibrary.CIRCLE1, Circle1Curve)
    register(CurveLibrary.CIRCLE2, Circle2Curve)
    register(CurveLibrary.CATENARY, CatenaryCurve)

    # Parameterized - defaults are the mid presets
    register(CurveLibrary.EXPONENTIAL, ExponentialCurve, params={"k": 10.0})
    register(CurveLibrary.LOGARITHMIC, LogarithmicCurve, params={"k": 10.0})
    register(CurveLibrary.LAME, LameCurve, params={"n": 2.0, "m": 2.0})
    register(CurveLibrary.GAUSS, GaussCurve, params={"k": 3.0})
    register(CurveLibrary.LOGISTIC, LogisticCurve, params={"k": 12.0, "midpoint": 0.5})

    # Combinators
    register(CurveLibrary.COMPOUND, CompoundCurve, CurveKind.SEQUENCE)
    register(CurveLibrary.REFLECT, ReflectedCurve, CurveKind.WRAPPER)
    register(CurveLibrary.STOPPED, StoppedCurve, CurveKind.STOPS)

    for name, definition in CURVE_PRESETS.items():
        registry.register_preset(name, definition)

    return registry
