"""Tests for curve library."""

from __future__ import annotations

import pytest

from nlerp.core.curves.composition import CompoundCurve, ReflectedCurve, StoppedCurve
from nlerp.core.curves.functions.basic import SquareCurve
from nlerp.core.curves.functions.parametric import (
    ExponentialCurve,
    LameCurve,
    LogisticCurve,
)
from nlerp.core.curves.library import CURVE_PRESETS, CurveLibrary, build_default_registry
from nlerp.core.curves.models import CurveDefinition
from nlerp.core.curves.registry import CurveKind, CurveRegistry
from tests.unit.curves.cases import BISECTION_TOL, DENSE_T

# Lamé 8/8 and 1/8-1/8 flatten to exactly 0 or 1 over part of [0, 1] in
# float64, so no inverse can recover t there.
SATURATING_PRESETS = {"lame_3", "lame_6"}

# Near t=1 these logistics sit within ~1e-13 of 1, so one ulp of v is a
# few 1e-5 of t and the inverse adds a couple more ulps.
STEEP_PRESET_TOL = {"logistic_3": 2e-4, "logistic_6": 2e-4}


class TestCurveLibrary:
    """Tests for CurveLibrary enum."""

    def test_polynomial_values(self) -> None:
        """Polynomial curve values exist."""
        assert CurveLibrary.LINEAR.value == "linear"
        assert CurveLibrary.SQUARE.value == "square"
        assert CurveLibrary.CUBE.value == "cube"
        assert CurveLibrary.P3.value == "p3"
        assert CurveLibrary.P5.value == "p5"

    def test_combinator_values(self) -> None:
        """Combinator values exist."""
        assert CurveLibrary.COMPOUND.value == "compound"
        assert CurveLibrary.REFLECT.value == "reflect"
        assert CurveLibrary.STOPPED.value == "stopped"

    def test_is_string_enum(self) -> None:
        """Members compare equal to their string values."""
        assert CurveLibrary.LAME == "lame"


class TestBuildDefaultRegistry:
    """Tests for build_default_registry."""

    def test_every_library_curve_registered(self, registry: CurveRegistry) -> None:
        """All CurveLibrary members are in the registry."""
        assert registry.curve_ids() == sorted(member.value for member in CurveLibrary)

    def test_combinator_kinds(self, registry: CurveRegistry) -> None:
        """Combinators are registered with their input kinds."""
        assert registry.get("compound").kind is CurveKind.SEQUENCE
        assert registry.get("reflect").kind is CurveKind.WRAPPER
        assert registry.get("stopped").kind is CurveKind.STOPS
        assert registry.get("gauss").kind is CurveKind.PRIMITIVE

    @pytest.mark.parametrize(
        "curve_id",
        [
            member.value
            for member in CurveLibrary
            if member not in {CurveLibrary.COMPOUND, CurveLibrary.REFLECT, CurveLibrary.STOPPED}
        ],
    )
    def test_primitives_build_with_defaults(self, registry: CurveRegistry, curve_id: str) -> None:
        """Every primitive can be built without parameters."""
        curve = registry.create(curve_id)
        assert curve.transform(0.0) == pytest.approx(0.0, abs=1e-9)
        assert curve.transform(1.0) == pytest.approx(1.0, abs=1e-9)

    def test_default_parameters(self, registry: CurveRegistry) -> None:
        """Parameterized defaults are the mid presets."""
        assert registry.create("exponential") == ExponentialCurve(10.0)
        assert registry.create("lame") == LameCurve(2.0, 2.0)
        assert registry.create("logistic") == LogisticCurve(12.0, 0.5)

    def test_registries_are_independent(self) -> None:
        """Each call builds a fresh registry."""
        first = build_default_registry()
        first.register_preset("extra", CurveDefinition(curve_id="square"))
        assert "extra" not in build_default_registry().preset_names()

    def test_resolve_reflect(self, registry: CurveRegistry) -> None:
        """Combinators resolve through the default registry."""
        defn = CurveDefinition(curve_id="reflect", curves=[CurveDefinition(curve_id="square")])
        assert registry.resolve(defn) == ReflectedCurve(SquareCurve())


class TestPresets:
    """Tests for the built-in preset catalogue."""

    def test_all_presets_registered(self, registry: CurveRegistry) -> None:
        """Every catalogue entry is available in display order."""
        assert registry.preset_names() == list(CURVE_PRESETS)

    @pytest.mark.parametrize("name", list(CURVE_PRESETS))
    def test_preset_endpoints(self, registry: CurveRegistry, name: str) -> None:
        """Every preset runs from (0, 0) to (1, 1)."""
        curve = registry.preset(name)
        assert curve.transform(0.0) == pytest.approx(0.0, abs=1e-9)
        assert curve.transform(1.0) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize(
        "name", [name for name in CURVE_PRESETS if name not in SATURATING_PRESETS]
    )
    def test_preset_round_trip(self, registry: CurveRegistry, name: str) -> None:
        """inv_transform(transform(t)) recovers t for every catalogue curve."""
        curve = registry.preset(name)
        tol = STEEP_PRESET_TOL.get(name, BISECTION_TOL)
        for t in DENSE_T:
            assert curve.inv_transform(curve.transform(t)) == pytest.approx(t, abs=tol)

    def test_lame_presets(self, registry: CurveRegistry) -> None:
        """Lamé presets cover the exponent table."""
        assert registry.preset("lame_1") == LameCurve(2.0, 2.0)
        assert registry.preset("lame_6") == LameCurve(0.125, 0.125)
        assert registry.preset("lame_8") == LameCurve(2.0, 0.5)

    def test_logistic_presets(self, registry: CurveRegistry) -> None:
        """Logistic presets cover three midpoints."""
        assert registry.preset("logistic_5") == LogisticCurve(12.0, 0.2)
        assert registry.preset("logistic_9") == LogisticCurve(100.0, 0.8)

    def test_stopped_preset(self, registry: CurveRegistry) -> None:
        """The stopped preset has six stops forming three risers."""
        curve = registry.preset("stopped")
        assert isinstance(curve, StoppedCurve)
        assert len(curve.stops) == 6
        assert curve.transform(0.245) == pytest.approx(0.2)

    def test_presets_are_fresh_values(self, registry: CurveRegistry) -> None:
        """Building a preset twice gives equal values."""
        assert registry.preset("gauss_2") == registry.preset("gauss_2")

    def test_compound_of_presets(self, registry: CurveRegistry) -> None:
        """Preset definitions can be nested in combinators."""
        defn = CurveDefinition(
            curve_id="compound",
            curves=[CURVE_PRESETS["square"], CURVE_PRESETS["exponential_1"]],
        )
        curve = registry.resolve(defn)
        assert curve == CompoundCurve([SquareCurve(), ExponentialCurve(1.0)])
