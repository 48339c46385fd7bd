"""Tests for the bisection inverse."""

from __future__ import annotations

import pytest

from nlerp.core.curves.functions.basic import LinearCurve, SquareCurve
from nlerp.core.curves.numeric import DEFAULT_BISECT_ITERATIONS, bisect_inverse
from tests.unit.curves.cases import RecordingCurve


class TestBisectInverse:
    """Tests for bisect_inverse function."""

    def test_default_iteration_count(self) -> None:
        """Sixteen halvings by default."""
        assert DEFAULT_BISECT_ITERATIONS == 16

    def test_evaluates_curve_once_per_iteration(self, recording_curve: RecordingCurve) -> None:
        """No convergence check: always exactly `iterations` evaluations."""
        bisect_inverse(0.5, recording_curve)
        assert len(recording_curve.calls) == 16
        assert all(name == "transform" for name, _ in recording_curve.calls)

    def test_first_probe_at_midpoint(self, recording_curve: RecordingCurve) -> None:
        """Search starts at t=0.5 and steps by 0.25."""
        bisect_inverse(0.9, recording_curve, iterations=3)
        probes = [t for _, t in recording_curve.calls]
        assert probes == [0.5, 0.75, 0.875]

    def test_zero_iterations_returns_midpoint(self) -> None:
        """Without iterations the starting guess is returned."""
        assert bisect_inverse(0.9, LinearCurve(), iterations=0) == 0.5

    def test_single_iteration(self) -> None:
        """One step moves a quarter towards the target."""
        assert bisect_inverse(0.9, LinearCurve(), iterations=1) == 0.75
        assert bisect_inverse(0.1, LinearCurve(), iterations=1) == 0.25

    def test_precision(self) -> None:
        """Sixteen iterations resolve t to about 2^-16."""
        for v in [0.0, 0.1, 0.3333, 0.5, 0.77, 1.0]:
            assert bisect_inverse(v, LinearCurve()) == pytest.approx(v, abs=2**-16)

    def test_lower_bound(self) -> None:
        """The search cannot reach 0; it stops at 2^-17."""
        assert bisect_inverse(0.0, LinearCurve()) == 2**-17

    def test_upper_bound(self) -> None:
        """The search cannot reach 1; it stops at 1 - 2^-17."""
        assert bisect_inverse(1.0, LinearCurve()) == 1.0 - 2**-17

    def test_more_iterations_more_precision(self) -> None:
        """Extra iterations tighten the result."""
        assert bisect_inverse(0.49, SquareCurve(), iterations=40) == pytest.approx(0.7, abs=1e-11)
