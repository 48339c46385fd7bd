"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from tests.unit.curves.cases import RecordingCurve


@pytest.fixture
def recording_curve() -> RecordingCurve:
    """Curve that records calls, for checking when curves are evaluated."""
    return RecordingCurve()


@pytest.fixture
def three_stops() -> list[tuple[float, float]]:
    """Evenly spaced stops on the line v = 1.2t."""
    return [(0.25, 0.3), (0.5, 0.6), (0.75, 0.9)]
