"""Shared pytest fixtures for nlerp tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from nlerp.core.curves.library import build_default_registry
from nlerp.core.curves.registry import CurveRegistry

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def registry() -> CurveRegistry:
    """Default registry with every built-in curve and preset."""
    return build_default_registry()


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo root logger changes made by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
