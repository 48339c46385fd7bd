"""Curve sampling infrastructure.

This module provides functions for evaluating curves over uniform grids and
arbitrary arrays of positions.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from nlerp.core.curves.protocols import NonLinear


def sample_unit_interval(n: int) -> np.ndarray:
    """Generate N evenly-spaced samples in [0, 1], both ends included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        Array of N floats from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_unit_interval(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return np.linspace(0.0, 1.0, n)


def transform_array(curve: NonLinear, ts: Iterable[float]) -> np.ndarray:
    """Apply ``curve.transform`` to every position in ts."""
    return np.fromiter((curve.transform(float(t)) for t in ts), dtype=float)


def inv_transform_array(curve: NonLinear, vs: Iterable[float]) -> np.ndarray:
    """Apply ``curve.inv_transform`` to every value in vs."""
    return np.fromiter((curve.inv_transform(float(v)) for v in vs), dtype=float)


def sample_curve(curve: NonLinear, n_samples: int) -> tuple[np.ndarray, np.ndarray]:
    """Sample a curve's forward transform on a uniform grid.

    Args:
        curve: Curve to evaluate.
        n_samples: Number of samples (must be >= 2).

    Returns:
        Tuple of (positions, values) arrays.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> from nlerp.core.curves.functions.basic import SquareCurve
        >>> ts, vs = sample_curve(SquareCurve(), 3)
        >>> vs.tolist()
        [0.0, 0.25, 1.0]
    """
    ts = sample_unit_interval(n_samples)
    return ts, transform_array(curve, ts)
