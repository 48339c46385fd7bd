"""Protocol definition for non-linear curves.

Defines the interface every curve implements so that interpolation,
composition and sampling can work with any curve.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NonLinear(Protocol):
    """A monotonic mapping of [0, 1] onto [0, 1] and its inverse.

    Neither method checks its input. Results are only defined for values in
    [0, 1]; callers that need safety clamp first (``lerp`` and
    ``inverse_lerp`` already do).

    Example:
        >>> class Identity:
        ...     def transform(self, t: float) -> float:
        ...         return t
        ...
        ...     def inv_transform(self, v: float) -> float:
        ...         return v
        >>> isinstance(Identity(), NonLinear)
        True
    """

    def transform(self, t: float) -> float:
        """Map t in [0, 1] to a value in [0, 1].

        Args:
            t: Normalized position.

        Returns:
            Shaped value, 0 at t=0 and 1 at t=1.
        """
        ...

    def inv_transform(self, v: float) -> float:
        """Recover t from a value produced by ``transform``.

        Args:
            v: Shaped value in [0, 1].

        Returns:
            Normalized position t such that transform(t) ~= v.
        """
        ...
