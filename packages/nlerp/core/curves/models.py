"""Curve definition models.

This module defines the declarative side of curves, used by the registry and
by configuration files:
- CurvePoint: A single normalized control point (t, v) in [0,1] x [0,1]
- CurveDefinition: A curve described by its registry ID, parameters, and
  optional child curves or stops

Models validate on construction and are immutable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurvePoint(BaseModel):
    """A single control point on a normalized curve.

    Attributes:
        t: Normalized position in range [0, 1].
        v: Normalized value in range [0, 1].

    Example:
        >>> point = CurvePoint(t=0.25, v=0.3)
        >>> point.as_tuple()
        (0.25, 0.3)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized position [0,1]")
    v: float = Field(..., ge=0.0, le=1.0, description="Normalized value [0,1]")

    def as_tuple(self) -> tuple[float, float]:
        return (self.t, self.v)


class CurveDefinition(BaseModel):
    """Declarative description of a curve.

    Primitive curves use ``params`` only. Combinators use ``curves`` (reflect
    takes exactly one, compound one or more) or ``stops``. Which inputs a
    given curve ID accepts is checked by the registry when the definition is
    resolved.

    Attributes:
        curve_id: Registry ID of the curve (e.g. "lame", "compound").
        params: Keyword parameters for the curve constructor.
        curves: Child curve definitions for combinators.
        stops: Control points for piecewise linear curves, strictly
            ascending in both t and v.
        description: Optional human-readable note.

    Example:
        >>> defn = CurveDefinition(curve_id="lame", params={"n": 4.0, "m": 4.0})
        >>> defn.curve_id
        'lame'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    curve_id: str = Field(..., min_length=1)
    params: dict[str, float] = Field(default_factory=dict)
    curves: list[CurveDefinition] = Field(default_factory=list)
    stops: list[CurvePoint] = Field(default_factory=list)
    description: str | None = None

    @model_validator(mode="after")
    def _validate_ascending_stops(self) -> CurveDefinition:
        """Validate that stops are strictly ascending in t and v."""
        last_t = -1.0
        last_v = -1.0
        for p in self.stops:
            if p.t <= last_t or p.v <= last_v:
                raise ValueError("CurveDefinition.stops must be strictly ascending in t and v")
            last_t, last_v = p.t, p.v
        return self
