"""Curve registry and definition resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nlerp.core.curves.models import CurveDefinition
from nlerp.core.curves.protocols import NonLinear

logger = logging.getLogger(__name__)


class CurveKind(str, Enum):
    """How a registered curve receives its inputs."""

    PRIMITIVE = "primitive"  # Keyword parameters only
    WRAPPER = "wrapper"  # Exactly one child curve
    SEQUENCE = "sequence"  # One or more child curves
    STOPS = "stops"  # Control points


@dataclass(frozen=True)
class CurveFactorySpec:
    """Registry entry for curve construction."""

    curve_id: str
    factory: Callable[..., NonLinear]
    kind: CurveKind = CurveKind.PRIMITIVE
    default_params: dict[str, float] | None = None
    description: str | None = None


class CurveRegistry:
    """Registry of curve factories and named presets."""

    def __init__(self) -> None:
        self._registry: dict[str, CurveFactorySpec] = {}
        self._presets: dict[str, CurveDefinition] = {}

    def register(self, spec: CurveFactorySpec) -> None:
        if spec.curve_id in self._registry:
            raise ValueError(f"Curve '{spec.curve_id}' already registered")
        self._registry[spec.curve_id] = spec

    def get(self, curve_id: str) -> CurveFactorySpec:
        try:
            return self._registry[curve_id]
        except KeyError as exc:
            raise ValueError(f"Curve '{curve_id}' is not registered") from exc

    def curve_ids(self) -> list[str]:
        return sorted(self._registry)

    def create(self, curve_id: str, **params: Any) -> NonLinear:
        """Build a curve from keyword parameters.

        Parameters are merged over the entry's defaults. Combinators take
        their inputs as keywords too (``curves=``, ``curve=``, ``stops=``).

        Args:
            curve_id: Registry ID.
            **params: Constructor arguments.

        Returns:
            The constructed curve.

        Raises:
            ValueError: If the ID is unknown or the parameters do not match
                the constructor.
        """
        spec = self.get(curve_id)
        merged: dict[str, Any] = dict(spec.default_params or {})
        merged.update(params)
        try:
            curve = spec.factory(**merged)
        except TypeError as exc:
            raise ValueError(f"Invalid parameters for curve '{curve_id}': {exc}") from exc
        logger.debug("Created curve %s from %s", curve_id, merged)
        return curve

    def resolve(self, definition: CurveDefinition) -> NonLinear:
        """Resolve a curve definition into a curve, recursing into children.

        Args:
            definition: Curve definition.

        Returns:
            The constructed curve.

        Raises:
            ValueError: If the ID is unknown or the definition supplies
                inputs the curve kind does not accept.
        """
        spec = self.get(definition.curve_id)

        if spec.kind is CurveKind.PRIMITIVE:
            if definition.curves or definition.stops:
                raise ValueError(
                    f"Curve '{spec.curve_id}' does not accept child curves or stops"
                )
            return self.create(spec.curve_id, **definition.params)

        if definition.params:
            raise ValueError(f"Curve '{spec.curve_id}' does not accept params")

        if spec.kind is CurveKind.STOPS:
            if definition.curves:
                raise ValueError(f"Curve '{spec.curve_id}' does not accept child curves")
            if not definition.stops:
                raise ValueError(f"Curve '{spec.curve_id}' requires at least one stop")
            return self.create(spec.curve_id, stops=[p.as_tuple() for p in definition.stops])

        if definition.stops:
            raise ValueError(f"Curve '{spec.curve_id}' does not accept stops")

        children = [self.resolve(child) for child in definition.curves]
        if spec.kind is CurveKind.WRAPPER:
            if len(children) != 1:
                raise ValueError(
                    f"Curve '{spec.curve_id}' requires exactly one child curve, "
                    f"got {len(children)}"
                )
            return self.create(spec.curve_id, curve=children[0])

        if not children:
            raise ValueError(f"Curve '{spec.curve_id}' requires at least one child curve")
        return self.create(spec.curve_id, curves=children)

    def register_preset(self, name: str, definition: CurveDefinition) -> None:
        if name in self._presets:
            raise ValueError(f"Preset '{name}' already registered")
        self._presets[name] = definition

    def get_preset(self, name: str) -> CurveDefinition:
        try:
            return self._presets[name]
        except KeyError as exc:
            raise ValueError(f"Preset '{name}' is not registered") from exc

    def preset(self, name: str) -> NonLinear:
        """Build the curve for a named preset."""
        return self.resolve(self.get_preset(name))

    def preset_names(self) -> list[str]:
        return list(self._presets)
