"""Curve-set files: JSON or YAML in, named curves out."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from nlerp.core.config.models import CurveSetConfig
from nlerp.core.curves.library import build_default_registry
from nlerp.core.curves.protocols import NonLinear
from nlerp.core.curves.registry import CurveRegistry
from nlerp.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def _parse_json(text: str) -> Any:
    return json.loads(text)


def _parse_yaml(text: str) -> Any:
    content = yaml.safe_load(text)
    # Empty documents load as None
    return {} if content is None else content


_PARSERS: dict[str, tuple[Callable[[str], Any], type[Exception]]] = {
    "json": (_parse_json, json.JSONDecodeError),
    "yaml": (_parse_yaml, yaml.YAMLError),
}


def detect_format(file_path: Path | str) -> str:
    """Map a file extension (case-insensitive) to "json" or "yaml".

    Raises:
        ValueError: For any other extension.
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix}") from None


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a curve-set file into a plain mapping, without schema validation.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the extension is unknown, the content does not parse,
            or the top level is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    parse, parse_error = _PARSERS[fmt]
    try:
        content = parse(path.read_text(encoding="utf-8"))
    except parse_error as e:
        raise ValueError(f"Invalid {fmt.upper()} in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_curve_set(path: str | Path) -> CurveSetConfig:
    """Read a curve-set file and validate it against :class:`CurveSetConfig`.

    Raises:
        pydantic.ValidationError: If the content does not match the schema.
    """
    config = CurveSetConfig.model_validate(load_config(path))
    logger.debug("Loaded %d curve definitions from %s", len(config.curves), path)
    return config


def build_curves(
    config: CurveSetConfig,
    registry: CurveRegistry | None = None,
) -> dict[str, NonLinear]:
    """Build every curve named in a curve set.

    Args:
        config: Validated curve set.
        registry: Registry to resolve against; the default registry if None.

    Returns:
        Mapping of curve name to curve.

    Raises:
        ValueError: If a definition cannot be resolved. The message names the
            offending curve.
    """
    if registry is None:
        registry = build_default_registry()

    curves: dict[str, NonLinear] = {}
    for name, definition in config.curves.items():
        try:
            curves[name] = registry.resolve(definition)
        except ValueError as e:
            raise ValueError(f"Invalid curve '{name}': {e}") from e
    return curves


def load_curves(
    path: str | Path,
    registry: CurveRegistry | None = None,
) -> dict[str, NonLinear]:
    """Load a curve set file and build its curves.

    Example:
        >>> curves = load_curves("curves.yaml")
        >>> curves["fade"].transform(0.5)
        0.5
    """
    return build_curves(load_curve_set(path), registry)


def configure_logging_from_config(config: CurveSetConfig) -> None:
    """Configure Python logging from a curve set's logging section."""
    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
