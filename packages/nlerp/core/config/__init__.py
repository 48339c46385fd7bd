"""Configuration loading for nlerp."""

from nlerp.core.config.loader import (
    build_curves,
    configure_logging_from_config,
    detect_format,
    load_config,
    load_curve_set,
    load_curves,
)
from nlerp.core.config.models import CurveSetConfig, LoggingConfig

__all__ = [
    "CurveSetConfig",
    "LoggingConfig",
    "build_curves",
    "configure_logging_from_config",
    "detect_format",
    "load_config",
    "load_curve_set",
    "load_curves",
]
