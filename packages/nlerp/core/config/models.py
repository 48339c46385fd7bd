"""Configuration models for nlerp."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from nlerp.core.curves.models import CurveDefinition


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root logging level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for text logging",
    )
    structured: bool = Field(default=False, description="Emit JSON log records")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class CurveSetConfig(BaseModel):
    """A named set of curve definitions plus logging settings.

    Example (YAML):
        logging:
          level: DEBUG
        curves:
          fade:
            curve_id: logistic
            params: {k: 12.0, midpoint: 0.5}
          ease_out:
            curve_id: reflect
            curves:
              - curve_id: square
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    curves: dict[str, CurveDefinition] = Field(default_factory=dict)
