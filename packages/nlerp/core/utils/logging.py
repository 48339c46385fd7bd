"""Logging setup for nlerp.

The library itself only ever calls ``logging.getLogger(__name__)``. Applications
(or a curve set's ``logging`` section, see
:func:`nlerp.core.config.loader.configure_logging_from_config`) decide where
records go with :func:`configure_logging`, either as plain text or as one JSON
object per line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Output shape::

        {
            "level": "INFO",
            "message": "...",
            "timestamp": "2026-01-29T12:00:00.000000+00:00",
            "context": {"logger_name": ..., "module": ..., "function": ...,
                        "line": ..., <extra fields>}
        }

    Exceptions add ``error_type``, ``error_message`` and ``stack_trace`` to the
    context. Values that are not JSON-serialisable are written with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context = self._source_context(record)
        if record.exc_info:
            context.update(self._error_context(record))
        context.update(self._extra_context(record))

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)

    @staticmethod
    def _source_context(record: logging.LogRecord) -> dict[str, Any]:
        return {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

    def _error_context(self, record: logging.LogRecord) -> dict[str, Any]:
        exc_type, exc_value, _ = record.exc_info  # type: ignore[misc]
        return {
            "error_type": exc_type.__name__ if exc_type else None,
            "error_message": str(exc_value) if exc_value else None,
            "stack_trace": record.exc_text or self.formatException(record.exc_info),  # type: ignore[arg-type]
        }

    @staticmethod
    def _extra_context(record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }


def _build_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename)
    return logging.StreamHandler(sys.stdout)


def _build_formatter(format_string: str | None, structured: bool) -> logging.Formatter:
    if structured:
        return StructuredJSONFormatter()
    return logging.Formatter(format_string or DEFAULT_FORMAT)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Route all log records to stdout or a file.

    Replaces any handlers already installed on the root logger, so calling it
    again reconfigures logging.

    Args:
        level: Level name, case-insensitive (DEBUG, INFO, WARNING, ERROR,
            CRITICAL).
        format_string: ``logging.Formatter`` format for text output. Ignored
            when ``structured`` is set.
        filename: Append to this file instead of writing to stdout.
        structured: Emit JSON lines via :class:`StructuredJSONFormatter`.

    Raises:
        ValueError: If ``level`` is not a known level name.

    Example:
        >>> configure_logging(level="DEBUG", structured=True, filename="nlerp.jsonl")
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"Unknown logging level: {level}")

    handler = _build_handler(filename)
    handler.setFormatter(_build_formatter(format_string, structured))
    logging.basicConfig(level=level_no, handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, wrapped in a LoggerAdapter when context is given.

    Context keys are attached to every record, where the structured formatter
    picks them up, e.g. ``get_logger(__name__, curve_id="gauss")``.
    """
    base = logging.getLogger(name)
    return logging.LoggerAdapter(base, context) if context else base
