"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Final

_LOGGING_CONFIGURED: bool = False


class JsonLogFormatter(logging.Formatter):
    """Serialize log records into a JSON structure suitable for log aggregation."""

    RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
        {
            "args",
            "asctime",
            "created",
            "exc_info",
            "exc_text",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "module",
            "msecs",
            "message",
            "msg",
            "name",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "stack_info",
            "taskName",
            "thread",
            "threadName",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields = self._extract_extra_fields(record)
        if extra_fields:
            log_entry.update(extra_fields)

        if record.exc_info:
            # Keep single-line JSON
            exc_text = self.formatException(record.exc_info)
            log_entry["exc_info"] = exc_text.replace("\n", " | ")

        if record.stack_info:
            stack_text = self.formatStack(record.stack_info)
            log_entry["stack"] = stack_text.replace("\n", " | ")

        return json.dumps(log_entry, ensure_ascii=True, separators=(",", ":"))

    def _extract_extra_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        extras: dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in self.RESERVED_ATTRS or key.startswith("_"):
                continue
            if value is None:
                continue
            extras[key] = self._normalize_value(value)
        return extras

    @staticmethod
    def _normalize_value(value: object) -> object:
        if isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, (list, dict)):
            try:
                json.dumps(value)
                return value
            except TypeError:
                return str(value)
        return str(value)


def configure_logging(level_name: str) -> None:
    """Configure root logging once with the JSON formatter."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonLogFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(level_name))

    logging.captureWarnings(True)
    _LOGGING_CONFIGURED = True


def _resolve_level(level_name: str) -> int:
    try:
        level_value: int | str = logging.getLevelName(level_name.upper())
    except AttributeError:
        return logging.INFO

    if isinstance(level_value, str):
        return logging.INFO
    return int(level_value)


def get_logger(name: str) -> logging.Logger:
    """Return a library logger; output is controlled by :func:`configure_logging`."""
    return logging.getLogger(name)


__all__ = [
    "JsonLogFormatter",
    "configure_logging",
    "get_logger",
]
