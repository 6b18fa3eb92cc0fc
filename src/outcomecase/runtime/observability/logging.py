"""Logging setup for outcomecase.

Modules log through ``logging.getLogger("outcomecase.<area>")``. Nothing is
emitted until the application configures handlers, either its own or via
configure_logging():

    >>> from outcomecase.runtime.observability import configure_logging
    >>> configure_logging(level="DEBUG", format="json")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from outcomecase.foundation.config import get_settings

ROOT_LOGGER = "outcomecase"

# LogRecord attributes that are not caller-supplied ``extra`` fields
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON Lines output. Caller ``extra`` fields are merged into the object."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {}
        if self.include_timestamps:
            payload["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        payload |= {"level": record.levelname.lower(), "logger": record.name, "event": record.getMessage()}
        payload |= {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def _text_formatter(include_timestamps: bool) -> logging.Formatter:
    fmt = "%(levelname)s %(name)s: %(message)s"
    return logging.Formatter(f"%(asctime)s {fmt}" if include_timestamps else fmt)


def configure_logging(
    level: str | None = None,
    format: str | None = None,  # noqa: A002 - matches the settings field
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single handler on the ``outcomecase`` logger.

    Unset arguments come from settings. Calling again replaces the handler
    installed by the previous call. Format: "text" or "json".
    """
    settings = get_settings()
    level = (level or settings.effective_log_level).upper()
    format = format or settings.logging.format
    match format:
        case "text": formatter = _text_formatter(settings.logging.include_timestamps)
        case "json": formatter = JsonFormatter(include_timestamps=settings.logging.include_timestamps)
        case _: raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler._outcomecase = True  # type: ignore[attr-defined]

    root = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in root.handlers if getattr(h, "_outcomecase", False)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.WARNING))
    return handler


def get_logger(area: str) -> logging.Logger:
    """Logger for one area of the package, e.g. ``get_logger("boundary")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")
