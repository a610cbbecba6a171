"""Structured logging for framer.

Human-readable lines go to stderr; an optional JSON lines file receives the
same records plus any structured ``data`` attached by the caller.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER = "framer"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, structured data merged at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "extra_data", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Attach console and optional JSON lines handlers to the ``framer`` logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_path: Optional path for JSON lines log file
        level: Logging level (int or name such as ``"DEBUG"``)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(console)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        jsonl = logging.FileHandler(log_path, encoding="utf-8")
        jsonl.setFormatter(JSONFormatter())
        logger.addHandler(jsonl)


def get_logger(name: str) -> "StructuredLogger":
    """Get a structured logger for ``name`` (usually ``__name__``)."""
    return StructuredLogger(logging.getLogger(name))


class StructuredLogger:
    """Thin wrapper taking an optional ``data`` dict with each message."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log(self, level: int, msg: str, data: dict[str, Any] | None = None) -> None:
        if self.logger.isEnabledFor(level):
            self.logger.log(level, msg, extra={"extra_data": data} if data else {})

    def debug(self, msg: str, data: dict[str, Any] | None = None) -> None:
        self.log(logging.DEBUG, msg, data)

    def info(self, msg: str, data: dict[str, Any] | None = None) -> None:
        self.log(logging.INFO, msg, data)

    def error(self, msg: str, data: dict[str, Any] | None = None) -> None:
        self.log(logging.ERROR, msg, data)


__all__ = [
    "setup_logging",
    "get_logger",
    "StructuredLogger",
    "JSONFormatter",
]
