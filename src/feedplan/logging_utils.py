"""Logging configuration helpers with per-logger severity filtering."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _resolve_level(level_name: str, default: int = logging.INFO) -> int:
    level = getattr(logging, str(level_name).upper(), None)
    return level if isinstance(level, int) else default


class LoggerLevelFilter(logging.Filter):
    """Drop records below a configured minimum severity for matching logger names.

    The most specific configured prefix wins, so ``{"feedplan": "INFO",
    "feedplan.engine": "WARNING"}`` keeps engine debug chatter out while the rest of the
    package logs at INFO.
    """

    def __init__(self, minimum_levels: Optional[Mapping[str, str]] = None):
        super().__init__()
        self._levels: Dict[str, int] = {
            name: _resolve_level(level) for name, level in (minimum_levels or {}).items()
        }

    def _minimum_for(self, logger_name: str) -> Optional[int]:
        best: Optional[str] = None
        for prefix in self._levels:
            if logger_name == prefix or logger_name.startswith(prefix + "."):
                if best is None or len(prefix) > len(best):
                    best = prefix
        return self._levels[best] if best is not None else None

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        minimum = self._minimum_for(record.name)
        if minimum is None:
            return True
        return record.levelno >= minimum


class JsonFormatter(logging.Formatter):
    """One JSON object per record; fields passed through ``extra=`` go under ``context``."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        entry: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level_name: str,
    fmt: str,
    level_overrides: Optional[Mapping[str, str]] = None,
) -> None:
    """Configure root logging with optional JSON output and per-logger severity filters."""

    numeric_level = _resolve_level(level_name)
    format_normalized = (fmt or "plain").lower()

    handler = logging.StreamHandler()
    if format_normalized == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)
    handler.addFilter(LoggerLevelFilter(level_overrides))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name, level in (level_overrides or {}).items():
        logging.getLogger(name).setLevel(_resolve_level(level, numeric_level))

    logging.captureWarnings(True)
