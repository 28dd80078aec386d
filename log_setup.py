#!/usr/bin/env python3
"""File-based JSON logging for datepick (the terminal belongs to curses)."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from paths import ensure_dir


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Unsupported log level: {level}")


def configure_logging(
    *,
    log_level: str | int = "WARNING",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Route the root logger to ``log_file``; without one, logging is muted."""

    root = logging.getLogger()
    root.setLevel(_resolve_level(log_level))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_file is None:
        root.addHandler(logging.NullHandler())
        return root

    ensure_dir(log_file.parent)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(JsonFormatter())
    root.addHandler(file_handler)
    return root


__all__ = ["JsonFormatter", "configure_logging"]
