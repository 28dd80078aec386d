#!/usr/bin/env python3
"""Configuration loading and path resolution for datepick."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from models import DEFAULT_MODE, Mode, ValidationError, normalize_mode
from paths import app_config_dir, app_data_dir


@dataclass
class Config:
    mode: Mode = DEFAULT_MODE
    placeholder: Optional[str] = None
    reset_enabled: bool = True
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


CONFIG_FILENAME = "config.json"
DEFAULT_LOG_FILENAME = "datepick.log"


def default_config_path() -> Path:
    return app_config_dir() / CONFIG_FILENAME


def _default_log_path() -> Path:
    return app_data_dir() / DEFAULT_LOG_FILENAME


def _read_raw(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}
    raw_text = config_path.read_text(encoding="utf-8")
    for candidate in (raw_text, _strip_trailing_commas(raw_text)):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        return data if isinstance(data, dict) else {}
    return {}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load config from the XDG path, falling back to defaults.

    A missing file, invalid JSON or an unknown mode all fall back to the
    defaults for the affected keys.
    """

    raw = _read_raw((config_path or default_config_path()).expanduser())

    try:
        mode = normalize_mode(raw.get("mode"))
    except ValidationError:
        mode = DEFAULT_MODE

    placeholder = raw.get("placeholder")
    if not isinstance(placeholder, str) or not placeholder.strip():
        placeholder = None

    reset_enabled = raw.get("reset_enabled", True)
    if not isinstance(reset_enabled, bool):
        reset_enabled = True

    log_level = str(raw.get("log_level") or "WARNING").upper()
    log_file = Path(raw.get("log_file") or _default_log_path()).expanduser()

    return Config(
        mode=mode,
        placeholder=placeholder,
        reset_enabled=reset_enabled,
        log_level=log_level,
        log_file=log_file,
    )


def _strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before closing braces/brackets."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["Config", "load_config", "default_config_path", "CONFIG_FILENAME"]
