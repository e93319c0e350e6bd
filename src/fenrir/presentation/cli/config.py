"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

_DEFAULT_MAP_SIZE = 8
_MIN_MAP_SIZE = 4
_MAX_MAP_SIZE = 32
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "FenrirWastes"
        return Path.home() / "FenrirWastes"
    return Path.home() / ".config" / "fenrir_wastes"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_map_size(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return _DEFAULT_MAP_SIZE
    if not _MIN_MAP_SIZE <= value <= _MAX_MAP_SIZE:
        return _DEFAULT_MAP_SIZE
    return value


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize(raw: Dict[str, object]) -> Dict[str, object]:
    return {
        "map_width": _normalize_map_size(raw.get("map_width")),
        "map_height": _normalize_map_size(raw.get("map_height")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def default_config() -> Dict[str, object]:
    return _normalize({})


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
