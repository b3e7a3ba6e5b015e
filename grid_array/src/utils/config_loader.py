"""Loads YAML/JSON configuration files and global grid settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": None,
    "render_separator": " ",
    "json_indent": 2,
    "default_filler": None,
}


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the defaults overlaid with the settings stored at ``path``.

    Without ``path`` the packaged config is read if present; an explicit
    ``path`` must exist.
    """
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    elif not Path(path).exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    config = dict(DEFAULT_CONFIG)
    if not Path(path).exists():
        return config
    loaded = load_config(path)
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping")
    config.update(loaded)
    return config


GRID_CONFIG: Dict[str, Any] = load_grid_config()
LOG_LEVEL: str = str(GRID_CONFIG.get("log_level", "INFO")).upper()
LOG_FILE: Optional[str] = GRID_CONFIG.get("log_file")
RENDER_SEPARATOR: str = str(GRID_CONFIG.get("render_separator", " "))
JSON_INDENT: int = int(GRID_CONFIG.get("json_indent", 2))
DEFAULT_FILLER: Any = GRID_CONFIG.get("default_filler")


def _refresh_loggers() -> None:
    from .logger import refresh_loggers

    refresh_loggers()


def apply_config(config: Dict[str, Any]) -> None:
    """Replace the active settings with ``config`` (missing keys keep defaults)."""
    global LOG_LEVEL, LOG_FILE, RENDER_SEPARATOR, JSON_INDENT, DEFAULT_FILLER
    merged = dict(DEFAULT_CONFIG)
    merged.update(config)
    GRID_CONFIG.clear()
    GRID_CONFIG.update(merged)
    LOG_LEVEL = str(merged["log_level"]).upper()
    LOG_FILE = merged["log_file"]
    RENDER_SEPARATOR = str(merged["render_separator"])
    JSON_INDENT = int(merged["json_indent"])
    DEFAULT_FILLER = merged["default_filler"]
    _refresh_loggers()


def set_log_level(value: str) -> None:
    """Override the log level at runtime."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG["log_level"] = LOG_LEVEL
    _refresh_loggers()


def set_render_separator(value: str) -> None:
    """Override the cell separator used by text rendering."""
    global RENDER_SEPARATOR
    RENDER_SEPARATOR = value
    GRID_CONFIG["render_separator"] = value
