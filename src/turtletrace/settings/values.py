"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we attempt to
load and parse it; a missing or malformed file falls back to the literals
below so the package still imports with sensible defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

__all__ = ["SPRITE_CONFIG", "DISPLAY_DEFAULTS"]

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_SPRITE = {"size": 10.0, "apex_deg": 30.0}
_FALLBACK_DISPLAY = {
    "width": 600,
    "height": 600,
    "background": [255, 255, 255],
    "stroke_width": 1,
    "show_turtle": True,
}


def _as_float(v: Any, default: float) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _as_rgb(v: Any, default: List[int]) -> List[int]:
    if isinstance(v, list) and len(v) == 3:
        try:
            return [int(c) for c in v]
        except (TypeError, ValueError):
            pass
    return list(default)


# --- Load YAML -----------------------------------------------------------
_sprite_cfg: Dict[str, float] = dict(_FALLBACK_SPRITE)
_display_defaults: Dict[str, Any] = dict(_FALLBACK_DISPLAY)

if _YAML_PATH.exists():
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("failed to read %s; using built-in defaults", _YAML_PATH)
        raw = {}
    if not isinstance(raw, dict):
        raw = {}

    sprite = raw.get("sprite", {})
    if isinstance(sprite, dict):
        _sprite_cfg["size"] = _as_float(sprite.get("size"), _sprite_cfg["size"])
        _sprite_cfg["apex_deg"] = _as_float(
            sprite.get("apex_deg"), _sprite_cfg["apex_deg"]
        )

    display = raw.get("display", {})
    if isinstance(display, dict):
        for key in ("width", "height", "stroke_width"):
            _display_defaults[key] = _as_int(display.get(key), _display_defaults[key])
        _display_defaults["background"] = _as_rgb(
            display.get("background"), _display_defaults["background"]
        )
        show = display.get("show_turtle")
        if isinstance(show, bool):
            _display_defaults["show_turtle"] = show

SPRITE_CONFIG: Dict[str, float] = _sprite_cfg
DISPLAY_DEFAULTS: Dict[str, Any] = _display_defaults
