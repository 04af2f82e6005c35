"""Runtime display configuration.

Small aggregator that merges the YAML defaults from settings.values,
``TURTLETRACE_*`` environment overrides and optional CLI-style overrides into
a :class:`~turtletrace.settings.schema.DisplaySettings`, and holds the current
one as a process-wide runtime value that hosts can read and replace.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Optional

from .settings.schema import DisplaySettings

__all__ = [
    "make_display_config",
    "get_runtime",
    "set_runtime",
    "register_listener",
    "unregister_listener",
]

logger = logging.getLogger(__name__)

_ENV_INT = {
    "TURTLETRACE_WIDTH": "width",
    "TURTLETRACE_HEIGHT": "height",
    "TURTLETRACE_STROKE_WIDTH": "stroke_width",
}
_ENV_SHOW_TURTLE = "TURTLETRACE_SHOW_TURTLE"


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for var, key in _ENV_INT.items():
        raw = os.environ.get(var)
        if not raw:
            continue
        try:
            out[key] = int(raw)
        except ValueError:
            logger.warning("Invalid %s=%r", var, raw)
    show = os.environ.get(_ENV_SHOW_TURTLE)
    if show:
        val = show.strip().lower()
        if val in {"0", "false", "no"}:
            out["show_turtle"] = False
        elif val in {"1", "true", "yes"}:
            out["show_turtle"] = True
        else:
            logger.warning("Invalid %s=%r", _ENV_SHOW_TURTLE, show)
    return out


def make_display_config(*, args: Optional[object] = None) -> DisplaySettings:
    """Build DisplaySettings from defaults, environment and *args*.

    Rules:
    - values.yml (via settings.values) provides the baseline.
    - ``TURTLETRACE_WIDTH``, ``TURTLETRACE_HEIGHT``,
      ``TURTLETRACE_STROKE_WIDTH`` and ``TURTLETRACE_SHOW_TURTLE`` override
      it; unparsable values are logged and ignored.
    - Attributes on *args* (argparse.Namespace-like) named after the
      settings fields override both when not None.

    Raises pydantic ``ValidationError`` if the merged values are invalid.
    """
    merged: Dict[str, Any] = _env_overrides()
    if args is not None:
        for name in DisplaySettings.model_fields:
            val = getattr(args, name, None)
            if val is not None:
                merged[name] = val
    return DisplaySettings(**merged)


# Runtime singleton + listener API -------------------------------------
_RUNTIME: DisplaySettings | None = None
_LISTENERS: list[Callable[[DisplaySettings], None]] = []


def get_runtime() -> DisplaySettings:
    """Return the current display settings, creating defaults if needed."""
    global _RUNTIME
    if _RUNTIME is None:
        _RUNTIME = make_display_config()
    return _RUNTIME


def set_runtime(settings: DisplaySettings) -> None:
    """Replace the runtime display settings and notify listeners in order."""
    global _RUNTIME
    _RUNTIME = settings
    for cb in list(_LISTENERS):
        cb(settings)


def register_listener(cb: Callable[[DisplaySettings], None]) -> None:
    """Register a callback invoked with the new settings on set_runtime."""
    if cb not in _LISTENERS:
        _LISTENERS.append(cb)


def unregister_listener(cb: Callable[[DisplaySettings], None]) -> None:
    if cb in _LISTENERS:
        _LISTENERS.remove(cb)
