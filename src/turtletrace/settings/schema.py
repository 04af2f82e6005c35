"""Pydantic model for host display settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from .values import DISPLAY_DEFAULTS, SPRITE_CONFIG


class DisplaySettings(BaseModel):
    """Settings a host uses to set up a canvas for a turtle.

    Parameters
    ----------
    width, height: Canvas size in pixels. The turtle origin maps to the
        canvas center.
    background: Canvas clear color ``(r, g, b)``.
    stroke_width: Line width in pixels for ``DrawLine`` primitives.
    show_turtle: Whether the direction sprite is drawn after the log.
    sprite_size: Leg length of the sprite triangle, in turtle units.
    """

    width: int = Field(default=int(DISPLAY_DEFAULTS["width"]))
    height: int = Field(default=int(DISPLAY_DEFAULTS["height"]))
    background: Tuple[int, int, int] = Field(
        default=tuple(DISPLAY_DEFAULTS["background"])
    )
    stroke_width: int = Field(default=int(DISPLAY_DEFAULTS["stroke_width"]))
    show_turtle: bool = Field(default=bool(DISPLAY_DEFAULTS["show_turtle"]))
    sprite_size: float = Field(default=float(SPRITE_CONFIG["size"]))

    @field_validator("width", "height", "stroke_width")
    @classmethod
    def _chk_positive_px(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("pixel dimensions must be > 0")
        return v

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if any(c < 0 or c > 255 for c in v):
            raise ValueError("background channels must be within [0, 255]")
        return v

    @field_validator("sprite_size")
    @classmethod
    def _chk_sprite_size(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("sprite_size must be > 0")
        return v
