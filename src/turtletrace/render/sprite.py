"""Direction sprite for a turtle.

The sprite is not a special primitive. It is a second turtle placed at the
first one's pose that traces a small filled isosceles triangle, apex on the
turtle position and opening backwards along the heading. Its log is then
interpreted like any other.
"""

from __future__ import annotations

from math import radians, sin
from typing import Optional

from turtletrace.core.recorder import (
    color,
    end_fill,
    forward,
    right,
    setheading,
    setxy,
    start_fill,
)
from turtletrace.core.state import TurtleState
from turtletrace.settings.values import SPRITE_CONFIG

from .interpreter import ReplayCursor, interpret
from .sink import DrawSink

__all__ = ["sprite_turtle", "draw_sprite"]


def sprite_turtle(
    state: TurtleState,
    size: Optional[float] = None,
    apex_deg: Optional[float] = None,
) -> TurtleState:
    """Return a fresh turtle whose log draws the sprite for *state*."""
    leg = float(SPRITE_CONFIG["size"]) if size is None else size
    apex = float(SPRITE_CONFIG["apex_deg"]) if apex_deg is None else apex_deg
    half = apex / 2.0
    base = 2.0 * leg * sin(radians(half))

    t = TurtleState()
    setxy(state.x, state.y, t)
    setheading(state.angle, t)
    color(state.color, t)
    start_fill(t)
    # apex -> first base corner -> second base corner -> apex
    forward(leg, right(180.0 - half, t))
    forward(base, right(90.0 + half, t))
    forward(leg, right(90.0 + half, t))
    return end_fill(t)


def draw_sprite(
    state: TurtleState,
    sink: DrawSink,
    size: Optional[float] = None,
    apex_deg: Optional[float] = None,
) -> ReplayCursor:
    return interpret(sprite_turtle(state, size, apex_deg).commands, sink)
