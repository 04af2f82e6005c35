"""Turtle operations that mutate state and append to the command log.

Every operation takes the turtle to act on as its last argument, defaulting
to the process-wide :data:`DEFAULT_TURTLE`, and returns that same turtle so
calls can be threaded::

    t = TurtleState()
    forward(10, right(90, forward(10, t)))

Each call updates the state fields and appends exactly one command (``home``
is the only composite and appends two). Nothing between the field update and
the append can raise, so observers never see one without the other.

Only :func:`color` validates its argument. Numeric inputs, including NaN and
Infinity, are stored as given.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import cos, radians, sin
from typing import Any

from .commands import Color, EndFill, Pen, SetHeading, SetXY, StartFill, Translate
from .errors import InvalidArgument
from .state import HOME_HEADING, HOME_X, HOME_Y, TurtleState, normalize_angle

__all__ = [
    "DEFAULT_TURTLE",
    "default_turtle",
    "color",
    "right",
    "left",
    "forward",
    "back",
    "penup",
    "pendown",
    "start_fill",
    "end_fill",
    "setxy",
    "setheading",
    "home",
    "clean",
]

logger = logging.getLogger(__name__)

# Shared turtle used when a caller does not pass one explicitly.
DEFAULT_TURTLE = TurtleState()


def default_turtle() -> TurtleState:
    return DEFAULT_TURTLE


def _is_channel(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255


def color(c: Sequence[Any], t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Set the stroke and fill color to the ``(r, g, b)`` triple *c*.

    Raises:
        InvalidArgument: *c* is not a sequence of exactly three integers in
            [0, 255]. The turtle is left unchanged.
    """
    if isinstance(c, (str, bytes)) or not isinstance(c, Sequence) or len(c) != 3:
        logger.debug("rejecting color %r", c)
        raise InvalidArgument(f"color must have exactly 3 components, got {c!r}")
    if not all(_is_channel(v) for v in c):
        logger.debug("rejecting color %r", c)
        raise InvalidArgument(
            f"color channels must be integers in [0, 255], got {c!r}"
        )
    rgb = (c[0], c[1], c[2])
    t.color = rgb
    t.commands.append(Color(rgb))
    return t


def right(angle_deg: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Turn clockwise by *angle_deg*; the new heading lands in [0, 360)."""
    new_angle = normalize_angle(t.angle - angle_deg)
    t.angle = new_angle
    t.commands.append(SetHeading(new_angle))
    return t


def left(angle_deg: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    return right(-angle_deg, t)


def forward(length: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Move *length* units along the current heading.

    The displacement is resolved to Cartesian here so replay never needs the
    heading to reproduce the move.
    """
    rad = radians(t.angle)
    dx = length * cos(rad)
    dy = length * sin(rad)
    t.x += dx
    t.y += dy
    t.commands.append(Translate(dx, dy))
    return t


def back(length: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    return forward(-length, t)


def penup(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    t.pen = False
    t.commands.append(Pen(False))
    return t


def pendown(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    t.pen = True
    t.commands.append(Pen(True))
    return t


def start_fill(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    # Appended even when already filling; replay collapses nested opens.
    t.fill = True
    t.commands.append(StartFill())
    return t


def end_fill(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    t.fill = False
    t.commands.append(EndFill())
    return t


def setxy(x: float, y: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Teleport to ``(x, y)`` without changing the heading."""
    t.x = x
    t.y = y
    t.commands.append(SetXY(x, y))
    return t


def setheading(angle_deg: float, t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Set the heading to *angle_deg* exactly as given (no normalization)."""
    t.angle = angle_deg
    t.commands.append(SetHeading(angle_deg))
    return t


def home(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    return setheading(HOME_HEADING, setxy(HOME_X, HOME_Y, t))


def clean(t: TurtleState = DEFAULT_TURTLE) -> TurtleState:
    """Drop the command log; pose, pen, fill and color are kept."""
    t.commands = []
    return t
