"""Draw a turtle's full picture into a sink."""

from __future__ import annotations

from typing import Optional

from turtletrace.core.state import TurtleState

from .interpreter import ReplayCursor, interpret
from .sink import DrawSink
from .sprite import draw_sprite

__all__ = ["draw"]


def draw(
    state: TurtleState,
    sink: DrawSink,
    *,
    show_turtle: bool = True,
    sprite_size: Optional[float] = None,
) -> ReplayCursor:
    """Replay *state*'s log into *sink*, then its sprite when *show_turtle*.

    Returns the cursor left by replaying the log (the sprite replay has its
    own and is discarded).
    """
    cur = interpret(list(state.commands), sink)
    if show_turtle:
        draw_sprite(state, sink, sprite_size)
    return cur
