"""Replay a command log into draw primitives.

Interpretation is a fold over the log, starting from a fresh
:class:`ReplayCursor` at the canonical home pose. The source
:class:`~turtletrace.core.state.TurtleState` is never consulted; only its
``commands`` list is read, so the same log can be replayed any number of
times, into any sink, with identical output.

Per command:

- ``Color``: emit ``SetStrokeAndFillColor``.
- ``SetXY`` / ``SetHeading`` / ``Pen``: update the cursor only.
- ``Translate``: with the pen down emit ``DrawLine`` for the segment, plus
  two ``AddFillVertex`` for its endpoints while a fill is open. The cursor
  moves regardless of the pen.
- ``StartFill`` / ``EndFill``: emit ``BeginFillRegion`` / ``EndFillRegion``
  only on an actual transition, so repeated opens or stray closes are silent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, NoReturn, Optional

from turtletrace.core.commands import (
    RGB,
    Color,
    Command,
    EndFill,
    Pen,
    SetHeading,
    SetXY,
    StartFill,
    Translate,
)
from turtletrace.core.state import DEFAULT_COLOR, HOME_HEADING, HOME_X, HOME_Y

from .sink import DrawSink

__all__ = ["ReplayCursor", "step", "interpret", "replay_state"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReplayCursor:
    """Transient accumulator shaped like a turtle, minus the log."""

    x: float = HOME_X
    y: float = HOME_Y
    angle: float = HOME_HEADING
    pen: bool = True
    fill: bool = False
    color: RGB = DEFAULT_COLOR


def _unknown(cmd: NoReturn) -> NoReturn:
    # Type checkers flag any call site where a Command variant is unhandled.
    raise TypeError(f"unknown command: {cmd!r}")


def step(cur: ReplayCursor, cmd: Command, sink: Optional[DrawSink] = None) -> int:
    """Apply one command to *cur*, emitting into *sink* when given.

    Returns the number of primitives the command produced (counted even
    when *sink* is None).
    """
    if isinstance(cmd, Color):
        cur.color = cmd.rgb
        if sink is not None:
            sink.set_stroke_and_fill_color(cmd.rgb)
        return 1
    if isinstance(cmd, SetXY):
        cur.x = cmd.x
        cur.y = cmd.y
        return 0
    if isinstance(cmd, SetHeading):
        cur.angle = cmd.angle
        return 0
    if isinstance(cmd, Translate):
        p0 = (cur.x, cur.y)
        new_x = cur.x + cmd.dx
        new_y = cur.y + cmd.dy
        p1 = (new_x, new_y)
        emitted = 0
        if cur.pen:
            emitted = 3 if cur.fill else 1
            if sink is not None:
                sink.draw_line(p0, p1)
                if cur.fill:
                    sink.add_fill_vertex(p0)
                    sink.add_fill_vertex(p1)
        cur.x = new_x
        cur.y = new_y
        return emitted
    if isinstance(cmd, Pen):
        cur.pen = cmd.down
        return 0
    if isinstance(cmd, StartFill):
        if cur.fill:
            return 0
        cur.fill = True
        if sink is not None:
            sink.begin_fill_region()
        return 1
    if isinstance(cmd, EndFill):
        if not cur.fill:
            return 0
        cur.fill = False
        if sink is not None:
            sink.end_fill_region()
        return 1
    _unknown(cmd)


def interpret(commands: Iterable[Command], sink: DrawSink) -> ReplayCursor:
    """Replay *commands* in order into *sink*; return the final cursor."""
    cur = ReplayCursor()
    n_cmds = 0
    n_prims = 0
    for cmd in commands:
        n_prims += step(cur, cmd, sink)
        n_cmds += 1
    logger.debug("replayed %d commands into %d primitives", n_cmds, n_prims)
    return cur


def replay_state(commands: Iterable[Command]) -> ReplayCursor:
    """Fold *commands* over a fresh cursor without emitting anything."""
    cur = ReplayCursor()
    for cmd in commands:
        step(cur, cmd)
    return cur
