"""Immutable command values recorded in a turtle's log.

Each recorder operation appends exactly one of these. They carry only
their payload and never reference the turtle that produced them, so a
log can be handed to any number of interpreters.

Commands:
    Color(rgb)           set stroke and fill color
    SetHeading(angle)    absolute heading in degrees
    Translate(dx, dy)    relative move, already resolved to Cartesian
    SetXY(x, y)          absolute teleport (silent on replay)
    Pen(down)            pen up/down
    StartFill()          open a fill region
    EndFill()            close a fill region
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

__all__ = [
    "RGB",
    "Color",
    "SetHeading",
    "Translate",
    "SetXY",
    "Pen",
    "StartFill",
    "EndFill",
    "Command",
    "COMMAND_TYPES",
]

RGB = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Color:
    rgb: RGB


@dataclass(frozen=True, slots=True)
class SetHeading:
    angle: float


@dataclass(frozen=True, slots=True)
class Translate:
    dx: float
    dy: float


@dataclass(frozen=True, slots=True)
class SetXY:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Pen:
    down: bool


@dataclass(frozen=True, slots=True)
class StartFill:
    pass


@dataclass(frozen=True, slots=True)
class EndFill:
    pass


Command = Union[Color, SetHeading, Translate, SetXY, Pen, StartFill, EndFill]

COMMAND_TYPES = (Color, SetHeading, Translate, SetXY, Pen, StartFill, EndFill)
