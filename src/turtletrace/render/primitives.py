"""Drawing primitives emitted by the command interpreter.

These are the only values that cross from the turtle core into a rendering
backend. Points are ``(x, y)`` in the turtle frame: origin at home, y up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from turtletrace.core.commands import RGB

__all__ = [
    "Point",
    "SetStrokeAndFillColor",
    "DrawLine",
    "BeginFillRegion",
    "AddFillVertex",
    "EndFillRegion",
    "Primitive",
]

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class SetStrokeAndFillColor:
    rgb: RGB


@dataclass(frozen=True, slots=True)
class DrawLine:
    p0: Point
    p1: Point


@dataclass(frozen=True, slots=True)
class BeginFillRegion:
    pass


@dataclass(frozen=True, slots=True)
class AddFillVertex:
    p: Point


@dataclass(frozen=True, slots=True)
class EndFillRegion:
    pass


Primitive = Union[
    SetStrokeAndFillColor, DrawLine, BeginFillRegion, AddFillVertex, EndFillRegion
]
