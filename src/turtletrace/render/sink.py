"""Draw sink protocol and a recording implementation.

The interpreter only ever emits into a :class:`DrawSink`; it never queries
it. Backends (pygame, a test recorder, anything else) implement the five
methods below.
"""

from __future__ import annotations

from typing import List, Protocol

from turtletrace.core.commands import RGB

from .primitives import (
    AddFillVertex,
    BeginFillRegion,
    DrawLine,
    EndFillRegion,
    Point,
    Primitive,
    SetStrokeAndFillColor,
)

__all__ = ["DrawSink", "RecordingSink", "emit"]


class DrawSink(Protocol):
    def set_stroke_and_fill_color(self, rgb: RGB) -> None:
        ...

    def draw_line(self, p0: Point, p1: Point) -> None:
        ...

    def begin_fill_region(self) -> None:
        ...

    def add_fill_vertex(self, p: Point) -> None:
        ...

    def end_fill_region(self) -> None:
        ...


def emit(sink: DrawSink, prim: Primitive) -> None:
    """Deliver a primitive value to the matching sink method."""
    if isinstance(prim, SetStrokeAndFillColor):
        sink.set_stroke_and_fill_color(prim.rgb)
    elif isinstance(prim, DrawLine):
        sink.draw_line(prim.p0, prim.p1)
    elif isinstance(prim, BeginFillRegion):
        sink.begin_fill_region()
    elif isinstance(prim, AddFillVertex):
        sink.add_fill_vertex(prim.p)
    elif isinstance(prim, EndFillRegion):
        sink.end_fill_region()
    else:
        raise TypeError(f"unknown primitive: {prim!r}")


class RecordingSink(DrawSink):
    """Sink that keeps every primitive it receives, in order.

    Useful for tests and for hosts that want to post-process or forward the
    primitive stream (``for p in sink.primitives: emit(other, p)``).
    """

    def __init__(self) -> None:
        self.primitives: List[Primitive] = []

    def set_stroke_and_fill_color(self, rgb: RGB) -> None:
        self.primitives.append(SetStrokeAndFillColor(rgb))

    def draw_line(self, p0: Point, p1: Point) -> None:
        self.primitives.append(DrawLine(p0, p1))

    def begin_fill_region(self) -> None:
        self.primitives.append(BeginFillRegion())

    def add_fill_vertex(self, p: Point) -> None:
        self.primitives.append(AddFillVertex(p))

    def end_fill_region(self) -> None:
        self.primitives.append(EndFillRegion())

    def lines(self) -> List[DrawLine]:
        return [p for p in self.primitives if isinstance(p, DrawLine)]

    def clear(self) -> None:
        self.primitives = []
