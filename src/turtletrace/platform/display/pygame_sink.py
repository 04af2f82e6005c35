"""Pygame-backed DrawSink with headless (offscreen) support.

Paints interpreter primitives onto an offscreen pygame surface. It's
suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

The turtle frame is mapped onto the surface with the turtle origin at the
surface center and y growing upwards.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from turtletrace.platform.display.pygame_sink import render_png

    t = TurtleState()
    forward(100, t)
    render_png(t, "/tmp/turtle.png")
"""

from __future__ import annotations

import logging
import os
from math import isfinite
from pathlib import Path
from typing import List, Optional, Tuple

import pygame as pg

from turtletrace.config import get_runtime
from turtletrace.core.commands import RGB
from turtletrace.core.state import TurtleState
from turtletrace.render.interpreter import ReplayCursor
from turtletrace.render.primitives import Point
from turtletrace.render.scene import draw
from turtletrace.render.sink import DrawSink
from turtletrace.settings.schema import DisplaySettings

__all__ = ["PygameDrawSink", "render_png"]

logger = logging.getLogger(__name__)


def _pygame_color(c: RGB) -> Tuple[int, int, int, int]:
    r, g, b = c
    return int(r), int(g), int(b), 255


class PygameDrawSink(DrawSink):
    """DrawSink painting onto an offscreen pygame surface.

    Lines are drawn immediately. Fill vertices are collected while a region
    is open and painted as one polygon when it closes; the region's outline
    is then redrawn on top so the fill never hides its own edges.
    """

    def __init__(self, settings: Optional[DisplaySettings] = None) -> None:
        self._settings = settings if settings is not None else get_runtime()

        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        if not pg.get_init():
            pg.init()

        self._width = int(self._settings.width)
        self._height = int(self._settings.height)
        self._surface = pg.Surface((self._width, self._height), flags=pg.SRCALPHA)
        self._color: RGB = (0, 0, 0)
        self._region: Optional[List[Tuple[int, int]]] = None
        self._region_lines: List[Tuple[Tuple[int, int], Tuple[int, int], RGB]] = []
        self.clear()

    # Coordinates ---------------------------------------------------------
    def to_screen(self, p: Point) -> Optional[Tuple[int, int]]:
        """Map a turtle-frame point to surface pixels; None if non-finite."""
        x, y = p
        if not (isfinite(x) and isfinite(y)):
            return None
        return (
            int(round(self._width / 2.0 + x)),
            int(round(self._height / 2.0 - y)),
        )

    # DrawSink ------------------------------------------------------------
    def set_stroke_and_fill_color(self, rgb: RGB) -> None:
        self._color = rgb

    def draw_line(self, p0: Point, p1: Point) -> None:
        a = self.to_screen(p0)
        b = self.to_screen(p1)
        if a is None or b is None:
            logger.debug("skipping non-finite segment %r -> %r", p0, p1)
            return
        self._line(a, b, self._color)
        if self._region is not None:
            self._region_lines.append((a, b, self._color))

    def begin_fill_region(self) -> None:
        self._region = []
        self._region_lines = []

    def add_fill_vertex(self, p: Point) -> None:
        if self._region is None:
            logger.debug("fill vertex %r outside a fill region", p)
            return
        s = self.to_screen(p)
        if s is None:
            return
        if not self._region or self._region[-1] != s:
            self._region.append(s)

    def end_fill_region(self) -> None:
        pts = self._region or []
        self._region = None
        if len(set(pts)) < 3:
            logger.warning("fill region with %d vertices not painted", len(pts))
        else:
            pg.draw.polygon(self._surface, _pygame_color(self._color), pts, 0)
            for a, b, rgb in self._region_lines:
                self._line(a, b, rgb)
        self._region_lines = []

    # Surface -------------------------------------------------------------
    def _line(self, a: Tuple[int, int], b: Tuple[int, int], rgb: RGB) -> None:
        pg.draw.line(
            self._surface,
            _pygame_color(rgb),
            a,
            b,
            int(self._settings.stroke_width),
        )

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def clear(self) -> None:
        self._surface.fill(_pygame_color(self._settings.background))

    def get_at(self, p: Point) -> Tuple[int, int, int]:
        """Return the surface color under turtle-frame point *p*."""
        s = self.to_screen(p)
        if s is None:
            raise ValueError(f"point is not finite: {p!r}")
        c = self._surface.get_at(s)
        return (c.r, c.g, c.b)

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        pg.image.save(self._surface, path)


def render_png(
    state: TurtleState,
    path: str,
    settings: Optional[DisplaySettings] = None,
) -> ReplayCursor:
    """Draw *state* (log plus optional sprite) and save it as a PNG."""
    cfg = settings if settings is not None else get_runtime()
    sink = PygameDrawSink(cfg)
    cur = draw(state, sink, show_turtle=cfg.show_turtle, sprite_size=cfg.sprite_size)
    sink.save_png(path)
    return cur
