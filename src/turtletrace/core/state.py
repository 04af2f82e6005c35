"""Mutable turtle state and its command log.

A :class:`TurtleState` is the single mutable cell behind one turtle: its
pose, pen, fill and color, plus the ordered log of every command applied
since construction or the last ``clean``. It knows nothing about drawing;
the recorder mutates it and the interpreter replays its log.

Angles are degrees. Heading 90 faces "up" (mathematical frame, y grows
upwards), 0 faces right, and ``right`` turns decrease the heading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .commands import RGB, Command
from .models import TurtleSnapshot

__all__ = [
    "HOME_X",
    "HOME_Y",
    "HOME_HEADING",
    "DEFAULT_COLOR",
    "TurtleState",
    "normalize_angle",
]

HOME_X: float = 0.0
HOME_Y: float = 0.0
HOME_HEADING: float = 90.0
DEFAULT_COLOR: RGB = (0, 0, 0)


def normalize_angle(angle_deg: float) -> float:
    """Map a heading into [0, 360) using floored modulo.

    Python's float ``%`` already follows the sign of the divisor, but a tiny
    negative input rounds up to exactly 360.0; fold that back to 0.0.
    """
    a = angle_deg % 360.0
    if a == 360.0:
        a = 0.0
    return a


@dataclass(slots=True)
class TurtleState:
    x: float = HOME_X
    y: float = HOME_Y
    angle: float = HOME_HEADING
    pen: bool = True
    fill: bool = False
    color: RGB = DEFAULT_COLOR
    commands: List[Command] = field(default_factory=list)

    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def heading(self) -> float:
        return self.angle

    def isdown(self) -> bool:
        return self.pen

    def filling(self) -> bool:
        return self.fill

    def snapshot(self) -> TurtleSnapshot:
        """Return a read-only copy of the pose, pen, fill and color."""
        return TurtleSnapshot(
            x=self.x,
            y=self.y,
            angle=self.angle,
            pen=self.pen,
            fill=self.fill,
            color=self.color,
        )

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"TurtleState(({self.x:g}, {self.y:g}) @ {self.angle:g}, "
            f"{len(self.commands)} commands)"
        )
