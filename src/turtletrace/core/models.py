from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field


class TurtleSnapshot(BaseModel):
    """
    Point-in-time view of a turtle for host display setup.
    Values are copied as-is; NaN/Infinity pass through unchecked.
    """

    x: float = Field(..., description="Cartesian x, origin at home")
    y: float = Field(..., description="Cartesian y, origin at home")
    angle: float = Field(..., description="Heading in degrees, 90 = up")
    pen: bool = Field(..., description="Whether movement draws")
    fill: bool = Field(..., description="Whether a fill region is open")
    color: Tuple[int, int, int] = Field(
        ..., description="Stroke/fill color (r, g, b)"
    )

    model_config = {"frozen": True}

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"TurtleSnapshot(({self.x:g}, {self.y:g}) @ {self.angle:g} "
            f"pen={'down' if self.pen else 'up'})"
        )


__all__ = ["TurtleSnapshot"]
