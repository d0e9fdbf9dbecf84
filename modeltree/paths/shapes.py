"""Path types: the geometric primitives a model owns.

Every path is defined in the coordinate frame of the model that owns it.
The ``type`` field discriminates the variants when a drawing is loaded
from JSON.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from ..core.point import Point


class Line(BaseModel):
    """A straight segment between two points."""

    type: Literal["line"] = "line"
    origin: Point = Field(description="Start point")
    end: Point = Field(description="End point")

    model_config = {"frozen": False}


class Circle(BaseModel):
    """A full circle."""

    type: Literal["circle"] = "circle"
    origin: Point = Field(description="Center point")
    radius: float = Field(description="Radius")

    model_config = {"frozen": False}


class Arc(BaseModel):
    """A circular arc swept counter-clockwise from start_angle to end_angle.

    Angles are in degrees, measured counter-clockwise from the +X axis.
    """

    type: Literal["arc"] = "arc"
    origin: Point = Field(description="Center point")
    radius: float = Field(description="Radius")
    start_angle: float = Field(description="Start angle in degrees")
    end_angle: float = Field(description="End angle in degrees")

    model_config = {"frozen": False}

    @property
    def sweep(self) -> float:
        """Swept angle in degrees, always in [0, 360]."""
        end_angle = self.end_angle
        while end_angle < self.start_angle:
            end_angle += 360
        return end_angle - self.start_angle


Path = Annotated[Union[Line, Circle, Arc], Field(discriminator="type")]
