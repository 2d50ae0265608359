"""Pydantic request schema for the area calculation endpoint.

The HTTP boundary validates the incoming JSON body against
``AreaRequest`` before any geometry is computed, so that shape problems
(wrong mode, mixed point kinds) surface as contract errors rather than
deep inside the calculator.

Example bodies::

    {"mode": "manual", "points": [{"x": 0, "y": 0}, [10, 0], {"x": 10, "y": 10}]}
    {"mode": "gps", "points": ["24°24'10.5\\"N 88°37'34.7\\"E", ...]}
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, StrictFloat, field_validator, model_validator

from land_area.models.coordinates import PlanarPoint


class ManualPoint(BaseModel):
    """A planar vertex in metres.  Numeric strings are not coerced."""

    x: StrictFloat
    y: StrictFloat

    def to_planar(self) -> PlanarPoint:
        return PlanarPoint(x=self.x, y=self.y)


class AreaRequest(BaseModel):
    """Body of ``POST /api/area``.

    Attributes:
        mode: ``"manual"`` for metre coordinates, ``"gps"`` for DMS strings.
        points: Polygon vertices in boundary order.  Manual vertices may
            be ``{"x": .., "y": ..}`` objects or ``[x, y]`` pairs.
    """

    mode: Literal["manual", "gps"]
    points: list[ManualPoint | str] = Field(default_factory=list)

    @field_validator("points", mode="before")
    @classmethod
    def _pairs_to_objects(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        return [
            {"x": item[0], "y": item[1]} if _is_pair(item) else item
            for item in value
        ]

    @model_validator(mode="after")
    def _points_match_mode(self) -> AreaRequest:
        expected = str if self.mode == "gps" else ManualPoint
        for idx, point in enumerate(self.points):
            if not isinstance(point, expected):
                kind = "a DMS string" if self.mode == "gps" else "an {x, y} point"
                msg = f"point {idx} must be {kind} in {self.mode} mode"
                raise ValueError(msg)
        return self

    def calculator_points(self) -> list[PlanarPoint] | list[str]:
        """Return the points in the form ``calculate_area`` expects."""
        if self.mode == "gps":
            return [str(p) for p in self.points]
        return [p.to_planar() for p in self.points if isinstance(p, ManualPoint)]


def _is_pair(item: object) -> bool:
    return isinstance(item, list | tuple) and len(item) == 2
