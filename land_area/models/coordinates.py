"""Coordinate value types.

A ``GeographicCoordinate`` is a parsed GPS reading in signed decimal
degrees.  A ``PlanarPoint`` is a vertex in a local metric frame, either
produced by the local projection or entered directly by the surveyor.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeographicCoordinate:
    """A WGS 84 position in signed decimal degrees.

    Attributes:
        latitude: Degrees north (negative for south).
        longitude: Degrees east (negative for west).
    """

    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> GeographicCoordinate:
        """Deserialise from a ``{"lat": ..., "lng": ...}`` mapping.

        Raises:
            KeyError: If either key is missing.
            TypeError: If a value is not numeric.
        """
        return cls(
            latitude=_as_float(data["lat"], "lat"),
            longitude=_as_float(data["lng"], "lng"),
        )


@dataclass(frozen=True, slots=True)
class PlanarPoint:
    """A polygon vertex in metres, relative to a local origin."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> PlanarPoint:
        """Deserialise from an ``{"x": ..., "y": ...}`` mapping.

        Raises:
            KeyError: If either key is missing.
            TypeError: If a value is not numeric.
        """
        return cls(x=_as_float(data["x"], "x"), y=_as_float(data["y"], "y"))

    @classmethod
    def coerce(cls, value: object) -> PlanarPoint:
        """Build a point from a ``PlanarPoint``, an x/y mapping or an ``(x, y)`` pair.

        Raises:
            TypeError: If *value* has none of the accepted shapes.
        """
        if isinstance(value, PlanarPoint):
            return value
        if isinstance(value, Mapping):
            if "x" not in value or "y" not in value:
                msg = f"point mapping must have 'x' and 'y' keys, got {sorted(value)}"
                raise TypeError(msg)
            return cls.from_dict(value)
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            if len(value) != 2:
                msg = f"point pair must have exactly 2 elements, got {len(value)}"
                raise TypeError(msg)
            return cls(x=_as_float(value[0], "x"), y=_as_float(value[1], "y"))
        msg = f"cannot interpret {type(value).__name__} as a planar point"
        raise TypeError(msg)


def _as_float(value: object, name: str) -> float:
    # bool is an int subclass; a checkbox value is never a coordinate
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise TypeError(msg)
    return float(value)
