"""Data models and schemas.

Defines the data structures used throughout the calculator:
- GeographicCoordinate: Parsed GPS reading in decimal degrees
- PlanarPoint: Polygon vertex in a local metric frame
- AreaResult: Area expressed in every supported unit
- AreaCalculation: AreaResult plus calculation diagnostics
- AreaRequest: Pydantic schema for the HTTP request body
"""

from land_area.models.area import AreaCalculation, AreaResult
from land_area.models.coordinates import GeographicCoordinate, PlanarPoint

__all__ = [
    "AreaCalculation",
    "AreaResult",
    "GeographicCoordinate",
    "PlanarPoint",
]
