"""Geometry stages of the area calculation.

- dms: Parse DMS coordinate strings into decimal degrees
- projection: Project GPS vertices onto a local metric plane
- shoelace: Polygon area and simplicity check
- geodesic: Ellipsoidal area for cross-checking the projection
"""

from land_area.geometry.dms import (
    CoordinateRangeError,
    MalformedCoordinateError,
    dms_to_decimal,
    parse_dms_coordinate,
    validate_geographic_bounds,
)
from land_area.geometry.geodesic import deviation_pct, geodesic_area_m2
from land_area.geometry.projection import metres_per_degree, project_to_local_plane
from land_area.geometry.shoelace import is_simple_polygon, polygon_area, signed_area

__all__ = [
    "CoordinateRangeError",
    "MalformedCoordinateError",
    "deviation_pct",
    "dms_to_decimal",
    "geodesic_area_m2",
    "is_simple_polygon",
    "metres_per_degree",
    "parse_dms_coordinate",
    "polygon_area",
    "project_to_local_plane",
    "signed_area",
    "validate_geographic_bounds",
]
