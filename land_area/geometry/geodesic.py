"""Ellipsoidal area of a GPS polygon, for cross-checking the local projection.

Uses ``pyproj.Geod`` on the WGS 84 ellipsoid.  The calculator reports
the Shoelace area of the projected polygon; this value only measures how
far the flat-earth approximation drifts for a given plot.
"""

from __future__ import annotations

from collections.abc import Sequence

from land_area.core.constants import MIN_POLYGON_POINTS
from land_area.models.coordinates import GeographicCoordinate


def geodesic_area_m2(coords: Sequence[GeographicCoordinate]) -> float:
    """Compute the geodesic polygon area in square metres.

    Returns the absolute area (winding-order agnostic), or ``0.0`` for
    fewer than three vertices.
    """
    if len(coords) < MIN_POLYGON_POINTS:
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    lons = [c.longitude for c in coords]
    lats = [c.latitude for c in coords]

    # Geod.polygon_area_perimeter returns (area_m2, perimeter_m)
    area_m2, _perimeter = geod.polygon_area_perimeter(lons, lats)
    return abs(area_m2)


def deviation_pct(planar_m2: float, geodesic_m2: float) -> float:
    """Relative difference of *planar_m2* from *geodesic_m2*, in percent.

    Returns ``0.0`` when the geodesic area is zero.
    """
    if geodesic_m2 == 0:
        return 0.0
    return (planar_m2 - geodesic_m2) / geodesic_m2 * 100.0
