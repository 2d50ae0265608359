"""Local equirectangular projection of GPS vertices to metres.

Plots are building-lot to field scale, so a flat local frame is accurate
to well within GPS error.  Longitude and latitude are scaled
independently by empirical WGS 84 metres-per-degree series evaluated at
the mean latitude of the input.

The origin of the frame is the first vertex by default.  The centroid
origin shifts every point by the same offset, which leaves the Shoelace
area unchanged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from land_area.core.constants import (
    LAT_SERIES_M,
    LNG_SERIES_M,
    ORIGIN_CENTROID,
    ORIGIN_FIRST,
    VALID_ORIGINS,
)
from land_area.models.coordinates import GeographicCoordinate, PlanarPoint

logger = logging.getLogger("land_area.geometry.projection")


def metres_per_degree(latitude_rad: float) -> tuple[float, float]:
    """Ground length of one degree of latitude and longitude.

    Args:
        latitude_rad: Latitude in radians at which to evaluate the series.

    Returns:
        ``(metres_per_degree_lat, metres_per_degree_lng)``
    """
    a, b, c = LAT_SERIES_M
    per_lat = a + b * math.cos(2 * latitude_rad) + c * math.cos(4 * latitude_rad)
    d, e = LNG_SERIES_M
    per_lng = d * math.cos(latitude_rad) + e * math.cos(3 * latitude_rad)
    return per_lat, per_lng


def project_to_local_plane(
    coords: Sequence[GeographicCoordinate],
    *,
    origin: str = ORIGIN_FIRST,
) -> list[PlanarPoint]:
    """Project GPS vertices onto a local metric plane.

    Args:
        coords: Vertices in decimal degrees, in boundary order.
        origin: ``"first"`` to place the first vertex at ``(0, 0)``, or
            ``"centroid"`` to use the mean latitude/longitude.

    Returns:
        One ``PlanarPoint`` per input vertex, in input order.  Fewer than
        two vertices cannot describe a frame and yield an empty list.

    Raises:
        ValueError: If *origin* is not a supported origin.
    """
    if origin not in VALID_ORIGINS:
        msg = f"Unknown projection origin {origin!r}; expected one of {sorted(VALID_ORIGINS)}"
        raise ValueError(msg)
    if len(coords) < 2:
        return []

    mean_lat = sum(c.latitude for c in coords) / len(coords)
    per_lat, per_lng = metres_per_degree(math.radians(mean_lat))

    if origin == ORIGIN_CENTROID:
        origin_lat = mean_lat
        origin_lng = sum(c.longitude for c in coords) / len(coords)
    else:
        origin_lat = coords[0].latitude
        origin_lng = coords[0].longitude

    logger.debug(
        "Local projection | vertices=%d | mean_lat=%.6f | m_per_deg_lat=%.3f | "
        "m_per_deg_lng=%.3f | origin=%s",
        len(coords),
        mean_lat,
        per_lat,
        per_lng,
        origin,
    )

    return [
        PlanarPoint(
            x=(c.longitude - origin_lng) * per_lng,
            y=(c.latitude - origin_lat) * per_lat,
        )
        for c in coords
    ]
