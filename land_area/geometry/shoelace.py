"""Polygon area by the Shoelace (Gauss) formula.

Works in whatever planar unit the vertices are given in, so metre input
yields square metres.  Vertices must be in boundary order; orientation
(clockwise or counter-clockwise) does not matter for ``polygon_area``.
The ring is closed implicitly.
"""

from __future__ import annotations

from collections.abc import Sequence

from land_area.core.constants import MIN_POLYGON_POINTS
from land_area.models.coordinates import PlanarPoint


def signed_area(points: Sequence[PlanarPoint]) -> float:
    """Signed polygon area; positive for counter-clockwise traversal.

    Returns ``0.0`` for fewer than three vertices.
    """
    n = len(points)
    if n < MIN_POLYGON_POINTS:
        return 0.0

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += points[i].x * points[j].y - points[j].x * points[i].y
    return total / 2


def polygon_area(points: Sequence[PlanarPoint]) -> float:
    """Unsigned polygon area in the squared unit of the input.

    Collinear vertices give ``0.0``.  Self-intersecting rings give a
    well-defined but not geometrically meaningful value; see
    ``is_simple_polygon``.
    """
    return abs(signed_area(points))


def is_simple_polygon(points: Sequence[PlanarPoint]) -> bool:
    """Whether the ring is a valid simple polygon (no self-intersection).

    Uses shapely's OGC validity rules.  Fewer than three vertices are
    never simple.
    """
    if len(points) < MIN_POLYGON_POINTS:
        return False

    from shapely.geometry import Polygon

    return bool(Polygon([(p.x, p.y) for p in points]).is_valid)
