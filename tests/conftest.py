"""Shared pytest fixtures for the Land Area Calculator test suite."""

import pytest

from land_area.core.constants import SAMPLE_GPS_COORDINATES
from land_area.models.coordinates import PlanarPoint

# ---------------------------------------------------------------------------
# Planar polygon fixtures (metres)
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_10m() -> list[PlanarPoint]:
    """10 m × 10 m square, counter-clockwise (100 m²)."""
    return [PlanarPoint(0, 0), PlanarPoint(10, 0), PlanarPoint(10, 10), PlanarPoint(0, 10)]


@pytest.fixture()
def l_shape() -> list[PlanarPoint]:
    """Concave L-shaped plot: 20 × 10 minus a 10 × 5 notch (150 m²)."""
    return [
        PlanarPoint(0, 0),
        PlanarPoint(20, 0),
        PlanarPoint(20, 5),
        PlanarPoint(10, 5),
        PlanarPoint(10, 10),
        PlanarPoint(0, 10),
    ]


@pytest.fixture()
def bow_tie() -> list[PlanarPoint]:
    """Self-intersecting ring whose two lobes cancel out."""
    return [PlanarPoint(0, 0), PlanarPoint(10, 10), PlanarPoint(10, 0), PlanarPoint(0, 10)]


# ---------------------------------------------------------------------------
# GPS fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_gps() -> list[str]:
    """Eight-vertex DMS plot near 24°24'N 88°37'E."""
    return list(SAMPLE_GPS_COORDINATES)
