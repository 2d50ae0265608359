"""Unit tests for the local equirectangular projection."""

from __future__ import annotations

import math

import pytest

from land_area.geometry.dms import parse_dms_coordinate
from land_area.geometry.projection import metres_per_degree, project_to_local_plane
from land_area.geometry.shoelace import polygon_area
from land_area.models.coordinates import GeographicCoordinate, PlanarPoint


class TestMetresPerDegree:
    """Empirical WGS 84 series."""

    def test_equator(self) -> None:
        per_lat, per_lng = metres_per_degree(0.0)
        assert per_lat == pytest.approx(111132.92 - 559.82 + 1.175)
        assert per_lng == pytest.approx(111412.84 - 93.5)

    def test_mid_latitude(self) -> None:
        phi = math.radians(24.4)
        per_lat, per_lng = metres_per_degree(phi)
        assert per_lat == pytest.approx(110_764, abs=5)
        assert per_lng == pytest.approx(101_435, abs=5)

    def test_longitude_degree_shrinks_towards_pole(self) -> None:
        _, at_equator = metres_per_degree(0.0)
        _, at_sixty = metres_per_degree(math.radians(60))
        assert at_sixty == pytest.approx(at_equator / 2, rel=0.01)

    def test_latitude_degree_grows_towards_pole(self) -> None:
        at_equator, _ = metres_per_degree(0.0)
        at_pole, _ = metres_per_degree(math.radians(90))
        assert at_pole > at_equator


class TestProjectToLocalPlane:
    """Projection of GPS vertices to metres."""

    def test_first_vertex_is_origin(self, sample_gps: list[str]) -> None:
        coords = [parse_dms_coordinate(s) for s in sample_gps]
        points = project_to_local_plane(coords)
        assert points[0] == PlanarPoint(0.0, 0.0)

    def test_preserves_length_and_order(self) -> None:
        coords = [
            GeographicCoordinate(24.0, 88.0),
            GeographicCoordinate(24.0, 88.001),
            GeographicCoordinate(24.001, 88.001),
        ]
        points = project_to_local_plane(coords)
        assert len(points) == 3
        assert points[1].x > 0
        assert points[1].y == pytest.approx(0.0)
        assert points[2].y > 0

    def test_axes_use_mean_latitude_factors(self) -> None:
        coords = [
            GeographicCoordinate(0.0, 0.0),
            GeographicCoordinate(0.0, 0.001),
            GeographicCoordinate(0.001, 0.001),
        ]
        per_lat, per_lng = metres_per_degree(math.radians(0.001 / 3))
        points = project_to_local_plane(coords)
        assert points[1].x == pytest.approx(0.001 * per_lng)
        assert points[2].y == pytest.approx(0.001 * per_lat)

    def test_southern_hemisphere(self) -> None:
        coords = [
            GeographicCoordinate(-24.0, 152.0),
            GeographicCoordinate(-24.0, 152.001),
            GeographicCoordinate(-24.001, 152.001),
        ]
        points = project_to_local_plane(coords)
        assert points[2].y < 0

    @pytest.mark.parametrize("count", [0, 1])
    def test_degenerate_input_yields_empty(self, count: int) -> None:
        coords = [GeographicCoordinate(24.0, 88.0)] * count
        assert project_to_local_plane(coords) == []

    def test_centroid_origin_does_not_change_area(self, sample_gps: list[str]) -> None:
        coords = [parse_dms_coordinate(s) for s in sample_gps]
        first = polygon_area(project_to_local_plane(coords))
        centroid = polygon_area(project_to_local_plane(coords, origin="centroid"))
        assert centroid == pytest.approx(first, rel=1e-9)

    def test_centroid_origin_centres_the_frame(self, sample_gps: list[str]) -> None:
        coords = [parse_dms_coordinate(s) for s in sample_gps]
        points = project_to_local_plane(coords, origin="centroid")
        assert sum(p.x for p in points) == pytest.approx(0.0, abs=1e-6)
        assert sum(p.y for p in points) == pytest.approx(0.0, abs=1e-6)

    def test_unknown_origin_rejected(self) -> None:
        with pytest.raises(ValueError, match="origin"):
            project_to_local_plane([GeographicCoordinate(0, 0)], origin="corner")
