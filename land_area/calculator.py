"""Land area calculation entry point.

Turns an ordered list of polygon vertices into an ``AreaResult``:

- **manual** mode: vertices are planar ``(x, y)`` metres and go straight
  to the Shoelace formula.
- **gps** mode: vertices are DMS strings; each is parsed, the set is
  projected onto a local metric plane, then measured.

Validation happens at the boundary, before any parsing: the mode must be
known and at least three vertices must be supplied.  Any malformed
vertex aborts the whole calculation; partial results are never returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from land_area.core.config import CalculatorConfig
from land_area.core.constants import (
    GPS_ACCURACY_NOTE,
    MIN_POLYGON_POINTS,
    MODE_GPS,
    MODE_MANUAL,
    SAMPLE_GPS_COORDINATES,
    SAMPLE_MANUAL_POINTS,
    VALID_MODES,
)
from land_area.core.exceptions import ValidationError
from land_area.conversion import convert_square_metres
from land_area.geometry.dms import (
    CoordinateRangeError,
    MalformedCoordinateError,
    parse_dms_coordinate,
)
from land_area.geometry.geodesic import deviation_pct, geodesic_area_m2
from land_area.geometry.projection import project_to_local_plane
from land_area.geometry.shoelace import is_simple_polygon, polygon_area
from land_area.models.area import AreaCalculation, AreaResult
from land_area.models.coordinates import GeographicCoordinate, PlanarPoint

logger = logging.getLogger("land_area.calculator")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidModeError(ValidationError):
    """Raised when the input mode is neither ``manual`` nor ``gps``."""

    default_stage = "calculate_area"
    default_code = "INVALID_MODE"


class InsufficientPointsError(ValidationError):
    """Raised when fewer than three vertices are supplied.

    Attributes:
        count: Number of vertices received.
    """

    default_stage = "calculate_area"
    default_code = "INSUFFICIENT_POINTS"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"At least {MIN_POLYGON_POINTS} coordinates are required, got {count}"
        )


class TooManyPointsError(ValidationError):
    """Raised when more vertices are supplied than the configured maximum."""

    default_stage = "calculate_area"
    default_code = "TOO_MANY_POINTS"


class MalformedPointError(ValidationError):
    """Raised when a manual-mode vertex is not an ``(x, y)`` pair.

    Attributes:
        index: Zero-based position of the vertex.
    """

    default_stage = "calculate_area"
    default_code = "MALFORMED_POINT"

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        super().__init__(f"Invalid coordinate at position {index + 1}: {reason}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_area(
    mode: str,
    points: Sequence[object],
    *,
    config: CalculatorConfig | None = None,
) -> AreaResult:
    """Compute the rounded area of a polygon in every supported unit.

    See ``calculate_area`` for arguments and errors.
    """
    return calculate_area(mode, points, config=config).result


def calculate_area(
    mode: str,
    points: Sequence[object],
    *,
    config: CalculatorConfig | None = None,
) -> AreaCalculation:
    """Compute a polygon's area together with calculation diagnostics.

    Args:
        mode: ``"manual"`` or ``"gps"``.
        points: Vertices in boundary order.  Manual mode accepts
            ``PlanarPoint`` objects, ``{"x", "y"}`` mappings or ``(x, y)``
            pairs in metres; gps mode accepts DMS strings.
        config: Calculator configuration (defaults to ``CalculatorConfig()``).

    Returns:
        An ``AreaCalculation`` whose ``result`` is rounded for display.

    Raises:
        InvalidModeError: If *mode* is not recognised.
        InsufficientPointsError: If fewer than three vertices are given.
        TooManyPointsError: If more than ``config.max_points`` are given.
        MalformedPointError: If a manual vertex cannot be read.
        MalformedCoordinateError: If a GPS string cannot be parsed.
        CoordinateRangeError: In strict mode, for out-of-range GPS values.
    """
    cfg = config or CalculatorConfig()

    if mode not in VALID_MODES:
        msg = f"Unknown input mode {mode!r}; expected one of {sorted(VALID_MODES)}"
        raise InvalidModeError(msg)
    _validate_count(len(points), cfg)

    geographic: list[GeographicCoordinate] = []
    if mode == MODE_GPS:
        geographic = _parse_gps_points(points, strict=cfg.strict_coordinate_bounds)
        planar = project_to_local_plane(geographic, origin=cfg.projection_origin)
    else:
        planar = _coerce_manual_points(points)

    raw_area = polygon_area(planar)
    warnings: list[str] = []

    is_simple: bool | None = None
    if cfg.check_simple_polygon:
        is_simple = is_simple_polygon(planar)
        if not is_simple:
            warning = (
                "Polygon boundary crosses itself or is degenerate; "
                "check the vertex order. Reported area may not be meaningful."
            )
            logger.warning("%s | mode=%s | vertices=%d", warning, mode, len(planar))
            warnings.append(warning)

    geodesic_m2: float | None = None
    deviation: float | None = None
    if cfg.geodesic_cross_check and mode == MODE_GPS:
        geodesic_m2 = geodesic_area_m2(geographic)
        deviation = deviation_pct(raw_area, geodesic_m2)

    if raw_area > cfg.area_warning_threshold_m2:
        warning = (
            f"Area {raw_area:.1f} m² exceeds threshold of "
            f"{cfg.area_warning_threshold_m2:.0f} m²"
        )
        logger.warning(warning)
        warnings.append(warning)

    result = convert_square_metres(raw_area).rounded(cfg.area_precision, cfg.unit_precision)

    logger.info(
        "Area calculated | mode=%s | vertices=%d | area=%.2f m² | katha=%.4f | decimal=%.4f",
        mode,
        len(planar),
        raw_area,
        result.katha,
        result.decimal,
    )

    return AreaCalculation(
        result=result,
        mode=mode,
        vertex_count=len(planar),
        raw_square_meters=raw_area,
        planar_points=planar,
        is_simple=is_simple,
        geodesic_square_meters=geodesic_m2,
        projection_deviation_pct=deviation,
        warnings=warnings,
        accuracy_note=GPS_ACCURACY_NOTE if mode == MODE_GPS else "",
    )


def load_sample(mode: str) -> list[str] | list[dict[str, float]]:
    """Return the example input for *mode*.

    ``gps`` gives the eight-vertex DMS plot; ``manual`` gives a
    10 m × 10 m square as ``{"x", "y"}`` dicts.

    Raises:
        InvalidModeError: If *mode* is not recognised.
    """
    if mode == MODE_GPS:
        return list(SAMPLE_GPS_COORDINATES)
    if mode == MODE_MANUAL:
        return [{"x": x, "y": y} for x, y in SAMPLE_MANUAL_POINTS]
    msg = f"Unknown input mode {mode!r}; expected one of {sorted(VALID_MODES)}"
    raise InvalidModeError(msg)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_count(count: int, cfg: CalculatorConfig) -> None:
    if count < MIN_POLYGON_POINTS:
        raise InsufficientPointsError(count)
    if count > cfg.max_points:
        msg = f"At most {cfg.max_points} coordinates are allowed, got {count}"
        raise TooManyPointsError(msg)


def _parse_gps_points(points: Sequence[object], *, strict: bool) -> list[GeographicCoordinate]:
    coords: list[GeographicCoordinate] = []
    for idx, raw in enumerate(points):
        if not isinstance(raw, str):
            raise MalformedCoordinateError(repr(raw), index=idx)
        try:
            coords.append(parse_dms_coordinate(raw, strict=strict))
        except MalformedCoordinateError as exc:
            raise MalformedCoordinateError(raw, index=idx) from exc
        except CoordinateRangeError as exc:
            raise CoordinateRangeError(exc.message, index=idx) from exc
    return coords


def _coerce_manual_points(points: Sequence[object]) -> list[PlanarPoint]:
    planar: list[PlanarPoint] = []
    for idx, raw in enumerate(points):
        try:
            planar.append(PlanarPoint.coerce(raw))
        except TypeError as exc:
            raise MalformedPointError(idx, str(exc)) from exc
    return planar
