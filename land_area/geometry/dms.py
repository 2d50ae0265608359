"""Degree-minute-second (DMS) coordinate parsing.

Converts a GPS reading such as ``24°24'10.5"N 88°37'34.7"E`` into a
signed decimal-degree ``GeographicCoordinate``.

The latitude pattern only accepts ``N``/``S`` and the longitude pattern
only ``E``/``W``, so the two parts are located independently and may
appear in either order.  Degree, minute and second values are not range
checked unless ``validate_geographic_bounds`` is called (strict mode).
"""

from __future__ import annotations

import logging
import math
import re

from land_area.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MINUTES_PER_DEGREE,
    SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE,
)
from land_area.core.exceptions import ValidationError
from land_area.models.coordinates import GeographicCoordinate

logger = logging.getLogger("land_area.geometry.dms")

_LATITUDE_RE = re.compile(r"(\d+)°(\d+)'([\d.]+)\"([NS])")
_LONGITUDE_RE = re.compile(r"(\d+)°(\d+)'([\d.]+)\"([EW])")

_NEGATIVE_HEMISPHERES = frozenset({"S", "W"})


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MalformedCoordinateError(ValidationError):
    """Raised when a coordinate string does not match the DMS pattern.

    Attributes:
        coordinate: The offending input string.
        index: Position of the string in the request, or ``None``.
    """

    default_stage = "parse_dms"
    default_code = "MALFORMED_COORDINATE"

    def __init__(self, coordinate: str, *, index: int | None = None) -> None:
        self.coordinate = coordinate
        self.index = index
        where = f" at position {index + 1}" if index is not None else ""
        super().__init__(f"Invalid GPS coordinate{where}: {coordinate}")


class CoordinateRangeError(ValidationError):
    """Raised in strict mode when a parsed coordinate is out of range.

    Attributes:
        index: Position of the coordinate in the request, or ``None``.
    """

    default_stage = "parse_dms"
    default_code = "COORDINATE_OUT_OF_RANGE"

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        where = f"Coordinate at position {index + 1}: " if index is not None else ""
        super().__init__(f"{where}{message}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def dms_to_decimal(degrees: float, minutes: float, seconds: float, hemisphere: str) -> float:
    """Convert sexagesimal components to signed decimal degrees.

    ``S`` and ``W`` hemispheres produce negative values.
    """
    value = degrees + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE
    if hemisphere.upper() in _NEGATIVE_HEMISPHERES:
        return -value
    return value


def parse_dms_coordinate(text: str, *, strict: bool = False) -> GeographicCoordinate:
    """Parse a ``D°M'S.s"H D°M'S.s"H`` string into a coordinate.

    Args:
        text: Latitude and longitude in DMS form, whitespace separated.
        strict: Also reject out-of-range latitude/longitude and
            minutes or seconds of 60 or more.

    Returns:
        The coordinate in signed decimal degrees.

    Raises:
        MalformedCoordinateError: If either the latitude or the longitude
            part is missing or unreadable.
        CoordinateRangeError: In strict mode, if a value is out of range.
    """
    normalized = text.strip()
    lat_match = _LATITUDE_RE.search(normalized)
    lng_match = _LONGITUDE_RE.search(normalized)
    if lat_match is None or lng_match is None:
        raise MalformedCoordinateError(text)

    try:
        lat_parts = _components(lat_match)
        lng_parts = _components(lng_match)
    except (ValueError, OverflowError) as exc:
        # "[\d.]+" admits values such as "1.2.3"; digit runs may exceed float range
        raise MalformedCoordinateError(text) from exc

    if strict:
        _validate_components(lat_parts, text)
        _validate_components(lng_parts, text)

    coord = GeographicCoordinate(
        latitude=dms_to_decimal(*lat_parts, lat_match.group(4)),
        longitude=dms_to_decimal(*lng_parts, lng_match.group(4)),
    )
    if strict:
        validate_geographic_bounds(coord, text)

    logger.debug(
        "Parsed DMS coordinate | input=%s | lat=%.6f | lng=%.6f",
        normalized,
        coord.latitude,
        coord.longitude,
    )
    return coord


def validate_geographic_bounds(coord: GeographicCoordinate, source: str = "") -> None:
    """Check that a coordinate lies within WGS 84 bounds.

    Raises:
        CoordinateRangeError: If latitude or longitude is out of range.
    """
    label = f" in '{source}'" if source else ""
    if not MIN_LATITUDE <= coord.latitude <= MAX_LATITUDE:
        msg = (
            f"Latitude {coord.latitude} out of WGS 84 range "
            f"[{MIN_LATITUDE}, {MAX_LATITUDE}]{label}"
        )
        raise CoordinateRangeError(msg)
    if not MIN_LONGITUDE <= coord.longitude <= MAX_LONGITUDE:
        msg = (
            f"Longitude {coord.longitude} out of WGS 84 range "
            f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}]{label}"
        )
        raise CoordinateRangeError(msg)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _components(match: re.Match[str]) -> tuple[float, float, float]:
    parts = (float(int(match.group(1))), float(int(match.group(2))), float(match.group(3)))
    if not all(math.isfinite(part) for part in parts):
        msg = f"DMS component out of float range: {match.group(0)}"
        raise ValueError(msg)
    return parts


def _validate_components(parts: tuple[float, float, float], source: str) -> None:
    _degrees, minutes, seconds = parts
    if minutes >= MINUTES_PER_DEGREE:
        msg = f"Minutes {minutes:g} must be < {MINUTES_PER_DEGREE} in '{source}'"
        raise CoordinateRangeError(msg)
    if seconds >= SECONDS_PER_MINUTE:
        msg = f"Seconds {seconds:g} must be < {SECONDS_PER_MINUTE} in '{source}'"
        raise CoordinateRangeError(msg)
