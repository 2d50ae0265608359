"""Calculator configuration loaded from environment variables.

All configuration values have defaults that reproduce the reference
calculator output exactly.  Azure Functions app settings (or
``local.settings.json`` for local dev) are the source of truth.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range or a boolean flag cannot be interpreted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from land_area.core.constants import (
    DEFAULT_AREA_PRECISION,
    DEFAULT_UNIT_PRECISION,
    MIN_POLYGON_POINTS,
    ORIGIN_FIRST,
    VALID_ORIGINS,
)
from land_area.core.exceptions import ValidationError

MAX_PRECISION = 10

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CalculatorConfig:
    """Immutable calculator configuration.

    Loaded once at function startup and passed to every calculation.

    Attributes:
        area_precision: Decimal places for square metres / square feet.
        unit_precision: Decimal places for katha, bigha, acre, decimal,
            shotok and kani.
        projection_origin: Local frame origin for GPS input
            (``"first"`` vertex or ``"centroid"``).
        strict_coordinate_bounds: Reject latitudes/longitudes outside
            WGS 84 and minutes/seconds >= 60.
        check_simple_polygon: Detect self-intersecting polygons and
            report a warning (area is unchanged).
        geodesic_cross_check: Compare the projected GPS area against the
            WGS 84 ellipsoidal area.
        area_warning_threshold_m2: Area above which a warning is reported.
        max_points: Upper bound on vertices per request.
    """

    area_precision: int = DEFAULT_AREA_PRECISION
    unit_precision: int = DEFAULT_UNIT_PRECISION
    projection_origin: str = ORIGIN_FIRST
    strict_coordinate_bounds: bool = False
    check_simple_polygon: bool = False
    geodesic_cross_check: bool = False
    area_warning_threshold_m2: float = 1_000_000.0
    max_points: int = 500

    @classmethod
    def from_env(cls) -> CalculatorConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                boolean flag is not recognised.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``LAND_AREA_MAX_POINTS=abc``).
        """
        config = cls(
            area_precision=int(os.getenv("LAND_AREA_AREA_PRECISION", "2")),
            unit_precision=int(os.getenv("LAND_AREA_UNIT_PRECISION", "4")),
            projection_origin=os.getenv("LAND_AREA_PROJECTION_ORIGIN", ORIGIN_FIRST).lower(),
            strict_coordinate_bounds=_env_bool("LAND_AREA_STRICT_BOUNDS", default=False),
            check_simple_polygon=_env_bool("LAND_AREA_CHECK_SIMPLE_POLYGON", default=False),
            geodesic_cross_check=_env_bool("LAND_AREA_GEODESIC_CROSS_CHECK", default=False),
            area_warning_threshold_m2=float(
                os.getenv("LAND_AREA_WARNING_THRESHOLD_M2", "1000000")
            ),
            max_points=int(os.getenv("LAND_AREA_MAX_POINTS", "500")),
        )
        _validate(config)
        return config


def _env_bool(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")


def _validate(config: CalculatorConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not 0 <= config.area_precision <= MAX_PRECISION:
        raise ConfigValidationError(
            "LAND_AREA_AREA_PRECISION",
            config.area_precision,
            f"must be between 0 and {MAX_PRECISION} (decimal places)",
        )

    if not 0 <= config.unit_precision <= MAX_PRECISION:
        raise ConfigValidationError(
            "LAND_AREA_UNIT_PRECISION",
            config.unit_precision,
            f"must be between 0 and {MAX_PRECISION} (decimal places)",
        )

    if config.projection_origin not in VALID_ORIGINS:
        raise ConfigValidationError(
            "LAND_AREA_PROJECTION_ORIGIN",
            config.projection_origin,
            f"must be one of {sorted(VALID_ORIGINS)}",
        )

    if config.area_warning_threshold_m2 <= 0:
        raise ConfigValidationError(
            "LAND_AREA_WARNING_THRESHOLD_M2",
            config.area_warning_threshold_m2,
            "must be > 0 (square metres)",
        )

    if config.max_points < MIN_POLYGON_POINTS:
        raise ConfigValidationError(
            "LAND_AREA_MAX_POINTS",
            config.max_points,
            f"must be >= {MIN_POLYGON_POINTS}",
        )
