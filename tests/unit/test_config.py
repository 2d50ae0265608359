"""Tests for calculator configuration.

Covers:
- Default values reproduce the reference calculator output
- Loading from environment variables
- Type coercion (string env vars → numeric / boolean fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from land_area.core.config import CalculatorConfig, ConfigValidationError


class TestCalculatorConfigDefaults:
    """Verify default configuration values."""

    def test_default_precision(self) -> None:
        cfg = CalculatorConfig()
        assert cfg.area_precision == 2
        assert cfg.unit_precision == 4

    def test_default_origin(self) -> None:
        assert CalculatorConfig().projection_origin == "first"

    def test_hardening_off_by_default(self) -> None:
        cfg = CalculatorConfig()
        assert cfg.strict_coordinate_bounds is False
        assert cfg.check_simple_polygon is False
        assert cfg.geodesic_cross_check is False

    def test_default_limits(self) -> None:
        cfg = CalculatorConfig()
        assert cfg.area_warning_threshold_m2 == 1_000_000.0
        assert cfg.max_points == 500


class TestCalculatorConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "LAND_AREA_AREA_PRECISION": "3",
            "LAND_AREA_UNIT_PRECISION": "6",
            "LAND_AREA_PROJECTION_ORIGIN": "Centroid",
            "LAND_AREA_STRICT_BOUNDS": "true",
            "LAND_AREA_CHECK_SIMPLE_POLYGON": "1",
            "LAND_AREA_GEODESIC_CROSS_CHECK": "YES",
            "LAND_AREA_WARNING_THRESHOLD_M2": "50000",
            "LAND_AREA_MAX_POINTS": "100",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = CalculatorConfig.from_env()

        assert cfg.area_precision == 3
        assert cfg.unit_precision == 6
        assert cfg.projection_origin == "centroid"
        assert cfg.strict_coordinate_bounds is True
        assert cfg.check_simple_polygon is True
        assert cfg.geodesic_cross_check is True
        assert cfg.area_warning_threshold_m2 == 50_000.0
        assert cfg.max_points == 100

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = CalculatorConfig.from_env()
        assert cfg == CalculatorConfig()

    def test_blank_boolean_uses_default(self) -> None:
        with patch.dict(os.environ, {"LAND_AREA_STRICT_BOUNDS": "  "}, clear=True):
            cfg = CalculatorConfig.from_env()
        assert cfg.strict_coordinate_bounds is False

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_false_booleans(self, value: str) -> None:
        with patch.dict(os.environ, {"LAND_AREA_CHECK_SIMPLE_POLYGON": value}, clear=True):
            cfg = CalculatorConfig.from_env()
        assert cfg.check_simple_polygon is False

    def test_frozen_immutability(self) -> None:
        """CalculatorConfig is frozen (immutable)."""
        cfg = CalculatorConfig()
        with pytest.raises(AttributeError):
            cfg.max_points = 10  # type: ignore[misc]


class TestCalculatorConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_unrecognised_boolean_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_STRICT_BOUNDS": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="LAND_AREA_STRICT_BOUNDS"),
        ):
            CalculatorConfig.from_env()

    def test_negative_precision_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_AREA_PRECISION": "-1"}, clear=True),
            pytest.raises(ConfigValidationError, match="LAND_AREA_AREA_PRECISION"),
        ):
            CalculatorConfig.from_env()

    def test_excessive_unit_precision_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_UNIT_PRECISION": "11"}, clear=True),
            pytest.raises(ConfigValidationError, match="between 0 and 10"),
        ):
            CalculatorConfig.from_env()

    def test_precision_boundaries_accepted(self) -> None:
        env = {"LAND_AREA_AREA_PRECISION": "0", "LAND_AREA_UNIT_PRECISION": "10"}
        with patch.dict(os.environ, env, clear=True):
            cfg = CalculatorConfig.from_env()
        assert cfg.area_precision == 0
        assert cfg.unit_precision == 10

    def test_unknown_origin_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_PROJECTION_ORIGIN": "corner"}, clear=True),
            pytest.raises(ConfigValidationError, match="LAND_AREA_PROJECTION_ORIGIN"),
        ):
            CalculatorConfig.from_env()

    def test_zero_threshold_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_WARNING_THRESHOLD_M2": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be > 0"),
        ):
            CalculatorConfig.from_env()

    def test_max_points_below_polygon_minimum_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_MAX_POINTS": "2"}, clear=True),
            pytest.raises(ConfigValidationError, match="LAND_AREA_MAX_POINTS"),
        ):
            CalculatorConfig.from_env()

    def test_non_numeric_value_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"LAND_AREA_MAX_POINTS": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            CalculatorConfig.from_env()

    def test_error_attributes(self) -> None:
        err = ConfigValidationError("LAND_AREA_MAX_POINTS", 2, "must be >= 3")
        assert err.key == "LAND_AREA_MAX_POINTS"
        assert err.value == 2
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.stage == "config"
        assert err.category == "validation"
