"""Shared calculator constants — single source of truth.

Centralises the input modes, geometric limits, projection coefficients,
unit ratios and sample inputs used across the geometry stages, the
calculator and the HTTP boundary.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Input modes
# ---------------------------------------------------------------------------

MODE_MANUAL: str = "manual"
"""Vertices are planar ``(x, y)`` pairs already in metres."""

MODE_GPS: str = "gps"
"""Vertices are DMS coordinate strings (``24°24'10.5"N 88°37'34.7"E``)."""

VALID_MODES: frozenset[str] = frozenset({MODE_MANUAL, MODE_GPS})

# ---------------------------------------------------------------------------
# Polygon limits
# ---------------------------------------------------------------------------

MIN_POLYGON_POINTS: int = 3
"""Fewest vertices that enclose an area."""

# WGS 84 coordinate bounds
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Sexagesimal field limits (strict mode only)
MINUTES_PER_DEGREE = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_DEGREE = 3600

# ---------------------------------------------------------------------------
# Local projection (empirical WGS 84 metres-per-degree series)
# ---------------------------------------------------------------------------

LAT_SERIES_M: tuple[float, float, float] = (111132.92, -559.82, 1.175)
"""Coefficients of ``a + b·cos(2φ) + c·cos(4φ)`` for one degree of latitude."""

LNG_SERIES_M: tuple[float, float] = (111412.84, -93.5)
"""Coefficients of ``a·cos(φ) + b·cos(3φ)`` for one degree of longitude."""

ORIGIN_FIRST: str = "first"
ORIGIN_CENTROID: str = "centroid"
VALID_ORIGINS: frozenset[str] = frozenset({ORIGIN_FIRST, ORIGIN_CENTROID})

# ---------------------------------------------------------------------------
# Unit conversion (Bangladesh land measurement standard)
# ---------------------------------------------------------------------------

SQ_FEET_PER_SQ_METRE: float = 10.764

SQ_FEET_PER_KATHA: float = 720.0
SQ_FEET_PER_DECIMAL: float = 435.6
SQ_FEET_PER_SHOTOK: float = SQ_FEET_PER_DECIMAL
SQ_FEET_PER_BIGHA: float = 14_400.0
SQ_FEET_PER_ACRE: float = 43_560.0
SQ_FEET_PER_KANI: float = 17_280.0

DEFAULT_AREA_PRECISION: int = 2
"""Decimal places for square metres and square feet."""

DEFAULT_UNIT_PRECISION: int = 4
"""Decimal places for the regional units."""

GPS_ACCURACY_NOTE: str = (
    "Area calculation uses a local equirectangular projection at the plot's "
    "mean latitude. Results are approximate with ±1-3% accuracy depending on "
    "plot size and GPS precision."
)

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------

SAMPLE_GPS_COORDINATES: tuple[str, ...] = (
    "24°24'10.5\"N 88°37'34.7\"E",
    "24°24'11.9\"N 88°37'35.0\"E",
    "24°24'11.8\"N 88°37'36.1\"E",
    "24°24'15.0\"N 88°37'36.6\"E",
    "24°24'15.3\"N 88°37'33.3\"E",
    "24°24'13.9\"N 88°37'32.8\"E",
    "24°24'14.7\"N 88°37'29.3\"E",
    "24°24'11.4\"N 88°37'28.5\"E",
)
"""Eight-vertex plot near Rajshahi, Bangladesh."""

SAMPLE_MANUAL_POINTS: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (10.0, 0.0),
    (10.0, 10.0),
    (0.0, 10.0),
)
"""10 m × 10 m square (100 m²)."""
