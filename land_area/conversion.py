"""Square-metre to regional land unit conversion.

Bangladesh land measurement uses square-foot based units::

    1 m²             = 10.764 ft²
    1 katha          = 720 ft²        (1 bigha = 20 katha)
    1 decimal/shotok = 435.6 ft²      (1 acre = 100 shotok)
    1 bigha          = 14,400 ft²
    1 acre           = 43,560 ft²
    1 kani           = 17,280 ft²     (24 katha)

``convert_square_metres`` keeps full float precision; rounding for
display is ``AreaResult.rounded``.
"""

from __future__ import annotations

import math
from types import MappingProxyType

from land_area.core.constants import (
    SQ_FEET_PER_ACRE,
    SQ_FEET_PER_BIGHA,
    SQ_FEET_PER_DECIMAL,
    SQ_FEET_PER_KANI,
    SQ_FEET_PER_KATHA,
    SQ_FEET_PER_SHOTOK,
    SQ_FEET_PER_SQ_METRE,
)
from land_area.core.exceptions import ValidationError
from land_area.models.area import AreaResult

CONVERSION_TABLE: MappingProxyType[str, float] = MappingProxyType(
    {
        "katha": SQ_FEET_PER_KATHA,
        "bigha": SQ_FEET_PER_BIGHA,
        "acre": SQ_FEET_PER_ACRE,
        "decimal": SQ_FEET_PER_DECIMAL,
        "shotok": SQ_FEET_PER_SHOTOK,
        "kani": SQ_FEET_PER_KANI,
    }
)
"""Square feet per unit.  Read-only."""

UNIT_LABELS: MappingProxyType[str, tuple[str, str, str]] = MappingProxyType(
    {
        "squareMeters": ("Square Meters", "বর্গমিটার", "m²"),
        "squareFeet": ("Square Feet", "বর্গফুট", "ft²"),
        "katha": ("Katha", "কাঠা", "720 ft²"),
        "bigha": ("Bigha", "বিঘা", "20 Katha"),
        "acre": ("Acre", "একর", "100 Shotok"),
        "decimal": ("Decimal", "শতাংশ", "435.6 ft²"),
        "shotok": ("Shotok", "শতক", "= Decimal"),
        "kani": ("Kani", "কানি", "24 Katha"),
    }
)
"""Display name, Bengali name and definition for each result field."""


class AreaValueError(ValidationError):
    """Raised when an area to convert is negative or not finite."""

    default_stage = "convert_units"
    default_code = "INVALID_AREA"


def convert_square_metres(square_metres: float) -> AreaResult:
    """Express an area in every supported unit.

    Args:
        square_metres: Area in m² (finite, >= 0).

    Returns:
        An unrounded ``AreaResult``.

    Raises:
        AreaValueError: If *square_metres* is negative, NaN or infinite.
    """
    if not math.isfinite(square_metres) or square_metres < 0:
        msg = f"Area must be a finite, non-negative number of square metres, got {square_metres}"
        raise AreaValueError(msg)

    square_feet = square_metres * SQ_FEET_PER_SQ_METRE
    decimal = square_feet / CONVERSION_TABLE["decimal"]
    return AreaResult(
        square_meters=square_metres,
        square_feet=square_feet,
        katha=square_feet / CONVERSION_TABLE["katha"],
        bigha=square_feet / CONVERSION_TABLE["bigha"],
        acre=square_feet / CONVERSION_TABLE["acre"],
        decimal=decimal,
        shotok=decimal,
        kani=square_feet / CONVERSION_TABLE["kani"],
    )


def unit_table() -> list[dict[str, object]]:
    """Describe every result field for display.

    Returns:
        One dict per field with ``key``, ``name``, ``bengali``,
        ``definition`` and ``sq_feet`` (``None`` for m²).
    """
    sq_feet = {"squareMeters": None, "squareFeet": 1.0, **CONVERSION_TABLE}
    return [
        {
            "key": key,
            "name": name,
            "bengali": bengali,
            "definition": definition,
            "sq_feet": sq_feet[key],
        }
        for key, (name, bengali, definition) in UNIT_LABELS.items()
    ]
