"""Shared helper functions used across the calculator modules."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    Works on the exact binary value of the float (``Decimal(value)`` is
    lossless), so ``round_half_up(1.005, 2)`` is ``1.0`` because the
    stored double is slightly below ``1.005``.  This matches how
    JavaScript's ``Number.prototype.toFixed`` renders non-negative values
    and does not depend on locale.

    Args:
        value: Finite float to round.
        places: Number of decimal places (>= 0).

    Returns:
        The rounded value as a float.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
