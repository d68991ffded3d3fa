"""Rounding helpers for presentation and comparison with published values."""

from __future__ import annotations

import math


def round_to_digits(value: float, digits: int) -> float:
    """Round to a number of decimal digits, halves away from zero.

    Python's built-in round() rounds halves to even; published tables round
    halves away from zero.

    Parameters:
        value: Number to round.
        digits: Decimal digits to keep (0 rounds to an integer value).

    Returns:
        Rounded value; non-finite input is returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10.0**digits
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor
