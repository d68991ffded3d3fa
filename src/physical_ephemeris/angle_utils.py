"""Angle conversion and normalization helpers (degrees, DMS, radians)."""

from __future__ import annotations

import math

from physical_ephemeris.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
)

TWOPI = 2.0 * math.pi


def degrees_from_dms(deg: int, minutes: int, seconds: float) -> float:
    """Convert degrees, arcminutes and arcseconds to decimal degrees.

    A negative degree field makes the whole angle negative. When the degree
    field is zero, the signs of the minute and second fields are used as
    given, so ``(0, 0, -1.79)`` is -1.79 arcseconds.

    Parameters:
        deg: Whole degrees.
        minutes: Arcminutes.
        seconds: Arcseconds.

    Returns:
        Angle in degrees.
    """
    if deg < 0:
        minutes = -abs(minutes)
        seconds = -abs(seconds)
    return deg + minutes / ARCMIN_PER_DEGREE + seconds / ARCSEC_PER_DEGREE


def dms_from_degrees(value: float) -> tuple[int, int, float]:
    """Split decimal degrees into (degrees, arcminutes, arcseconds).

    The sign is carried by the first non-zero field.

    Parameters:
        value: Angle in degrees.

    Returns:
        (deg, minutes, seconds).
    """
    isign = -1 if value < 0 else 1
    total = abs(value)
    deg = int(total)
    rem = (total - deg) * ARCMIN_PER_DEGREE
    minutes = int(rem)
    seconds = (rem - minutes) * ARCMIN_PER_DEGREE
    if deg != 0:
        return (isign * deg, minutes, seconds)
    if minutes != 0:
        return (0, isign * minutes, seconds)
    return (0, 0, isign * seconds)


def limit_to_360(angle_deg: float) -> float:
    """Reduce an angle to the range [0, 360) degrees.

    Parameters:
        angle_deg: Angle in degrees, any finite value.

    Returns:
        Equivalent angle in [0, 360).
    """
    out = math.fmod(angle_deg, DEGREES_PER_CIRCLE)
    if out < 0.0:
        out += DEGREES_PER_CIRCLE
    # A tiny negative remainder rounds up to exactly 360 when shifted.
    if out >= DEGREES_PER_CIRCLE:
        out = 0.0
    return out


def limit_to_two_pi(angle_rad: float) -> float:
    """Reduce an angle to the range [0, 2*pi) radians."""
    out = math.fmod(angle_rad, TWOPI)
    if out < 0.0:
        out += TWOPI
    if out >= TWOPI:
        out = 0.0
    return out
