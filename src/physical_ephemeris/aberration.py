"""Planetary aberration of equatorial coordinates."""

from __future__ import annotations

import math


def planetary_aberration_in_eq_coords(
    asc: float,
    dec: float,
    sun_long: float,
    tru_oblq: float,
    k: float,
) -> tuple[float, float]:
    """Shift a planet's equatorial position for Earth's orbital motion.

    Differential form used for physical ephemerides; both corrections are
    evaluated at the uncorrected (asc, dec). The shift grows as 1/cos(dec) in
    right ascension and is not guarded at the poles. The declination term is
    the textbook sin(asc) sin(dec) form taken at the unshifted asc; a variant
    with sin(asc) cos(asc) and the shifted asc is deliberately not used.

    Parameters:
        asc: Right ascension (radians).
        dec: Declination (radians).
        sun_long: Earth's heliocentric longitude (radians); the Sun's
            geocentric longitude is this plus pi, absorbed into the signs.
        tru_oblq: True obliquity of the ecliptic (radians).
        k: Planet-specific aberration constant (radians).

    Returns:
        Corrected (asc, dec) in radians.
    """
    sin_asc, cos_asc = math.sin(asc), math.cos(asc)
    sin_dec, cos_dec = math.sin(dec), math.cos(dec)
    sin_l0, cos_l0 = math.sin(sun_long), math.cos(sun_long)
    cos_oblq = math.cos(tru_oblq)
    d_asc = k * (cos_asc * cos_l0 * cos_oblq + sin_asc * sin_l0) / cos_dec
    d_dec = k * (
        cos_l0 * cos_oblq * (math.tan(tru_oblq) * cos_dec - sin_asc * sin_dec)
        + cos_asc * sin_dec * sin_l0
    )
    return (asc + d_asc, dec + d_dec)
