"""Nutation and obliquity of the ecliptic (IAU 1980) and their effect on RA/Dec."""

from __future__ import annotations

import math

import erfa

from physical_ephemeris.constants import J2000_JD


def nutation_in_long_oblq(jde: float) -> tuple[float, float]:
    """Nutation in longitude and in obliquity, IAU 1980 theory.

    Parameters:
        jde: Julian Ephemeris Day (TT).

    Returns:
        (d_psi, d_eps) in radians.
    """
    d_psi, d_eps = erfa.nut80(J2000_JD, jde - J2000_JD)
    return (float(d_psi), float(d_eps))


def mean_obliquity(jde: float) -> float:
    """Mean obliquity of the ecliptic (IAU 1980) in radians."""
    return float(erfa.obl80(J2000_JD, jde - J2000_JD))


def true_obliquity(mean_oblq: float, d_eps: float) -> float:
    """True obliquity: mean obliquity plus nutation in obliquity (radians)."""
    return mean_oblq + d_eps


def nutation_in_eq_coords(
    asc: float,
    dec: float,
    d_psi: float,
    d_eps: float,
    tru_oblq: float,
) -> tuple[float, float]:
    """First-order corrections to right ascension and declination for nutation.

    Not valid close to the celestial poles, where tan(dec) diverges.

    Parameters:
        asc: Right ascension (radians).
        dec: Declination (radians).
        d_psi: Nutation in longitude (radians).
        d_eps: Nutation in obliquity (radians).
        tru_oblq: True obliquity of the ecliptic (radians).

    Returns:
        (d_asc, d_dec) in radians, to be added to (asc, dec).
    """
    sin_asc, cos_asc = math.sin(asc), math.cos(asc)
    sin_oblq, cos_oblq = math.sin(tru_oblq), math.cos(tru_oblq)
    tan_dec = math.tan(dec)
    d_asc = d_psi * (cos_oblq + sin_oblq * sin_asc * tan_dec) - d_eps * cos_asc * tan_dec
    d_dec = d_psi * sin_oblq * cos_asc + d_eps * sin_asc
    return (d_asc, d_dec)
