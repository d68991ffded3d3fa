"""Geocentric rectangular coordinates, distance, light time and frame rotations."""

from __future__ import annotations

import math
from typing import NamedTuple

from physical_ephemeris.constants import LIGHT_TIME_DAYS_PER_AU


class RectangularCoords(NamedTuple):
    """Geocentric ecliptic rectangular coordinates (AU)."""

    x: float
    y: float
    z: float


def geocentric_rectangular(
    l0: float, b0: float, R: float, l: float, b: float, r: float
) -> RectangularCoords:
    """Geocentric ecliptic rectangular coordinates of a body.

    Parameters:
        l0, b0, R: Earth's heliocentric longitude, latitude (radians) and
            radius vector (AU).
        l, b, r: The body's heliocentric longitude, latitude (radians) and
            radius vector (AU).

    Returns:
        RectangularCoords in AU, same ecliptic frame as the inputs.
    """
    x = r * math.cos(b) * math.cos(l) - R * math.cos(b0) * math.cos(l0)
    y = r * math.cos(b) * math.sin(l) - R * math.cos(b0) * math.sin(l0)
    z = r * math.sin(b) - R * math.sin(b0)
    return RectangularCoords(x, y, z)


def distance(x: float, y: float, z: float) -> float:
    """Length of a rectangular vector (AU in, AU out)."""
    return math.sqrt(x * x + y * y + z * z)


def light_time(distance_au: float) -> float:
    """Light travel time in days over distance_au."""
    return LIGHT_TIME_DAYS_PER_AU * distance_au


def equatorial_from_rectangular(
    x: float, y: float, z: float, oblq: float
) -> tuple[float, float]:
    """Right ascension and declination from ecliptic rectangular coordinates.

    Parameters:
        x, y, z: Geocentric ecliptic rectangular coordinates (any length unit).
        oblq: Obliquity of the ecliptic (radians).

    Returns:
        (asc, dec) in radians; asc in (-pi, pi].
    """
    u = y * math.cos(oblq) - z * math.sin(oblq)
    v = y * math.sin(oblq) + z * math.cos(oblq)
    asc = math.atan2(u, x)
    dec = math.atan2(v, math.sqrt(x * x + u * u))
    return (asc, dec)


def equatorial_from_ecliptic(lon: float, lat: float, oblq: float) -> tuple[float, float]:
    """Right ascension and declination from ecliptic longitude and latitude (radians)."""
    asc = math.atan2(
        math.cos(oblq) * math.sin(lon) - math.sin(oblq) * math.tan(lat),
        math.cos(lon),
    )
    s = math.cos(oblq) * math.sin(lat) + math.sin(oblq) * math.cos(lat) * math.sin(lon)
    return (asc, math.asin(max(-1.0, min(1.0, s))))
