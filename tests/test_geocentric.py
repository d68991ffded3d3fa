"""Tests for geocentric coordinates and ecliptic-to-equatorial conversion."""

from __future__ import annotations

import math

import pytest

from physical_ephemeris.constants import LIGHT_TIME_DAYS_PER_AU
from physical_ephemeris.geocentric import (
    distance,
    equatorial_from_ecliptic,
    equatorial_from_rectangular,
    geocentric_rectangular,
    light_time,
)

OBLQ = math.radians(23.4392911)


def test_geocentric_rectangular_opposition() -> None:
    """Earth and target on the same heliocentric longitude: target straight ahead."""
    rect = geocentric_rectangular(0.5, 0.0, 1.0, 0.5, 0.0, 5.2)
    assert rect.x == pytest.approx(4.2 * math.cos(0.5))
    assert rect.y == pytest.approx(4.2 * math.sin(0.5))
    assert rect.z == pytest.approx(0.0)
    assert distance(*rect) == pytest.approx(4.2)


def test_geocentric_rectangular_latitude_enters_z() -> None:
    rect = geocentric_rectangular(0.0, 0.0, 1.0, math.pi, 0.02, 5.0)
    assert rect.z == pytest.approx(5.0 * math.sin(0.02))
    assert rect.x == pytest.approx(-5.0 * math.cos(0.02) - 1.0)


def test_light_time() -> None:
    assert light_time(1.0) == LIGHT_TIME_DAYS_PER_AU
    assert light_time(5.0) == pytest.approx(0.0288775915)


def test_equatorial_from_ecliptic_pollux() -> None:
    """Pollux: ecliptic (113.215630, 6.684170) -> RA 116.328942, Dec 28.026183."""
    asc, dec = equatorial_from_ecliptic(math.radians(113.215630), math.radians(6.684170), OBLQ)
    assert math.degrees(asc) % 360.0 == pytest.approx(116.328942, abs=1e-5)
    assert math.degrees(dec) == pytest.approx(28.026183, abs=1e-5)


@pytest.mark.parametrize(
    ('lon', 'lat'), [(0.3, 0.02), (2.0, -0.4), (4.0, 1.2), (5.9, -0.01)]
)
def test_rectangular_and_spherical_conversions_agree(lon: float, lat: float) -> None:
    x = 3.0 * math.cos(lat) * math.cos(lon)
    y = 3.0 * math.cos(lat) * math.sin(lon)
    z = 3.0 * math.sin(lat)
    asc_r, dec_r = equatorial_from_rectangular(x, y, z, OBLQ)
    asc_s, dec_s = equatorial_from_ecliptic(lon, lat, OBLQ)
    assert math.cos(asc_r - asc_s) == pytest.approx(1.0)
    assert dec_r == pytest.approx(dec_s)


def test_zero_obliquity_is_identity() -> None:
    asc, dec = equatorial_from_rectangular(1.0, 1.0, math.sqrt(2.0), 0.0)
    assert asc == pytest.approx(math.pi / 4)
    assert dec == pytest.approx(math.pi / 4)
