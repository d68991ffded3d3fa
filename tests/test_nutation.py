"""Tests for nutation, obliquity and their equatorial corrections."""

from __future__ import annotations

import math

import pytest

from physical_ephemeris.angle_utils import degrees_from_dms
from physical_ephemeris.nutation import (
    mean_obliquity,
    nutation_in_eq_coords,
    nutation_in_long_oblq,
    true_obliquity,
)

ARCSEC = math.radians(1.0 / 3600.0)


def test_nutation_1987_april_10() -> None:
    """IAU 1980 nutation and mean obliquity for 1987 April 10, 0h TD."""
    d_psi, d_eps = nutation_in_long_oblq(2446895.5)
    assert d_psi / ARCSEC == pytest.approx(-3.788, abs=0.01)
    assert d_eps / ARCSEC == pytest.approx(9.443, abs=0.01)
    eps0 = mean_obliquity(2446895.5)
    assert math.degrees(eps0) == pytest.approx(degrees_from_dms(23, 26, 27.407), abs=0.01 / 3600)
    assert true_obliquity(eps0, d_eps) == eps0 + d_eps


def test_nutation_in_eq_coords_at_equinox() -> None:
    oblq = math.radians(23.44)
    d_asc, d_dec = nutation_in_eq_coords(0.0, 0.0, 10.0 * ARCSEC, 5.0 * ARCSEC, oblq)
    assert d_asc == pytest.approx(10.0 * ARCSEC * math.cos(oblq))
    assert d_dec == pytest.approx(10.0 * ARCSEC * math.sin(oblq))


def test_nutation_in_eq_coords_zero_nutation() -> None:
    assert nutation_in_eq_coords(1.0, 0.3, 0.0, 0.0, 0.4) == (0.0, 0.0)


def test_nutation_in_eq_coords_obliquity_term() -> None:
    """At RA 90 degrees only the obliquity term moves the declination."""
    d_asc, d_dec = nutation_in_eq_coords(math.pi / 2, 0.0, 0.0, 7.0 * ARCSEC, 0.4)
    assert d_dec == pytest.approx(7.0 * ARCSEC)
    assert d_asc == pytest.approx(0.0, abs=1e-20)
