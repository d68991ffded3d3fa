"""Heliocentric ecliptic positions of the major planets.

Positions are referred to the mean ecliptic and equinox of date, the frame
used by the physical-ephemeris formulas. Three backends are available:

- ``vsop87`` (default): the full VSOP87 theory as implemented by PyMeeus,
  dynamical ecliptic of date without the FK5 adjustment. This is the theory
  published physical ephemerides of Jupiter are computed from.
- ``erfa``: the shorter analytic series shipped with ERFA. Earth comes from
  ``epv00``; the other planets from ``plan94`` (J2000 mean equator), rotated
  to GCRS with the IAU 2006 frame bias and then to the ecliptic of date with
  ``ecm06``. Good to a few arcseconds for Jupiter.
- ``spice``: SPK kernels loaded from SPICE_PATH (see ``spice.positions``).
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import erfa
import numpy as np
from pymeeus.Earth import Earth
from pymeeus.Epoch import Epoch
from pymeeus.Jupiter import Jupiter
from pymeeus.Mars import Mars
from pymeeus.Mercury import Mercury
from pymeeus.Neptune import Neptune
from pymeeus.Saturn import Saturn
from pymeeus.Uranus import Uranus
from pymeeus.Venus import Venus

from physical_ephemeris.angle_utils import limit_to_two_pi
from physical_ephemeris.config import get_position_backend
from physical_ephemeris.constants import (
    EARTH_ID,
    J2000_JD,
    JUPITER_ID,
    MARS_ID,
    MERCURY_ID,
    NEPTUNE_ID,
    SATURN_ID,
    URANUS_ID,
    VENUS_ID,
)

logger = logging.getLogger(__name__)

# NAIF ID -> PyMeeus planet class (VSOP87 heliocentric positions).
VSOP87_BODIES: dict[int, type] = {
    MERCURY_ID: Mercury,
    VENUS_ID: Venus,
    EARTH_ID: Earth,
    MARS_ID: Mars,
    JUPITER_ID: Jupiter,
    SATURN_ID: Saturn,
    URANUS_ID: Uranus,
    NEPTUNE_ID: Neptune,
}

# NAIF ID -> ERFA plan94 planet number. Earth is handled by epv00, since
# plan94 body 3 is the Earth-Moon barycenter.
PLAN94_BODIES: dict[int, int] = {
    MERCURY_ID: 1,
    VENUS_ID: 2,
    MARS_ID: 4,
    JUPITER_ID: 5,
    SATURN_ID: 6,
    URANUS_ID: 7,
    NEPTUNE_ID: 8,
}


class HeliocentricPosition(NamedTuple):
    """Heliocentric ecliptic position of one body at one instant."""

    longitude: float  # radians, [0, 2*pi)
    latitude: float  # radians
    radius: float  # AU


def _vsop87_position(body_id: int, jd: float) -> HeliocentricPosition:
    """Heliocentric position from the VSOP87 theory (PyMeeus)."""
    planet = VSOP87_BODIES.get(body_id)
    if planet is None:
        raise ValueError(f'No VSOP87 theory for body {body_id}')
    lon, lat, radius = planet.geometric_heliocentric_position(Epoch(jd), tofk5=False)
    # PyMeeus keeps the sign of small latitudes but may reduce them by 360.
    latitude = math.asin(math.sin(lat.rad()))
    return HeliocentricPosition(limit_to_two_pi(lon.rad()), latitude, float(radius))


def _erfa_position(body_id: int, jd: float) -> HeliocentricPosition:
    """Heliocentric position from the ERFA analytic series."""
    date1, date2 = J2000_JD, jd - J2000_JD
    if body_id == EARTH_ID:
        pvh, _pvb = erfa.epv00(date1, date2)
        p_gcrs = np.asarray(pvh['p'], dtype=np.float64)
    elif body_id in PLAN94_BODIES:
        pv = erfa.plan94(date1, date2, PLAN94_BODIES[body_id])
        rb, _rp, _rbp = erfa.bp06(date1, date2)
        p_gcrs = np.asarray(rb).T @ np.asarray(pv['p'], dtype=np.float64)
    else:
        raise ValueError(f'No analytic series for body {body_id}')
    p_ecl = np.asarray(erfa.ecm06(date1, date2)) @ p_gcrs
    lon, lat, radius = erfa.p2s(p_ecl)
    return HeliocentricPosition(limit_to_two_pi(float(lon)), float(lat), float(radius))


def heliocentric_position(body_id: int, jd: float) -> HeliocentricPosition:
    """Return the heliocentric ecliptic position of a major planet.

    Parameters:
        body_id: NAIF ID of the planet (e.g. EARTH_ID, JUPITER_ID).
        jd: Julian Ephemeris Day (TDB).

    Returns:
        HeliocentricPosition (longitude and latitude in radians, radius in AU),
        mean ecliptic and equinox of date.

    Raises:
        ValueError: Unknown body or backend.
        RuntimeError: SPICE backend selected but kernels could not be loaded.
    """
    backend = get_position_backend()
    if backend == 'spice':
        from physical_ephemeris.spice.positions import spice_heliocentric_position

        lon, lat, radius = spice_heliocentric_position(body_id, jd)
        return HeliocentricPosition(lon, lat, radius)
    if backend == 'erfa':
        return _erfa_position(body_id, jd)
    return _vsop87_position(body_id, jd)
