"""Heliocentric ecliptic-of-date positions read from SPK kernels."""

from __future__ import annotations

import cspyce

from physical_ephemeris.angle_utils import limit_to_two_pi
from physical_ephemeris.constants import (
    AU_KM,
    J2000_JD,
    JUPITER_ID,
    PLANET_ID_TO_NUM,
    SECONDS_PER_DAY,
    SPICE_TARGETS,
    SUN_ID,
)
from physical_ephemeris.spice.common import get_state
from physical_ephemeris.spice.load import load_spice_files

# Built-in SPICE frame: mean ecliptic and equinox of date.
ECLIPTIC_OF_DATE_FRAME = 'ECLIPDATE'


def ensure_kernels(planet_num: int | None = None) -> None:
    """Load kernels for a planet unless some planet's kernels are already loaded.

    Parameters:
        planet_num: Planet number whose kernel set to load; defaults to Jupiter.

    Raises:
        RuntimeError: If the kernels cannot be loaded.
    """
    if get_state().planet_num != 0:
        return
    planet = PLANET_ID_TO_NUM[JUPITER_ID] if planet_num is None else planet_num
    ok, reason = load_spice_files(planet)
    if not ok:
        raise RuntimeError(f'Failed to load SPICE kernels: {reason}')


def spice_heliocentric_position(body_id: int, jd: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic position of a body from the loaded SPK kernels.

    Parameters:
        body_id: NAIF ID of the planet.
        jd: Julian Ephemeris Day (TDB).

    Returns:
        (longitude, latitude, radius): radians in [0, 2*pi), radians, AU.

    Raises:
        ValueError: If the body has no SPK target mapping.
        RuntimeError: If kernels cannot be loaded.
    """
    target = SPICE_TARGETS.get(body_id)
    if target is None:
        raise ValueError(f'No SPICE target for body {body_id}')
    ensure_kernels()
    et = (jd - J2000_JD) * SECONDS_PER_DAY
    pos, _lt = cspyce.spkpos(target, et, ECLIPTIC_OF_DATE_FRAME, 'NONE', str(SUN_ID))
    radius, lon, lat = cspyce.reclat(pos)
    return (limit_to_two_pi(lon), float(lat), float(radius) / AU_KM)
