"""Ephemeris for physical observations of Jupiter.

Computes the planetocentric declinations of the Earth and the Sun, the
longitudes of the central meridian in rotation Systems I and II, and the
position angle of the rotation axis, from heliocentric positions of the
Earth and Jupiter. Jupiter's position is corrected for light time with a
fixed two-pass iteration, then for the defect of illumination; the apparent
equatorial coordinates of Jupiter and of its north pole are corrected for
nutation (and Jupiter's for planetary aberration) before the position angle
is formed.

All angles are radians unless the name says otherwise. Degenerate geometry
(e.g. zero distance) yields nan/inf rather than an exception.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, TextIO

from physical_ephemeris.aberration import planetary_aberration_in_eq_coords
from physical_ephemeris.angle_utils import degrees_from_dms, limit_to_360
from physical_ephemeris.constants import EARTH_ID, JUPITER_ID, MAX_TABLE_ROWS
from physical_ephemeris.geocentric import (
    RectangularCoords,
    distance,
    equatorial_from_ecliptic,
    equatorial_from_rectangular,
    geocentric_rectangular,
    light_time,
)
from physical_ephemeris.heliocentric import HeliocentricPosition, heliocentric_position
from physical_ephemeris.nutation import (
    mean_obliquity,
    nutation_in_eq_coords,
    nutation_in_long_oblq,
    true_obliquity,
)
from physical_ephemeris.params import (
    COL_CM1,
    COL_CM2,
    COL_DIAM,
    COL_DIST,
    COL_EARTH_LAT,
    COL_JDE,
    COL_PA,
    COL_SUN_LAT,
    COL_YMDHMS,
    COLUMNS,
    EphemerisParams,
)
from physical_ephemeris.planets import get_planet_config
from physical_ephemeris.planets.base import PlanetConfig, RotationSystem
from physical_ephemeris.planets.jupiter import JUPITER_CONFIG
from physical_ephemeris.time_utils import (
    day_sec_from_tai,
    days_since,
    hms_from_sec,
    interval_seconds,
    jde_from_tai,
    julian_centuries,
    parse_datetime,
    tai_from_day_sec,
    ymd_from_day,
)

logger = logging.getLogger(__name__)

# Light-time passes; fixed, not iterated to convergence.
LIGHT_TIME_PASSES = 2

# Degrees per radian as printed in the phase-correction formula.
_PHASE_DEG_PER_RAD = 57.2958


class LightTimeSolution(NamedTuple):
    """Target position at the light-time-corrected epoch, seen from Earth."""

    position: HeliocentricPosition
    rect: RectangularCoords
    distance: float  # AU
    light_time: float  # days


class JupiterEphemeris(NamedTuple):
    """Physical-observation quantities for Jupiter (radians)."""

    earth_latitude: float  # D_E, planetocentric declination of the Earth
    sun_latitude: float  # D_S, planetocentric declination of the Sun
    system1_longitude: float  # central meridian, System I, [0, 2*pi)
    system2_longitude: float  # central meridian, System II, [0, 2*pi)
    axis_position_angle: float  # P, measured from celestial north, unreduced


def light_time_iteration(
    jd: float,
    earth: HeliocentricPosition,
    body_id: int = JUPITER_ID,
) -> LightTimeSolution:
    """Correct a body's heliocentric position for light travel time.

    Starts from zero light time and runs exactly LIGHT_TIME_PASSES passes,
    each evaluating the body at jd minus the previous pass's light time.
    Earth's position is taken as given; its own light time is ignored.

    Parameters:
        jd: Julian Ephemeris Day of observation.
        earth: Earth's heliocentric position at jd.
        body_id: NAIF ID of the target body.

    Returns:
        LightTimeSolution from the final pass.
    """
    l0, b0, R = earth
    tau = 0.0
    for npass in range(1, LIGHT_TIME_PASSES + 1):
        position = heliocentric_position(body_id, jd - tau)
        rect = geocentric_rectangular(l0, b0, R, *position)
        delta = distance(*rect)
        tau = light_time(delta)
        logger.debug('Light-time pass %d: delta=%.9f AU, tau=%.9f d', npass, delta, tau)
    return LightTimeSolution(position, rect, delta, tau)


def defect_corrected_longitude(l: float, r: float, delta: float, defect_deg: float) -> float:
    """Apply the defect-of-illumination term to a heliocentric longitude.

    Parameters:
        l: Heliocentric longitude (radians).
        r: Heliocentric distance (AU).
        delta: Distance from Earth (AU).
        defect_deg: Planet's defect constant (degrees).

    Returns:
        Corrected longitude (radians); nan when r is zero.
    """
    if r == 0.0:
        return math.nan
    return l - math.radians(defect_deg) * delta / (r * r)


def pole_coordinates(jd: float, config: PlanetConfig = JUPITER_CONFIG) -> tuple[float, float]:
    """Right ascension and declination of the planet's north pole (radians)."""
    t1 = julian_centuries(jd, config.rotation_epoch_jd)
    ra_deg, dec_deg = config.pole.ra_dec_deg(t1)
    return (math.radians(ra_deg), math.radians(dec_deg))


def planetocentric_declination(asc0: float, dec0: float, asc: float, dec: float) -> float:
    """Planetocentric declination of the observer-side body.

    With (asc, dec) the direction from the observer to the planet, returns the
    declination, in the planet's equatorial frame, of the observer as seen
    from the planet.

    Parameters:
        asc0, dec0: North pole of the planet (radians).
        asc, dec: Direction of the planet (radians).

    Returns:
        Declination (radians).
    """
    s = -math.sin(dec0) * math.sin(dec) - math.cos(dec0) * math.cos(dec) * math.cos(asc0 - asc)
    return math.asin(max(-1.0, min(1.0, s)))


def pole_angle_zeta(asc0: float, dec0: float, asc: float, dec: float) -> float:
    """Angle zeta between the planet's prime meridian node and the sub-Earth point (radians)."""
    return math.atan2(
        math.sin(dec0) * math.cos(dec) * math.cos(asc0 - asc) - math.sin(dec) * math.cos(dec0),
        math.cos(dec) * math.sin(asc0 - asc),
    )


def phase_correction(r: float, delta: float, R: float, l: float, l0: float) -> float:
    """Phase correction C to the central meridian longitudes (degrees).

    Equal to sin^2(i/2) expressed in degrees, i being the phase angle of the
    Sun-planet-Earth triangle; negative when sin(l - l0) < 0.

    Parameters:
        r: Sun-planet distance (AU).
        delta: Earth-planet distance (AU).
        R: Sun-Earth distance (AU).
        l: Planet's heliocentric longitude (radians).
        l0: Earth's heliocentric longitude (radians).

    Returns:
        C in degrees.
    """
    denom = 4.0 * r * delta
    if denom == 0.0:
        return math.nan
    c = _PHASE_DEG_PER_RAD * (2.0 * r * delta + R * R - r * r - delta * delta) / denom
    if math.sin(l - l0) < 0.0:
        c = -c
    return c


def central_meridian_longitude(
    system: RotationSystem,
    d: float,
    zeta: float,
    delta: float,
    c_deg: float,
) -> float:
    """Longitude of the central meridian in one rotation system.

    Parameters:
        system: Rotation system constants.
        d: Days since the planet's rotation epoch.
        zeta: Angle from pole_angle_zeta (radians).
        delta: Earth-planet distance (AU).
        c_deg: Phase correction (degrees).

    Returns:
        Longitude (radians) in [0, 2*pi).
    """
    w_deg = limit_to_360(system.meridian_deg(d))
    w_deg = limit_to_360(w_deg - math.degrees(zeta) - system.light_time_deg_au * delta)
    return math.radians(limit_to_360(w_deg + c_deg))


def apparent_eq_coords(
    asc: float,
    dec: float,
    nut_in_long: float,
    nut_in_oblq: float,
    tru_oblq: float,
) -> tuple[float, float]:
    """Add the nutation corrections to a right ascension and declination (radians)."""
    d_asc, d_dec = nutation_in_eq_coords(asc, dec, nut_in_long, nut_in_oblq, tru_oblq)
    return (asc + d_asc, dec + d_dec)


def axis_position_angle(asc0: float, dec0: float, asc: float, dec: float) -> float:
    """Position angle of the planet's rotation axis, from celestial north (radians).

    Parameters:
        asc0, dec0: Apparent north pole of the planet (radians).
        asc, dec: Apparent direction of the planet (radians).

    Returns:
        Position angle in (-pi, pi]; reduce with limit_to_360 for display.
    """
    return math.atan2(
        math.cos(dec0) * math.sin(asc0 - asc),
        math.sin(dec0) * math.cos(dec) - math.cos(dec0) * math.sin(dec) * math.cos(asc0 - asc),
    )


def _jupiter_geometry(
    jd: float,
    mn_oblq: float,
    nut_in_long: float,
    nut_in_oblq: float,
) -> tuple[JupiterEphemeris, float]:
    """Physical ephemeris plus the defect-corrected Earth-Jupiter distance (AU)."""
    cfg = JUPITER_CONFIG
    d = days_since(jd, cfg.rotation_epoch_jd)
    asc0, dec0 = pole_coordinates(jd, cfg)

    earth = heliocentric_position(EARTH_ID, jd)
    l0, b0, R = earth
    solution = light_time_iteration(jd, earth, cfg.planet_id)
    l, b, r = solution.position

    l = defect_corrected_longitude(l, r, solution.distance, cfg.defect_deg)
    x, y, z = geocentric_rectangular(l0, b0, R, l, b, r)
    delta = distance(x, y, z)

    asc_s, dec_s = equatorial_from_ecliptic(l, b, mn_oblq)
    sun_latitude = planetocentric_declination(asc0, dec0, asc_s, dec_s)

    asc, dec = equatorial_from_rectangular(x, y, z, mn_oblq)
    zeta = pole_angle_zeta(asc0, dec0, asc, dec)
    earth_latitude = planetocentric_declination(asc0, dec0, asc, dec)

    c_deg = phase_correction(r, delta, R, l, l0)
    w1 = central_meridian_longitude(cfg.rotation_system('I'), d, zeta, delta, c_deg)
    w2 = central_meridian_longitude(cfg.rotation_system('II'), d, zeta, delta, c_deg)

    tru_oblq = true_obliquity(mn_oblq, nut_in_oblq)
    asc, dec = planetary_aberration_in_eq_coords(
        asc, dec, l0, tru_oblq, math.radians(cfg.aberration_deg)
    )
    asc1, dec1 = apparent_eq_coords(asc, dec, nut_in_long, nut_in_oblq, tru_oblq)
    asc01, dec01 = apparent_eq_coords(asc0, dec0, nut_in_long, nut_in_oblq, tru_oblq)
    p = axis_position_angle(asc01, dec01, asc1, dec1)

    return (JupiterEphemeris(earth_latitude, sun_latitude, w1, w2, p), delta)


def jupiter_ephemeris(
    jd: float,
    mn_oblq: float,
    nut_in_long: float,
    nut_in_oblq: float,
) -> JupiterEphemeris:
    """Quantities for the physical observation of Jupiter.

    Parameters:
        jd: Julian Ephemeris Day.
        mn_oblq: Mean obliquity of the ecliptic on jd (radians).
        nut_in_long: Nutation in longitude on jd (radians).
        nut_in_oblq: Nutation in obliquity on jd (radians).

    Returns:
        JupiterEphemeris, all fields in radians.
    """
    eph, _delta = _jupiter_geometry(jd, mn_oblq, nut_in_long, nut_in_oblq)
    return eph


def jupiter_ephemeris_at(jd: float) -> JupiterEphemeris:
    """jupiter_ephemeris with IAU 1980 obliquity and nutation computed for jd."""
    d_psi, d_eps = nutation_in_long_oblq(jd)
    return jupiter_ephemeris(jd, mean_obliquity(jd), d_psi, d_eps)


def eq_semidiameter(jup_earth_dist: float) -> float:
    """Jupiter's equatorial semidiameter (radians) at a distance in AU."""
    arcsec = JUPITER_CONFIG.eq_semidiameter_arcsec
    return math.radians(degrees_from_dms(0, 0, arcsec)) / jup_earth_dist


def pol_semidiameter(jup_earth_dist: float) -> float:
    """Jupiter's polar semidiameter (radians) at a distance in AU."""
    arcsec = JUPITER_CONFIG.pol_semidiameter_arcsec
    return math.radians(degrees_from_dms(0, 0, arcsec)) / jup_earth_dist


def _format_utc(tai: float) -> str:
    """UTC 'YYYY-MM-DD HH:MM:SS' for a TAI instant."""
    day, sec = day_sec_from_tai(tai)
    year, month, mday = ymd_from_day(day)
    hour, minute, second = hms_from_sec(sec)
    return f'{year:04d}-{month:02d}-{mday:02d} {hour:02d}:{minute:02d}:{int(second):02d}'


def _format_row(
    columns: list[str], tai: float, jde: float, eph: JupiterEphemeris, delta: float
) -> str:
    """One table line; angles in degrees."""
    values: list[str] = []
    for col in columns:
        width = COLUMNS[col][1]
        if col == COL_JDE:
            text = f'{jde:.6f}'
        elif col == COL_YMDHMS:
            text = _format_utc(tai)
        elif col == COL_EARTH_LAT:
            text = f'{math.degrees(eph.earth_latitude):.3f}'
        elif col == COL_SUN_LAT:
            text = f'{math.degrees(eph.sun_latitude):.3f}'
        elif col == COL_CM1:
            text = f'{math.degrees(eph.system1_longitude):.3f}'
        elif col == COL_CM2:
            text = f'{math.degrees(eph.system2_longitude):.3f}'
        elif col == COL_PA:
            text = f'{limit_to_360(math.degrees(eph.axis_position_angle)):.3f}'
        elif col == COL_DIAM:
            text = f'{2.0 * math.degrees(eq_semidiameter(delta)) * 3600.0:.2f}'
        elif col == COL_DIST:
            text = f'{delta:.8f}'
        else:
            raise ValueError(f'Unknown column {col!r}')
        values.append(text.rjust(width))
    return ' '.join(values)


def generate_ephemeris(params: EphemerisParams, output: TextIO | None = None) -> int:
    """Write a physical-ephemeris table, one row per time step.

    Each step's TAI instant is converted to JDE (TDB); obliquity and nutation
    are computed for that instant.

    Parameters:
        params: Table parameters (UTC start/stop, interval, columns).
        output: Stream to write; defaults to params.output.

    Returns:
        Number of data rows written (0 when there is no output stream).

    Raises:
        ValueError: Bad times, empty or oversized range, unsupported planet.
    """
    out = output or params.output
    if out is None:
        return 0
    if get_planet_config(params.planet_num).planet_id != JUPITER_ID:
        raise ValueError(f'No physical ephemeris for planet {params.planet_num}')

    start_parsed = parse_datetime(params.start_time)
    stop_parsed = parse_datetime(params.stop_time)
    if start_parsed is None or stop_parsed is None:
        raise ValueError('Invalid start or stop time')
    tai1 = tai_from_day_sec(*start_parsed)
    tai2 = tai_from_day_sec(*stop_parsed)
    if tai2 < tai1:
        raise ValueError('Stop time precedes start time')
    dsec = interval_seconds(params.interval, params.time_unit)
    ntimes = int((tai2 - tai1) / dsec) + 1
    if ntimes > MAX_TABLE_ROWS:
        raise ValueError(f'Number of time steps exceeds limit of {MAX_TABLE_ROWS}')
    logger.info('Generating %d rows from %s to %s', ntimes, params.start_time, params.stop_time)

    columns = params.columns
    header = ' '.join(COLUMNS[col][0].rjust(COLUMNS[col][1]) for col in columns)
    out.write(header.rstrip() + '\n')
    for irec in range(ntimes):
        tai = tai1 + irec * dsec
        jde = jde_from_tai(tai)
        d_psi, d_eps = nutation_in_long_oblq(jde)
        eph, delta = _jupiter_geometry(jde, mean_obliquity(jde), d_psi, d_eps)
        out.write(_format_row(columns, tai, jde, eph, delta) + '\n')
    return ntimes
