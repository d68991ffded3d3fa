"""Time conversions: rms-julian wrappers plus plain Julian day arithmetic.

UTC instants are handled as rms-julian (day, sec) pairs, day 0 being
2000-01-01. TAI and TDB are seconds; JDE is a Julian Ephemeris Day in TDB.
"""

from __future__ import annotations

import logging
import math
import re

import julian

from physical_ephemeris.config import get_leapsecs_path
from physical_ephemeris.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEFAULT_MIN_INTERVAL_SECONDS,
    J2000_JD,
    J2000_MIDNIGHT_JD,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

_leapsecs_loaded = False

# Seconds per unit, keyed by the first four letters of the unit name.
_UNIT_SECONDS: dict[str, float] = {
    'sec': 1.0,
    'seco': 1.0,
    'min': SECONDS_PER_MINUTE,
    'minu': SECONDS_PER_MINUTE,
    'hour': SECONDS_PER_HOUR,
    'day': SECONDS_PER_DAY,
}

_YEAR_HMS = re.compile(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})')


def _ensure_leapsecs() -> None:
    """Select the SPICE UT model and load a leap-second kernel, once per process.

    The configured kernel (see config.get_leapsecs_path) is tried first; a
    file rms-julian rejects is logged and the bundled LSK is used instead.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    try:
        julian.load_lsk(path)
    except (OSError, KeyError, ValueError) as e:
        logger.info('Leap-second kernel %s rejected (%s); using the bundled LSK', path, e)
        julian.load_lsk()
    _leapsecs_loaded = True


def _datetime_variants(string: str) -> list[str]:
    """The string itself, then rewrites rms-julian can parse."""
    variants = [string]
    text = string.strip()
    if text[-1:] in ('Z', 'z'):
        variants.append(text[:-1])
    match = _YEAR_HMS.fullmatch(text)
    if match is not None:
        # Year with a time only: January 1st of that year.
        variants.append(f'{match.group(1)}-01-01 {match.group(2)}')
    return variants


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a UTC date/time string to (day, sec).

    Parameters:
        string: Date/time string (format accepted by rms-julian). A trailing
            ISO 'Z' and the short form 'YYYY HH:MM:SS' are also accepted.

    Returns:
        (day, sec) where day is days since 2000-01-01 and sec is seconds within
        that day; None on parse failure.
    """
    _ensure_leapsecs()
    for candidate in _datetime_variants(string):
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return (int(day), float(sec))
    logger.debug('Unparseable date/time %r', string)
    return None


def tai_from_day_sec(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to TAI seconds."""
    _ensure_leapsecs()
    return float(julian.tai_from_day_sec(day, sec))


def day_sec_from_tai(tai: float) -> tuple[int, float]:
    """Convert TAI seconds to UTC (day, sec)."""
    _ensure_leapsecs()
    day, sec = julian.day_sec_from_tai(tai)
    return (int(day), float(sec))


def tdb_from_tai(tai: float) -> float:
    """Convert TAI to TDB seconds past J2000."""
    return float(julian.tdb_from_tai(tai))


def tai_from_tdb(tdb: float) -> float:
    """Convert TDB seconds past J2000 to TAI."""
    return float(julian.tai_from_tdb(tdb))


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert day since 2000-01-01 to calendar (year, month, day)."""
    return julian.ymd_from_day(day)


def hms_from_sec(sec: float) -> tuple[int, int, float]:
    """Convert seconds within a day to (hour, minute, second)."""
    return julian.hms_from_sec(sec)


def jde_from_tai(tai: float) -> float:
    """Return the Julian Ephemeris Day (TDB) of a TAI instant.

    Parameters:
        tai: TAI in seconds.

    Returns:
        JDE in days.
    """
    return J2000_JD + tdb_from_tai(tai) / SECONDS_PER_DAY


def tai_from_jde(jde: float) -> float:
    """Return TAI seconds for a Julian Ephemeris Day (inverse of jde_from_tai)."""
    return tai_from_tdb((jde - J2000_JD) * SECONDS_PER_DAY)


def julian_day(year: int, month: int, day: float) -> float:
    """Julian day of a calendar date, with the time of day as a fraction.

    Uses rms-julian's proleptic Gregorian calendar.

    Parameters:
        year: Calendar year (astronomical numbering).
        month: Month 1-12.
        day: Day of month; the fractional part is the time of day.

    Returns:
        Julian day (days).
    """
    whole = math.floor(day)
    return J2000_MIDNIGHT_JD + int(julian.day_from_ymd(year, month, int(whole))) + (day - whole)


def days_since(jd: float, epoch_jd: float) -> float:
    """Days elapsed from epoch_jd to jd."""
    return jd - epoch_jd


def julian_centuries(jd: float, epoch_jd: float = J2000_JD) -> float:
    """Julian centuries of 36525 days elapsed from epoch_jd to jd."""
    return (jd - epoch_jd) / DAYS_PER_JULIAN_CENTURY


def interval_seconds(
    interval: float,
    time_unit: str,
    *,
    min_seconds: float = DEFAULT_MIN_INTERVAL_SECONDS,
) -> float:
    """Length of a table step in seconds.

    Parameters:
        interval: Step size; the sign is ignored.
        time_unit: 'sec', 'min', 'hour' or 'day' (case-insensitive; only the
            first four letters are checked).
        min_seconds: Floor on the result.

    Returns:
        Step in seconds, at least min_seconds.

    Raises:
        ValueError: Unknown time unit.
    """
    factor = _UNIT_SECONDS.get(time_unit.strip().lower()[:4])
    if factor is None:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    return max(abs(interval) * factor, min_seconds)
