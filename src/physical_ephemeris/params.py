"""Parameters and column definitions for physical-ephemeris tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from physical_ephemeris.constants import DEFAULT_INTERVAL

logger = logging.getLogger(__name__)

# Column name -> (header, width). Values are formatted right-aligned to width.
COL_JDE = 'jde'
COL_YMDHMS = 'ymdhms'
COL_EARTH_LAT = 'de'
COL_SUN_LAT = 'ds'
COL_CM1 = 'cm1'
COL_CM2 = 'cm2'
COL_PA = 'pa'
COL_DIAM = 'diam'
COL_DIST = 'dist'

COLUMNS: dict[str, tuple[str, int]] = {
    COL_JDE: ('jde', 15),
    COL_YMDHMS: ('year-mo-dy hr:mi:sc', 19),
    COL_EARTH_LAT: ('D_E', 7),
    COL_SUN_LAT: ('D_S', 7),
    COL_CM1: ('CM_I', 8),
    COL_CM2: ('CM_II', 8),
    COL_PA: ('P', 7),
    COL_DIAM: ('eq_diam', 7),
    COL_DIST: ('delta', 11),
}

DEFAULT_COLUMNS = [
    COL_YMDHMS,
    COL_EARTH_LAT,
    COL_SUN_LAT,
    COL_CM1,
    COL_CM2,
    COL_PA,
]

# Aliases accepted on the command line.
_COLUMN_ALIASES: dict[str, str] = {
    'earth_lat': COL_EARTH_LAT,
    'sun_lat': COL_SUN_LAT,
    'system1': COL_CM1,
    'system2': COL_CM2,
    'position_angle': COL_PA,
    'diameter': COL_DIAM,
    'distance': COL_DIST,
    'utc': COL_YMDHMS,
}


@dataclass
class EphemerisParams:
    """Inputs for a physical-ephemeris table (times are UTC strings)."""

    start_time: str
    stop_time: str
    planet_num: int = 5
    interval: float = DEFAULT_INTERVAL
    time_unit: str = 'hour'
    columns: list[str] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    output: TextIO | None = None


def parse_column_spec(tokens: list[str]) -> list[str]:
    """Convert column tokens to column names.

    Parameters:
        tokens: Case-insensitive column names or aliases (e.g. cm1, system2).

    Returns:
        List of canonical column names, in the order given.

    Raises:
        ValueError: If a token is not a known column.
    """
    out: list[str] = []
    for s in tokens:
        key = s.strip().lower()
        if not key:
            continue
        key = _COLUMN_ALIASES.get(key, key)
        if key not in COLUMNS:
            raise ValueError(
                f'Unknown column {s!r}; expected one of {", ".join(COLUMNS)}'
            )
        out.append(key)
    if not out:
        logger.debug('No columns requested; using defaults')
        return list(DEFAULT_COLUMNS)
    return out
