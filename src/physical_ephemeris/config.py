"""Configuration: SPICE path, leap seconds file and position backend from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_SPICE_PATH = '/var/www/SPICE/'
DEFAULT_POSITION_BACKEND = 'vsop87'
POSITION_BACKENDS = ('vsop87', 'erfa', 'spice')


def get_spice_path() -> str:
    """Return SPICE kernel root directory (SPICE_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('SPICE_PATH', DEFAULT_SPICE_PATH)


def get_leapsecs_path() -> str:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then a .tls file under SPICE_PATH, then
    leapsecs.txt under SPICE_PATH (which rms-julian may reject, triggering the
    bundled-LSK fallback).

    Returns:
        Path string to LSK or leapsecs file.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_spice_path())
    for name in ('naif0012.tls', 'naif0011.tls', 'naif0010.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return str(base / 'leapsecs.txt')


def get_position_backend() -> str:
    """Return the heliocentric position backend name.

    Reads PHYSICAL_EPHEMERIS_BACKEND; blank or unset selects the VSOP87
    backend.

    Returns:
        Lowercase backend name ('vsop87', 'erfa' or 'spice').

    Raises:
        ValueError: If the variable names an unknown backend.
    """
    name = os.environ.get('PHYSICAL_EPHEMERIS_BACKEND', '').strip().lower()
    if not name:
        return DEFAULT_POSITION_BACKEND
    if name not in POSITION_BACKENDS:
        raise ValueError(
            f'Invalid PHYSICAL_EPHEMERIS_BACKEND {name!r}; expected one of '
            f'{", ".join(POSITION_BACKENDS)}'
        )
    return name
