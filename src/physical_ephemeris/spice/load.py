"""SPICE kernel loading for the SPICE position backend."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import cspyce

from physical_ephemeris.config import get_spice_path
from physical_ephemeris.spice.common import get_state

logger = logging.getLogger(__name__)

# Kernels furnished once, before any planet kernel, when present.
POOL_KERNELS = ('leapseconds.ker', 'p_constants.ker')

KERNEL_LIST_NAME = 'SPICE_planets.txt'


def _furnish(path: Path) -> bool:
    """Furnish one kernel file; log and return False if cspyce rejects it."""
    try:
        cspyce.furnsh(str(path))
    except Exception as e:
        logger.warning('Failed to load %s: %s', path, e)
        return False
    get_state().kernels.append(str(path))
    return True


def read_kernel_list(path: Path) -> Iterator[tuple[int, int, str]]:
    """Yield (planet, version, filename) entries of a kernel list file.

    Lines are ``planet,version,"file"``; blank lines and lines starting with
    '!' are skipped. Malformed lines are logged and skipped.
    """
    with path.open() as f:
        for line_no, raw in enumerate(f, start=1):
            text = raw.strip()
            if not text or text.startswith('!'):
                continue
            fields = [s.strip() for s in text.split(',')]
            if len(fields) < 3:
                logger.error(
                    '%s line %d: expected planet,version,file: %r', path.name, line_no, text
                )
                continue
            try:
                planet, version = int(fields[0]), int(fields[1])
            except ValueError:
                logger.error(
                    '%s line %d: non-integer planet or version: %r', path.name, line_no, text
                )
                continue
            yield (planet, version, fields[2].strip('"'))


def load_spice_files(planet: int, version: int = 0) -> tuple[bool, str | None]:
    """Load the SPK kernels listed for a planet in SPICE_planets.txt.

    Parameters:
        planet: Planet number (5=Jupiter).
        version: Kernel set version, or 0 for the first listed for the planet.

    Returns:
        (True, None) if loaded (or already loaded), (False, reason) on failure.
    """
    state = get_state()
    if state.planet_num == planet and version in (0, state.version):
        return (True, None)
    if state.planet_num not in (0, planet):
        return (False, 'SPICE already loaded for a different planet')
    base = Path(get_spice_path())
    if not base.is_dir():
        return (False, f'SPICE_PATH is not a directory: {base}')
    if not state.pool_loaded:
        for name in POOL_KERNELS:
            if (base / name).exists():
                _furnish(base / name)
        state.pool_loaded = True
    list_path = base / KERNEL_LIST_NAME
    if not list_path.exists():
        logger.warning('Kernel list not found: %s', list_path)
        return (False, f'{KERNEL_LIST_NAME} not found under {base}')

    entries = [(v, name) for p, v, name in read_kernel_list(list_path) if p == planet]
    load_version = version or (entries[0][0] if entries else 0)
    loaded = False
    for v, name in entries:
        if v != load_version:
            continue
        kpath = base / name
        if not kpath.exists():
            logger.warning('Kernel listed but missing: %s', kpath)
        elif _furnish(kpath):
            loaded = True
    if not loaded:
        return (
            False,
            f'No kernel files for planet {planet} (version {load_version}) found under {base}',
        )
    state.planet_num = planet
    state.version = load_version
    logger.debug('Loaded SPICE kernels for planet %d version %d', planet, load_version)
    return (True, None)
