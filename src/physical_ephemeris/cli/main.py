"""CLI entry point: physical-ephemeris table|at subcommands."""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from typing import NoReturn, TextIO

from physical_ephemeris.angle_utils import degrees_from_dms, limit_to_360
from physical_ephemeris.config import POSITION_BACKENDS
from physical_ephemeris.constants import DEFAULT_INTERVAL
from physical_ephemeris.params import EphemerisParams, parse_column_spec
from physical_ephemeris.planets import parse_planet

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or PHYSICAL_EPHEMERIS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('PHYSICAL_EPHEMERIS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _apply_backend(backend: str | None) -> None:
    """Select the position backend for this process (sets PHYSICAL_EPHEMERIS_BACKEND)."""
    if backend:
        os.environ['PHYSICAL_EPHEMERIS_BACKEND'] = backend
        logger.debug('Position backend: %s', backend)


def _table_cmd(args: argparse.Namespace) -> int:
    """Run the table generator (table subcommand).

    Parameters:
        args: Parsed args; planet, start, stop, interval, columns, output.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    from physical_ephemeris import ephemeris

    try:
        params = EphemerisParams(
            planet_num=args.planet,
            start_time=args.start,
            stop_time=args.stop,
            interval=args.interval,
            time_unit=args.time_unit,
            columns=parse_column_spec([str(x) for x in (args.columns or [])]),
        )
        _apply_backend(args.backend)
        if args.output is not None:
            with open(args.output, 'w') as f:
                ephemeris.generate_ephemeris(params, f)
        else:
            ephemeris.generate_ephemeris(params, sys.stdout)
    except (ValueError, RuntimeError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _at_cmd(args: argparse.Namespace, out: TextIO | None = None) -> int:
    """Print the physical ephemeris for one JDE (at subcommand).

    Obliquity and nutation are computed unless all three are given on the
    command line.
    """
    from physical_ephemeris import ephemeris

    stream = out or sys.stdout
    overrides = (args.obliquity, args.nut_long, args.nut_oblq)
    try:
        _apply_backend(args.backend)
        if all(v is not None for v in overrides):
            eph = ephemeris.jupiter_ephemeris(
                args.jde,
                math.radians(args.obliquity),
                math.radians(degrees_from_dms(0, 0, args.nut_long)),
                math.radians(degrees_from_dms(0, 0, args.nut_oblq)),
            )
        elif any(v is not None for v in overrides):
            raise ValueError('--obliquity, --nut-long and --nut-oblq must be given together')
        else:
            eph = ephemeris.jupiter_ephemeris_at(args.jde)
    except (ValueError, RuntimeError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    stream.write(f'D_E   {math.degrees(eph.earth_latitude):10.4f}\n')
    stream.write(f'D_S   {math.degrees(eph.sun_latitude):10.4f}\n')
    stream.write(f'CM_I  {math.degrees(eph.system1_longitude):10.4f}\n')
    stream.write(f'CM_II {math.degrees(eph.system2_longitude):10.4f}\n')
    stream.write(f'P     {limit_to_360(math.degrees(eph.axis_position_angle)):10.4f}\n')
    return 0


def main() -> int:
    """Entry point for physical-ephemeris CLI (table | at).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='physical-ephemeris',
        description='Ephemeris for physical observations of Jupiter.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    table_parser = subparsers.add_parser('table', help='Generate a time-series table')
    table_parser.add_argument(
        '--planet', type=parse_planet, default=5, help='Planet number or name (jupiter)'
    )
    table_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    table_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    table_parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Time step'
    )
    table_parser.add_argument(
        '--time-unit',
        type=str,
        default='hour',
        choices=['sec', 'min', 'hour', 'day'],
    )
    table_parser.add_argument(
        '--columns',
        type=str,
        nargs='*',
        default=None,
        help='Column names (jde ymdhms de ds cm1 cm2 pa diam dist)',
    )
    table_parser.add_argument('--backend', choices=POSITION_BACKENDS, default=None)
    table_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    table_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    table_parser.set_defaults(func=_table_cmd)

    at_parser = subparsers.add_parser('at', help='Physical ephemeris at one JDE')
    at_parser.add_argument('jde', type=float, help='Julian Ephemeris Day')
    at_parser.add_argument(
        '--obliquity', type=float, default=None, help='Mean obliquity (degrees)'
    )
    at_parser.add_argument(
        '--nut-long', type=float, default=None, help='Nutation in longitude (arcsec)'
    )
    at_parser.add_argument(
        '--nut-oblq', type=float, default=None, help='Nutation in obliquity (arcsec)'
    )
    at_parser.add_argument('--backend', choices=POSITION_BACKENDS, default=None)
    at_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    at_parser.set_defaults(func=_at_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return int(args.func(args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
