"""Ephemeris for physical observations of Jupiter.

Closed-form algorithms for the planetocentric declinations of the Earth and
the Sun, the central-meridian longitudes of rotation Systems I and II, and the
position angle of Jupiter's rotation axis. Heliocentric positions come from
VSOP87 (PyMeeus) by default, from the ERFA series in pyerfa, or from SPICE
kernels via cspyce; nutation uses pyerfa and time conversions rms-julian.
"""

from physical_ephemeris.ephemeris import (
    JupiterEphemeris,
    eq_semidiameter,
    jupiter_ephemeris,
    jupiter_ephemeris_at,
    pol_semidiameter,
)

__all__: list[str] = [
    'JupiterEphemeris',
    'eq_semidiameter',
    'jupiter_ephemeris',
    'jupiter_ephemeris_at',
    'pol_semidiameter',
]
