"""Jupiter constants for the physical ephemeris (Systems I and II)."""

from __future__ import annotations

from physical_ephemeris.constants import JUPITER_ID
from physical_ephemeris.planets.base import PlanetConfig, PoleSpec, RotationSystem

JUPITER_CONFIG = PlanetConfig(
    planet_id=JUPITER_ID,
    planet_num=5,
    planet_name='Jupiter',
    rotation_epoch_jd=2433282.5,  # 1950-01-01.0 TT
    pole=PoleSpec(
        ra0_deg=268.0,
        ra_rate_deg_cy=0.1061,
        dec0_deg=64.5,
        dec_rate_deg_cy=-0.0164,
    ),
    rotation_systems=(
        RotationSystem('I', w0_deg=17.710, rate_deg_day=877.90003539, light_time_deg_au=5.07033),
        RotationSystem('II', w0_deg=16.838, rate_deg_day=870.27003539, light_time_deg_au=5.02626),
    ),
    defect_deg=0.01299,
    aberration_deg=0.005693,
    eq_semidiameter_arcsec=98.44,
    pol_semidiameter_arcsec=92.06,
)
