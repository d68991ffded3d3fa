"""Base planet constant tables for physical ephemerides."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RotationSystem:
    """Adopted rotation system: W = w0 + rate * d (degrees, d in days from the epoch)."""

    name: str
    w0_deg: float
    rate_deg_day: float
    light_time_deg_au: float  # rate times light time per AU

    def meridian_deg(self, d: float) -> float:
        """Rotation angle W in degrees (unreduced) d days after the rotation epoch."""
        return self.w0_deg + self.rate_deg_day * d


@dataclass(frozen=True)
class PoleSpec:
    """North pole RA/Dec as linear polynomials in Julian centuries from the rotation epoch."""

    ra0_deg: float
    ra_rate_deg_cy: float
    dec0_deg: float
    dec_rate_deg_cy: float

    def ra_dec_deg(self, t1: float) -> tuple[float, float]:
        """Pole right ascension and declination in degrees at t1 centuries."""
        return (
            self.ra0_deg + self.ra_rate_deg_cy * t1,
            self.dec0_deg + self.dec_rate_deg_cy * t1,
        )


@dataclass(frozen=True)
class PlanetConfig:
    """Planet constants: ID, pole, rotation systems and apparent-size terms."""

    planet_id: int
    planet_num: int
    planet_name: str
    rotation_epoch_jd: float
    pole: PoleSpec
    rotation_systems: tuple[RotationSystem, ...] = field(default_factory=tuple)
    defect_deg: float = 0.0  # defect-of-illumination longitude term at 1 AU
    aberration_deg: float = 0.0
    eq_semidiameter_arcsec: float = 0.0  # at 1 AU
    pol_semidiameter_arcsec: float = 0.0  # at 1 AU

    def rotation_system(self, name: str) -> RotationSystem:
        """Return the rotation system with the given name (e.g. 'I', 'II')."""
        for system in self.rotation_systems:
            if system.name == name:
                return system
        raise ValueError(f'{self.planet_name} has no rotation system {name!r}')
