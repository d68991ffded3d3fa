"""Planet-specific constant tables (pole, rotation systems, apparent size)."""

from physical_ephemeris.planets.base import PlanetConfig, PoleSpec, RotationSystem
from physical_ephemeris.planets.jupiter import JUPITER_CONFIG

_PLANET_CONFIGS: dict[int, PlanetConfig] = {
    5: JUPITER_CONFIG,
}

PLANET_NAME_TO_NUM: dict[str, int] = {
    cfg.planet_name.lower(): num for num, cfg in _PLANET_CONFIGS.items()
}


def parse_planet(value: str | int) -> int:
    """Convert a planet number or case-insensitive name to a supported planet number.

    Parameters:
        value: Planet number (e.g. 5 or '5') or name (e.g. 'Jupiter').

    Returns:
        Planet number.

    Raises:
        ValueError: If the planet is unknown or has no constant table.
    """
    text = str(value).strip().lower()
    if text.isdigit():
        num = int(text)
    elif text in PLANET_NAME_TO_NUM:
        num = PLANET_NAME_TO_NUM[text]
    else:
        raise ValueError(f'Unknown planet {value!r}')
    if num not in _PLANET_CONFIGS:
        raise ValueError(
            f'No physical ephemeris for planet {value!r}; supported: '
            f'{", ".join(sorted(PLANET_NAME_TO_NUM))}'
        )
    return num


def get_planet_config(planet: str | int) -> PlanetConfig:
    """Return the constant table for a planet number or name."""
    return _PLANET_CONFIGS[parse_planet(planet)]


__all__ = [
    'JUPITER_CONFIG',
    'PLANET_NAME_TO_NUM',
    'PlanetConfig',
    'PoleSpec',
    'RotationSystem',
    'get_planet_config',
    'parse_planet',
]
