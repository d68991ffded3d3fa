"""Fixed constants: body IDs, epochs, unit conversions, planet number mapping."""

# Body IDs (NAIF)
SUN_ID = 10
MERCURY_ID = 199
VENUS_ID = 299
EARTH_ID = 399
MARS_ID = 499
JUPITER_ID = 599
SATURN_ID = 699
URANUS_ID = 799
NEPTUNE_ID = 899

# Time
J2000_JD = 2451545.0  # JD of J2000.0 (2000-01-01 12:00 TT)
J2000_MIDNIGHT_JD = 2451544.5  # JD of 2000-01-01 00:00, day zero for rms-julian
DAYS_PER_JULIAN_CENTURY = 36525.0
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0

# Angle
DEGREES_PER_CIRCLE = 360.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0

# Distance and light
AU_KM = 149597870.7
LIGHT_TIME_DAYS_PER_AU = 0.0057755183

# Defaults and thresholds
DEFAULT_INTERVAL = 1.0
DEFAULT_MIN_INTERVAL_SECONDS = 1.0
MAX_TABLE_ROWS = 100000

# Planet number (1=Mercury .. 8=Neptune) -> NAIF planet ID
PLANET_NUM_TO_ID: dict[int, int] = {
    1: MERCURY_ID,
    2: VENUS_ID,
    3: EARTH_ID,
    4: MARS_ID,
    5: JUPITER_ID,
    6: SATURN_ID,
    7: URANUS_ID,
    8: NEPTUNE_ID,
}

# NAIF planet ID -> planet number
PLANET_ID_TO_NUM: dict[int, int] = {v: k for k, v in PLANET_NUM_TO_ID.items()}

# Target names for SPK lookups. Generic DE kernels carry planet system
# barycenters for the outer planets rather than the planet centers.
SPICE_TARGETS: dict[int, str] = {
    SUN_ID: '10',
    MERCURY_ID: '199',
    VENUS_ID: '299',
    EARTH_ID: '399',
    MARS_ID: '4',
    JUPITER_ID: '5',
    SATURN_ID: '6',
    URANUS_ID: '7',
    NEPTUNE_ID: '8',
}
