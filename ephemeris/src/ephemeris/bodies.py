"""Body definitions, chart angles and sign data."""

from __future__ import annotations

# Celestial body IDs for pyswisseph
# These map to swisseph constants
BODY_IDS: dict[str, int] = {
    "Sun": 0,  # SE_SUN
    "Moon": 1,  # SE_MOON
    "Mercury": 2,  # SE_MERCURY
    "Venus": 3,  # SE_VENUS
    "Mars": 4,  # SE_MARS
    "Jupiter": 5,  # SE_JUPITER
    "Saturn": 6,  # SE_SATURN
    "Uranus": 7,  # SE_URANUS
    "Neptune": 8,  # SE_NEPTUNE
    "Pluto": 9,  # SE_PLUTO
    "Mean Node": 10,  # SE_MEAN_NODE
    "True Node": 11,  # SE_TRUE_NODE
    "Lilith": 12,  # SE_MEAN_APOG (Black Moon Lilith, mean apogee)
    "Chiron": 15,  # SE_CHIRON
    "Ceres": 17,  # SE_CERES
    "Pallas": 18,  # SE_PALLAS
    "Juno": 19,  # SE_JUNO
    "Vesta": 20,  # SE_VESTA
}

# Bodies every longitude query must return
ALL_BODIES = list(BODY_IDS.keys())

# Chart angles as named points
ASCENDANT = "Ascendant"
DESCENDANT = "Descendant"
MIDHEAVEN = "MC"
IMUM_COELI = "IC"
ANGLE_NAMES = (ASCENDANT, DESCENDANT, MIDHEAVEN, IMUM_COELI)

# Zodiac signs in order
SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]


def normalize_degrees(longitude: float) -> float:
    """Normalize an angle to [0, 360)."""
    return longitude % 360.0


def sign_index(longitude: float) -> int:
    """Zodiac sign index (0 = Aries) of an ecliptic longitude."""
    return int(normalize_degrees(longitude) // 30.0)


def sign_index_of(sign: str) -> int:
    """Index of a sign name; raises ValueError for unknown names."""
    return SIGNS.index(sign)


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_degrees(longitude)
    index = int(longitude // 30.0)
    degree = longitude - (index * 30.0)
    return SIGNS[index], degree
