"""Whole-sign house assignment.

Every house number in the system comes from the same rule:
``((sign(body) - sign(asc) + 12) % 12) + 1``.
"""

from __future__ import annotations

from pillars.schemas.natal import ChartAngles

from ephemeris.bodies import sign_index, sign_index_of


def house_from_sign_indices(body_sign: int, ascendant_sign: int) -> int:
    return ((body_sign - ascendant_sign + 12) % 12) + 1


def assign_whole_sign_house(ascendant_longitude: float, body_longitude: float) -> int:
    """Whole-sign house (1-12) of a body relative to an ascendant."""
    return house_from_sign_indices(sign_index(body_longitude), sign_index(ascendant_longitude))


def house_for_sign(sign: str, rising_sign: str) -> int:
    """Whole-sign house of a sign name when ``rising_sign`` occupies house 1."""
    return house_from_sign_indices(sign_index_of(sign), sign_index_of(rising_sign))


def assign_whole_sign_houses(
    ascendant_longitude: float,
    longitudes: dict[str, float],
) -> dict[str, int]:
    """Houses for every named longitude, preserving input order."""
    return {
        name: assign_whole_sign_house(ascendant_longitude, longitude)
        for name, longitude in longitudes.items()
    }


def angle_houses(angles: ChartAngles) -> dict[str, int]:
    """Houses of ASC/DSC/MC/IC relative to the chart's own ascendant."""
    return assign_whole_sign_houses(angles.ascendant, angles.as_points())
