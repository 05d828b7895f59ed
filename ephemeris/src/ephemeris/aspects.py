"""Aspect detection between ecliptic longitudes."""

from __future__ import annotations

from pillars.schemas.natal import AspectType

# Priority order: the first window containing the separation wins
ASPECTS: list[tuple[AspectType, float, float]] = [
    (AspectType.CONJUNCTION, 0.0, 8.0),
    (AspectType.OPPOSITION, 180.0, 8.0),
    (AspectType.TRINE, 120.0, 8.0),
    (AspectType.SQUARE, 90.0, 7.0),
    (AspectType.SEXTILE, 60.0, 6.0),
]


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def find_aspect(lon1: float, lon2: float) -> AspectType | None:
    """Return the aspect formed by two longitudes, if any."""
    distance = angular_distance(lon1, lon2)
    for aspect, angle, orb in ASPECTS:
        if abs(distance - angle) <= orb:
            return aspect
    return None


def find_aspects(longitudes: dict[str, float]) -> list[tuple[str, str, AspectType]]:
    """All aspects between every unordered pair, in input order."""
    names = list(longitudes)
    found = []
    for i, body1 in enumerate(names):
        for body2 in names[i + 1:]:
            aspect = find_aspect(longitudes[body1], longitudes[body2])
            if aspect is not None:
                found.append((body1, body2, aspect))
    return found
