"""Chinese zodiac animals and the home/birth compatibility matrix."""

from __future__ import annotations

ANIMALS: tuple[str, ...] = (
    "Rat",
    "Ox",
    "Tiger",
    "Rabbit",
    "Dragon",
    "Snake",
    "Horse",
    "Goat",
    "Monkey",
    "Rooster",
    "Dog",
    "Pig",
)

RANK_LABELS: dict[str, str] = {
    "-": "average",
    "x": "worst",
    "d": "above average",
    "?": "good match OR enemy",
    "t": "good match",
    "h": "perfect match",
}

UNKNOWN = "unknown"

# Axis order of the matrix below (rows and columns alike)
MATRIX_ORDER: tuple[str, ...] = (
    "Ox",
    "Tiger",
    "Rabbit",
    "Dragon",
    "Snake",
    "Horse",
    "Goat",
    "Monkey",
    "Rooster",
    "Dog",
    "Pig",
    "Rat",
)

# Row = home-year animal, column = birth-year animal
COMPATIBILITY_MATRIX: tuple[tuple[str, ...], ...] = (
    ("-", "x", "d", "x", "d", "x", "x", "h", "h", "d", "?", "h"),  # Ox
    ("x", "x", "-", "h", "x", "h", "t", "x", "d", "d", "h", "-"),  # Tiger
    ("d", "-", "-", "-", "x", "-", "h", "h", "x", "h", "h", "h"),  # Rabbit
    ("x", "h", "-", "t", "h", "-", "x", "d", "d", "x", "t", "h"),  # Dragon
    ("d", "x", "x", "h", "x", "t", "x", "t", "h", "-", "x", "t"),  # Snake
    ("x", "h", "-", "-", "t", "x", "h", "-", "x", "-", "d", "x"),  # Horse
    ("x", "t", "h", "x", "x", "h", "d", "d", "-", "x", "h", "?"),  # Goat
    ("h", "x", "h", "d", "t", "-", "d", "t", "-", "d", "x", "h"),  # Monkey
    ("h", "d", "x", "d", "h", "x", "-", "-", "x", "x", "-", "x"),  # Rooster
    ("d", "d", "h", "x", "-", "-", "x", "d", "x", "-", "d", "d"),  # Dog
    ("?", "h", "h", "t", "x", "d", "h", "x", "-", "d", "t", "d"),  # Pig
    ("h", "-", "h", "h", "t", "x", "?", "h", "x", "d", "d", "-"),  # Rat
)


def zodiac_for_year(year: int) -> str:
    """Animal of the 12-year cycle that starts with Rat in year 4."""
    return ANIMALS[(year - 4) % 12]


def compatibility_rank(home: str, birth: str) -> str | None:
    """Single-character rank for a home/birth pair, or None for unknown animals."""
    try:
        row = MATRIX_ORDER.index(home)
        col = MATRIX_ORDER.index(birth)
    except ValueError:
        return None
    return COMPATIBILITY_MATRIX[row][col]


def compatibility(home: str, birth: str) -> str:
    rank = compatibility_rank(home, birth)
    if rank is None:
        return UNKNOWN
    return RANK_LABELS[rank]
