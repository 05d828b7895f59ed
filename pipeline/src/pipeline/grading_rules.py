"""Rule tables for the Three Pillars grader."""

from __future__ import annotations

from pillars.schemas.diagnostic import FinalGrade

ANGULAR_HOUSES = frozenset({1, 5, 7, 10})

# Pillar 1: Structure (natal)
PILLAR_1_MALEFICS = frozenset({"Pluto", "Saturn", "Uranus", "Mars", "Neptune"})
PILLAR_1_BENEFICS = frozenset({"Sun", "Moon", "Venus", "Jupiter"})
PILLAR_1_SOFT_SPOT_PLANETS = frozenset({"Sun", "Venus"})
PILLAR_1_SOFT_SPOT_HOUSES = frozenset({8, 12})

# Pillar 2: Timing (transits, life cycle)
PILLAR_2_MALEFICS = frozenset({"Neptune", "Pluto", "Saturn", "Uranus"})
PILLAR_2_PRESSURE_HOUSES = frozenset({2, 6, 8, 11})
LIFE_CYCLE_F_YEARS = frozenset({1, 4, 9})
LIFE_CYCLE_A_YEARS = frozenset({5})

# Pillar 3: Environment (destination houses, address)
PILLAR_3_MALEFICS = frozenset({"Neptune", "Pluto", "Saturn", "Uranus", "Mars"})
PILLAR_3_BENEFICS = frozenset({"Sun", "Moon", "Venus", "Jupiter"})
ADDRESS_F_NUMBERS = frozenset({3, 6, 8, 9})
ADDRESS_A_NUMBERS = frozenset({2, 7, 11})
ADDRESS_GRADED_LEVELS = ("Level",)
# Master numbers that survive reduction when grading an address level
ADDRESS_KEPT_MASTERS = frozenset({11})

PILLAR_NAMES = {
    1: ("Structure", "What you were born with"),
    2: ("Timing", "What is happening now"),
    3: ("Environment", "Where you are living"),
}

CAUTION_WEIGHT = 0.5


def score(pressure_count: int, caution_count: int = 0) -> float:
    return pressure_count + CAUTION_WEIGHT * caution_count


def compute_final_grade(score_value: float) -> FinalGrade:
    """Map a weighted score to A/B/C/F: above 6 is F, 4+ is C, 2+ is B, else A."""
    if score_value > 6:
        return FinalGrade.F
    if score_value >= 4:
        return FinalGrade.C
    if score_value >= 2:
        return FinalGrade.B
    return FinalGrade.A
