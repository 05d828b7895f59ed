"""Tests for the Chinese zodiac cycle and compatibility table."""

import pytest

from pillars.services.chinese_zodiac import (
    ANIMALS,
    COMPATIBILITY_MATRIX,
    MATRIX_ORDER,
    RANK_LABELS,
    compatibility,
    compatibility_rank,
    zodiac_for_year,
)


@pytest.mark.parametrize(
    ("year", "animal"),
    [(2002, "Horse"), (1990, "Horse"), (2000, "Dragon"), (1975, "Rabbit"), (2020, "Rat"), (1985, "Ox")],
)
def test_zodiac_for_year(year, animal):
    assert zodiac_for_year(year) == animal


def test_cycle_repeats_every_twelve_years():
    for year in range(1900, 1924):
        assert zodiac_for_year(year) == zodiac_for_year(year + 12)
    assert {zodiac_for_year(y) for y in range(2000, 2012)} == set(ANIMALS)


def test_matrix_shape():
    assert len(COMPATIBILITY_MATRIX) == 12
    assert all(len(row) == 12 for row in COMPATIBILITY_MATRIX)
    assert set(MATRIX_ORDER) == set(ANIMALS)
    assert all(rank in RANK_LABELS for row in COMPATIBILITY_MATRIX for rank in row)


@pytest.mark.parametrize(
    ("home", "birth", "label"),
    [
        ("Dragon", "Horse", "average"),
        ("Ox", "Rat", "perfect match"),
        ("Ox", "Pig", "good match OR enemy"),
        ("Rabbit", "Snake", "worst"),
        ("Dragon", "Dragon", "good match"),
        ("Snake", "Ox", "above average"),
        ("Ox", "Horse", "worst"),
    ],
)
def test_compatibility_pins(home, birth, label):
    assert compatibility(home, birth) == label


def test_ambiguous_pairs():
    assert compatibility("Pig", "Ox") == "good match OR enemy"
    assert compatibility("Rat", "Goat") == "good match OR enemy"
    assert compatibility("Goat", "Rat") == "good match OR enemy"


def test_unknown_animal():
    assert compatibility_rank("Unknown", "Horse") is None
    assert compatibility("Unknown", "Horse") == "unknown"
