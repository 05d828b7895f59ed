"""Tests for aspect detection."""

import pytest

from ephemeris.aspects import angular_distance, find_aspect, find_aspects
from pillars.schemas.natal import AspectType


def test_angular_distance():
    """Test angular distance calculation."""
    assert angular_distance(0, 90) == 90.0
    assert angular_distance(90, 0) == 90.0
    assert angular_distance(0, 180) == 180.0
    assert angular_distance(350, 10) == 20.0
    assert angular_distance(10, 350) == 20.0
    assert abs(angular_distance(0, 0) - 0.0) < 0.001


def test_angular_distance_wraparound():
    """Test angular distance handles wraparound correctly."""
    assert abs(angular_distance(355, 5) - 10.0) < 0.001
    assert abs(angular_distance(1, 359) - 2.0) < 0.001


@pytest.mark.parametrize(
    ("lon1", "lon2", "expected"),
    [
        (10.0, 18.0, AspectType.CONJUNCTION),
        (10.0, 18.5, None),
        (0.0, 172.0, AspectType.OPPOSITION),
        (0.0, 128.0, AspectType.TRINE),
        (0.0, 97.0, AspectType.SQUARE),
        (0.0, 97.5, None),
        (0.0, 54.0, AspectType.SEXTILE),
        (0.0, 53.9, None),
        (355.0, 3.0, AspectType.CONJUNCTION),
    ],
)
def test_find_aspect_windows(lon1, lon2, expected):
    assert find_aspect(lon1, lon2) is expected


def test_find_aspect_is_symmetric():
    assert find_aspect(100.0, 220.0) is find_aspect(220.0, 100.0) is AspectType.TRINE


def test_find_aspects_at_most_one_per_pair():
    positions = {"Sun": 0.0, "Moon": 90.0, "Mars": 180.0, "Venus": 45.0}

    aspects = find_aspects(positions)

    pairs = [(a, b) for a, b, _ in aspects]
    assert len(pairs) == len(set(pairs))
    assert ("Sun", "Moon", AspectType.SQUARE) in aspects
    assert ("Sun", "Mars", AspectType.OPPOSITION) in aspects
    assert ("Moon", "Mars", AspectType.SQUARE) in aspects
    # 45° is outside every window
    assert not any("Venus" in (a, b) for a, b, _ in aspects)
