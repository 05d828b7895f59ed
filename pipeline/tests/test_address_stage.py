"""Tests for the address numerology stage."""

import pytest

from pillars.schemas.birth import AddressNumerologyInput
from pipeline.stages.address_stage import (
    address_summary,
    calculate_address_numerology,
    strip_street_name,
    validate_address_numerology_input,
)


def _address(**overrides):
    fields = {
        "unit_number": "5B",
        "street_number": "14952",
        "street_name": "Day lily",
        "postal_code": "32824",
        "home_year": "1985",
        "birth_year": "1990",
    }
    fields.update(overrides)
    return AddressNumerologyInput(**fields)


def test_full_address_levels(today):
    outcome = calculate_address_numerology(_address(), today=today)

    assert outcome.ok
    levels = [(lvl.level, lvl.name, lvl.value, lvl.number) for lvl in outcome.value.levels]
    assert levels == [
        ("L1", "Unit Number", "5B", 7),
        ("L2", "Building/House Number", "14952", 3),
        ("L3", "Street Name", "Day lily", 5),
        ("L4", "Postal Code", "32824", 1),
        ("L5", "Level", "5B + 14952 + Day lily", 6),
    ]


def test_levels_carry_meanings(today):
    level = calculate_address_numerology(_address(), today=today).value.level_named("Level")
    assert level.meaning == "The Nurturer"
    assert level.themes
    assert level.reflection


def test_zodiac_and_compatibility(today):
    result = calculate_address_numerology(_address(), today=today).value
    assert result.home_zodiac == "Ox"
    assert result.birth_zodiac == "Horse"
    assert result.compatibility == "worst"
    assert result.home_zodiac_meaning.name == "Ox"
    assert result.birth_zodiac_meaning.themes


def test_missing_home_year(today):
    result = calculate_address_numerology(_address(home_year=""), today=today).value
    assert result.home_zodiac == "Unknown"
    assert result.home_zodiac_meaning is None
    assert result.compatibility == "unknown"


def test_levels_are_numbered_densely(today):
    result = calculate_address_numerology(_address(unit_number="", postal_code=""), today=today).value
    assert [(lvl.level, lvl.name) for lvl in result.levels] == [
        ("L1", "Building/House Number"),
        ("L2", "Street Name"),
        ("L3", "Level"),
    ]


def test_combined_level_strips_street_suffix(today):
    result = calculate_address_numerology(
        _address(unit_number="", street_number="12", street_name="Oak Street"), today=today
    ).value

    assert result.level_named("Street Name").value == "Oak Street"
    combined = result.level_named("Level")
    assert combined.value == "12 + Oak"
    assert combined.number == 4


def test_combined_level_unit_and_building(today):
    result = calculate_address_numerology(_address(street_name=""), today=today).value
    combined = result.level_named("Level")
    assert combined.value == "5B + 14952"
    assert combined.number == 1


def test_no_combined_level_without_building(today):
    result = calculate_address_numerology(_address(unit_number="", street_number=""), today=today).value
    assert result.level_named("Level") is None


@pytest.mark.parametrize(
    ("street", "stripped"),
    [
        ("Oak Street", "Oak"),
        ("Main St. N", "Main"),
        ("Elm Ave SW", "Elm"),
        ("North Street", "North"),
        ("Day lily", "Day lily"),
        ("Broadway", "Broadway"),
    ],
)
def test_strip_street_name(street, stripped):
    assert strip_street_name(street) == stripped


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"birth_year": ""}, "Birth year is required"),
        ({"birth_year": "1899"}, "Invalid birth year"),
        ({"birth_year": "19x0"}, "Invalid birth year"),
        ({"home_year": "1499"}, "Invalid home year"),
        ({"home_year": "2127"}, "Invalid home year"),
    ],
)
def test_validation(today, overrides, message):
    error = validate_address_numerology_input(_address(**overrides), today=today)
    assert error is not None
    assert error.calculator == "addressNumerology"
    assert error.message == message


def test_home_year_upper_bound(today):
    assert validate_address_numerology_input(_address(home_year="2126"), today=today) is None


def test_summary(today):
    result = calculate_address_numerology(_address(), today=today).value
    assert address_summary(result) == "L1: 7, L2: 3, L3: 5, L4: 1, L5: 6 | Ox ♥ Horse: worst"


def test_zero_unit_number_is_skipped(today):
    data = _address(unit_number="0")

    assert validate_address_numerology_input(data, today=today) is None
    result = calculate_address_numerology(data, today=today).value
    assert result.level_named("Unit Number") is None
    assert result.level_named("Level").value == "14952 + Day lily"


def test_non_latin_street_name_is_skipped(today):
    data = _address(street_name="Главная")

    assert validate_address_numerology_input(data, today=today) is None
    result = calculate_address_numerology(data, today=today).value
    assert [(lvl.level, lvl.name) for lvl in result.levels] == [
        ("L1", "Unit Number"),
        ("L2", "Building/House Number"),
        ("L3", "Postal Code"),
        ("L4", "Level"),
    ]
    assert result.level_named("Level").value == "5B + 14952"


def test_street_with_only_a_suffix_left_to_score(today):
    result = calculate_address_numerology(
        _address(street_name="Главная Street"), today=today
    ).value

    assert result.level_named("Street Name").value == "Главная Street"
    assert result.level_named("Level").value == "5B + 14952"
