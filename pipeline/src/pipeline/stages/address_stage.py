"""Address numerology stage: levels of the home address plus home/birth animals."""

from __future__ import annotations

import logging
from datetime import date

from pillars.errors import InputValidationError
from pillars.meanings import CHINESE_ZODIAC_MEANINGS, full_number_meaning
from pillars.schemas.birth import AddressNumerologyInput
from pillars.schemas.calculators import AddressNumerologyResult, NumerologyLevel, ZodiacMeaning
from pillars.services.chinese_zodiac import UNKNOWN, compatibility, zodiac_for_year
from pillars.services.numerology import raw_value, value_of

from pipeline.stages.base import StageOutcome

logger = logging.getLogger(__name__)

CALCULATOR = "addressNumerology"

COMBINED_LEVEL = "Level"
UNKNOWN_ZODIAC = "Unknown"

# (input field, level name), in level order
ADDRESS_FIELDS = (
    ("unit_number", "Unit Number"),
    ("street_number", "Building/House Number"),
    ("street_name", "Street Name"),
    ("postal_code", "Postal Code"),
)

STREET_SUFFIXES = frozenset(
    {
        "street", "st", "avenue", "ave", "av", "road", "rd", "boulevard", "blvd",
        "drive", "dr", "lane", "ln", "court", "ct", "place", "pl", "way", "terrace",
        "ter", "circle", "cir", "parkway", "pkwy", "highway", "hwy", "trail", "trl",
        "square", "sq", "crescent", "cres", "alley", "aly",
    }
)
DIRECTIONALS = frozenset(
    {"n", "s", "e", "w", "ne", "nw", "se", "sw", "north", "south", "east", "west"}
)


def strip_street_name(street_name: str) -> str:
    """Drop trailing suffix and directional tokens: ``"Oak Street"`` becomes ``"Oak"``.

    The first token is always kept, so ``"North Street"`` becomes ``"North"``.
    """
    tokens = street_name.split()
    while len(tokens) > 1 and tokens[-1].rstrip(".").lower() in STREET_SUFFIXES | DIRECTIONALS:
        tokens.pop()
    return " ".join(tokens)


def _year(text: str) -> int | None:
    text = text.strip()
    return int(text) if text.isascii() and text.isdigit() else None


def validate_address_numerology_input(
    data: AddressNumerologyInput,
    *,
    today: date | None = None,
) -> InputValidationError | None:
    today = today or date.today()
    if not data.birth_year:
        return InputValidationError(CALCULATOR, "Birth year is required")
    birth_year = _year(data.birth_year)
    if birth_year is None or not 1900 <= birth_year <= today.year:
        return InputValidationError(CALCULATOR, "Invalid birth year")
    if data.home_year:
        home_year = _year(data.home_year)
        if home_year is None or not 1500 <= home_year <= today.year + 100:
            return InputValidationError(CALCULATOR, "Invalid home year")
    return None


def _scored(value: str) -> str:
    """The value if it scores, else "" so that it counts as absent."""
    return value if value and raw_value(value) > 0 else ""


def _combined_parts(unit: str, building: str, street: str) -> list[str] | None:
    if unit and building and street:
        return [unit, building, street]
    if unit and building:
        return [unit, building]
    if building and street:
        return [building, street]
    return None


def build_level(level: str, value: str, name: str) -> NumerologyLevel:
    number = value_of([value])
    meaning = full_number_meaning(number)
    return NumerologyLevel(level=level, value=value, name=name, number=number, **meaning)


def build_levels(data: AddressNumerologyInput) -> list[NumerologyLevel]:
    # Fields with nothing to score (e.g. "0" or a non-Latin name) are skipped
    values = {field: _scored(getattr(data, field)) for field, _ in ADDRESS_FIELDS}
    raw: list[tuple[str, str]] = [(values[field], name) for field, name in ADDRESS_FIELDS if values[field]]
    street = _scored(strip_street_name(values["street_name"])) if values["street_name"] else ""
    parts = _combined_parts(values["unit_number"], values["street_number"], street)
    if parts:
        raw.append((" + ".join(parts), COMBINED_LEVEL))
    return [build_level(f"L{index}", value, name) for index, (value, name) in enumerate(raw, start=1)]


def zodiac_meaning(animal: str) -> ZodiacMeaning | None:
    meaning = CHINESE_ZODIAC_MEANINGS.get(animal)
    if meaning is None:
        return None
    return ZodiacMeaning(name=animal, **meaning)


def calculate_address_numerology(
    data: AddressNumerologyInput,
    *,
    today: date | None = None,
) -> StageOutcome[AddressNumerologyResult]:
    error = validate_address_numerology_input(data, today=today)
    if error is not None:
        return StageOutcome.failure(CALCULATOR, error)

    home_year = _year(data.home_year) if data.home_year else None
    home_zodiac = zodiac_for_year(home_year) if home_year else UNKNOWN_ZODIAC
    birth_zodiac = zodiac_for_year(int(data.birth_year))

    result = AddressNumerologyResult(
        levels=build_levels(data),
        home_zodiac=home_zodiac,
        birth_zodiac=birth_zodiac,
        home_zodiac_meaning=zodiac_meaning(home_zodiac) if home_year else None,
        birth_zodiac_meaning=zodiac_meaning(birth_zodiac),
        compatibility=compatibility(home_zodiac, birth_zodiac) if home_year else UNKNOWN,
    )
    logger.debug("Address numerology: %d levels, compatibility %s", len(result.levels), result.compatibility)
    return StageOutcome.success(CALCULATOR, result)


def address_summary(result: AddressNumerologyResult) -> str:
    """One-line summary, e.g. ``L1: 5, L2: 3 | Horse ♥ Dragon: average``."""
    levels = ", ".join(f"{level.level}: {level.number}" for level in result.levels)
    return f"{levels} | {result.home_zodiac} ♥ {result.birth_zodiac}: {result.compatibility}"
