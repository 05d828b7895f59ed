"""Life path stage: birth-date numerology and the birth-year animal."""

from __future__ import annotations

import logging
import re
from datetime import date

from pillars.errors import InputValidationError
from pillars.meanings import number_meaning
from pillars.schemas.birth import LifePathInput
from pillars.schemas.calculators import LifePathMeanings, LifePathResult
from pillars.services.chinese_zodiac import zodiac_for_year
from pillars.services.numerology import value_of

from pipeline.stages.base import StageOutcome

logger = logging.getLogger(__name__)

CALCULATOR = "lifePath"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_life_path_input(
    data: LifePathInput,
    *,
    today: date | None = None,
) -> InputValidationError | None:
    today = today or date.today()
    if not data.birth_date:
        return InputValidationError(CALCULATOR, "Birth date is required")
    if not _DATE_RE.match(data.birth_date):
        return InputValidationError(CALCULATOR, "Invalid date format. Expected YYYY-MM-DD")
    try:
        birth = date.fromisoformat(data.birth_date)
    except ValueError:
        return InputValidationError(CALCULATOR, "Invalid birth date")
    if birth > today:
        return InputValidationError(CALCULATOR, "Birth date cannot be in the future")
    return None


def life_path_number(birth_date: str) -> int:
    return value_of([birth_date.replace("-", "")])


def day_path_number(birth_date: str) -> int:
    return value_of([birth_date.split("-")[2]])


def personal_year_number(birth_date: str, current_year: int) -> int:
    """Current year, birth month and birth day scored as separate tokens.

    Joining with spaces (not concatenating) lets a component keep its own
    master number: ``"2026 01 09"`` gives 11.
    """
    _, month, day = birth_date.split("-")
    return value_of([f"{current_year} {month} {day}"])


def calculate_life_path(
    data: LifePathInput,
    *,
    today: date | None = None,
) -> StageOutcome[LifePathResult]:
    today = today or date.today()
    error = validate_life_path_input(data, today=today)
    if error is not None:
        return StageOutcome.failure(CALCULATOR, error)

    birth_date = data.birth_date
    life_path = life_path_number(birth_date)
    personal_year = personal_year_number(birth_date, today.year)
    life_meaning = number_meaning(life_path)
    year_meaning = number_meaning(personal_year)

    result = LifePathResult(
        life_path_number=life_path,
        day_path_number=day_path_number(birth_date),
        personal_year=personal_year,
        chinese_zodiac=zodiac_for_year(int(birth_date[:4])),
        meanings=LifePathMeanings(
            life_path_meaning=life_meaning["meaning"],
            life_path_description=life_meaning["description"],
            personal_year_meaning=year_meaning["meaning"],
            personal_year_description=year_meaning["description"],
        ),
    )
    logger.debug("Life path %d, personal year %d", result.life_path_number, result.personal_year)
    return StageOutcome.success(CALCULATOR, result)
