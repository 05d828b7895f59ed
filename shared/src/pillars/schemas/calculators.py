"""Pydantic schemas for the transit, life path, relocation and address calculators."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

from pillars.schemas.natal import AngleKey
from pillars.services.numerology import MASTER_NUMBERS


def _check_numerology_number(value: int) -> int:
    if not (1 <= value <= 9 or value in MASTER_NUMBERS):
        raise ValueError(f"{value} is not a numerology value (1-9, 11, 22, 33)")
    return value


NumerologyNumber = Annotated[int, AfterValidator(_check_numerology_number)]

PlanetNature = Literal["benefic", "malefic", "neutral"]


# --- Transits -------------------------------------------------------------


class Placement(BaseModel):
    """A slow body's stay in one sign."""

    sign: str
    start: str
    end: str
    high: str
    low: str


class PlanetaryTransit(BaseModel):
    planet: str
    planet_theme: str = ""
    current: Placement
    past: Placement
    house_number: int = Field(ge=1, le=12)
    house_theme: str
    past_house_number: int = Field(ge=1, le=12)
    past_house_theme: str


class TransitsResult(BaseModel):
    rising_sign: str
    transits: list[PlanetaryTransit]


# --- Life path ------------------------------------------------------------


class LifePathMeanings(BaseModel):
    life_path_meaning: str
    life_path_description: str
    personal_year_meaning: str
    personal_year_description: str


class LifePathResult(BaseModel):
    life_path_number: NumerologyNumber
    day_path_number: NumerologyNumber
    personal_year: NumerologyNumber
    chinese_zodiac: str
    meanings: LifePathMeanings


# --- Relocation -----------------------------------------------------------


class AngularHit(BaseModel):
    """A body sharing a whole-sign house with a relocated angle."""

    planet: str
    angle: AngleKey
    house: int = Field(ge=1, le=12)
    nature: PlanetNature
    is_career: bool = False


class BusinessHouseActivation(BaseModel):
    planet: str
    house: int
    nature: PlanetNature


class RelocationResult(BaseModel):
    angular_hits: list[AngularHit] = Field(default_factory=list)
    business_house_activations: list[BusinessHouseActivation] = Field(default_factory=list)


# --- Address numerology ---------------------------------------------------


class NumerologyLevel(BaseModel):
    level: str
    value: str
    name: str
    number: NumerologyNumber
    meaning: str
    description: str
    themes: str = ""
    challenges: str = ""
    gifts: str = ""
    reflection: str = ""


class ZodiacMeaning(BaseModel):
    name: str
    themes: str
    challenges: str
    gifts: str
    reflection: str


class AddressNumerologyResult(BaseModel):
    levels: list[NumerologyLevel]
    home_zodiac: str
    birth_zodiac: str
    home_zodiac_meaning: ZodiacMeaning | None = None
    birth_zodiac_meaning: ZodiacMeaning | None = None
    compatibility: str

    def level_named(self, name: str) -> NumerologyLevel | None:
        for level in self.levels:
            if level.name == name:
                return level
        return None
