"""Pydantic schemas for the Three Pillars diagnostic."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

PillarId = Literal[1, 2, 3]


class Grade(str, Enum):
    """Grade of a single evaluated signal."""

    PRESSURE = "F"
    CAUTION = "C"
    SUPPORT = "A"
    NEUTRAL = "Neutral"


class FinalGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    F = "F"


class Section(str, Enum):
    NATAL_ANGULAR = "Natal Angular"
    TRANSIT_ANGULAR = "Transit Angular"
    LIFE_CYCLE = "Life Cycle"
    RELOCATION_ANGULAR = "Relocation Angular"
    ADDRESS = "Address"


class GradeItem(BaseModel):
    """One planet or factor evaluated by the grader."""

    source: str
    pillar: PillarId
    section: Section
    planet: str | None = None
    house: int | None = None
    grade: Grade = Grade.NEUTRAL
    reason: str


class PillarSummary(BaseModel):
    pillar: PillarId
    name: Literal["Structure", "Timing", "Environment"]
    description: str
    pressure_count: int = 0
    support_count: int = 0
    items: list[GradeItem] = Field(default_factory=list)


class PlanetHouse(BaseModel):
    """A body's whole-sign house at some location."""

    planet: str
    house: int = Field(ge=1, le=12)


class DiagnosticReport(BaseModel):
    pillars: list[PillarSummary] = Field(min_length=3, max_length=3)
    total_pressure: int
    total_support: int
    total_caution: int = 0
    score: float
    final_grade: FinalGrade
    all_items: list[GradeItem]
