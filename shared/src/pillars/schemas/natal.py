"""Pydantic schemas for natal chart data."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

AngleKey = Literal["ASC", "DSC", "MC", "IC"]


def _normalize(degrees: float) -> float:
    return degrees % 360.0


class ChartAngles(BaseModel):
    """The four chart angles, each normalized to [0, 360)."""

    ascendant: float
    descendant: float
    midheaven: float
    imum_coeli: float

    @classmethod
    def from_asc_mc(cls, ascendant: float, midheaven: float) -> ChartAngles:
        """Build angles from ASC and MC; DSC and IC are always their opposites."""
        asc = _normalize(ascendant)
        mc = _normalize(midheaven)
        return cls(
            ascendant=asc,
            descendant=_normalize(asc + 180.0),
            midheaven=mc,
            imum_coeli=_normalize(mc + 180.0),
        )

    def as_points(self) -> dict[AngleKey, float]:
        return {
            "ASC": self.ascendant,
            "DSC": self.descendant,
            "MC": self.midheaven,
            "IC": self.imum_coeli,
        }


class AspectType(str, Enum):
    """Angular relationships recognised between two longitudes."""

    CONJUNCTION = "Conjunction"
    OPPOSITION = "Opposition"
    TRINE = "Trine"
    SQUARE = "Square"
    SEXTILE = "Sextile"


class PlacedBody(BaseModel):
    """A body or calculated point placed in the zodiac."""

    name: str
    longitude: float
    sign: str
    sign_index: int = Field(ge=0, le=11)
    degree: float
    house: int | None = Field(default=None, ge=1, le=12)
    retrograde: bool | None = None


class NatalAspect(BaseModel):
    """An aspect between two placed bodies."""

    body1: str
    body2: str
    type: AspectType


class AngleAspects(BaseModel):
    """Conjunctions to each chart angle."""

    asc: list[NatalAspect] = Field(default_factory=list)
    dsc: list[NatalAspect] = Field(default_factory=list)
    mc: list[NatalAspect] = Field(default_factory=list)
    ic: list[NatalAspect] = Field(default_factory=list)


class NatalChartResult(BaseModel):
    """Complete natal chart output."""

    bodies: list[PlacedBody]
    aspects: list[NatalAspect] = Field(default_factory=list)
    angle_aspects: AngleAspects = Field(default_factory=AngleAspects)
    rising_sign: str
    angles: ChartAngles
    time_index: float

    def body(self, name: str) -> PlacedBody | None:
        for placed in self.bodies:
            if placed.name == name:
                return placed
        return None
