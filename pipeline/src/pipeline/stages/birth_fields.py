"""Numeric birth fields pulled apart for range validation."""

from __future__ import annotations

from typing import NamedTuple

from pillars.schemas.birth import BirthMoment


class BirthFields(NamedTuple):
    year: int | None
    month: int | None
    day: int | None
    hour: int | None
    minute: int | None


def _as_int(text: str) -> int | None:
    text = text.strip()
    return int(text) if text.isascii() and text.isdigit() else None


def split_birth_fields(moment: BirthMoment) -> BirthFields:
    """Split ``YYYY-MM-DD`` and ``HH:MM[:SS]``; unparsable parts come back as None."""
    date_parts = (moment.date.split("-") + ["", "", ""])[:3]
    time_parts = (moment.time.split(":") + ["", ""])[:2]
    year, month, day = (_as_int(part) for part in date_parts)
    hour, minute = (_as_int(part) for part in time_parts)
    return BirthFields(year, month, day, hour, minute)
