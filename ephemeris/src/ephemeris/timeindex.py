"""Civil time to astronomical time index (Julian Day, UT)."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pillars.errors import InvalidCivilTime
from pillars.schemas.birth import BirthMoment

JD_AT_UNIX_EPOCH = 2440587.5
SECONDS_PER_DAY = 86400.0


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidCivilTime(f"invalid date '{value}', expected YYYY-MM-DD") from exc


def _parse_time(value: str) -> time:
    parts = str(value).strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise InvalidCivilTime(f"invalid time '{value}', expected HH:MM or HH:MM:SS")
    try:
        return time(*(int(p) for p in parts))
    except ValueError as exc:
        raise InvalidCivilTime(f"invalid time '{value}': {exc}") from exc


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(str(name).strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidCivilTime(f"unknown time zone '{name}'") from exc


def local_to_utc(date_str: str, time_str: str, time_zone: str) -> datetime:
    """Resolve a wall-clock reading in ``time_zone`` to a UTC instant.

    Ambiguous readings (DST fall-back) resolve to the earlier offset; readings
    inside a DST gap use the offset in force before the transition.
    """
    local = datetime.combine(_parse_date(date_str), _parse_time(time_str), tzinfo=_zone(time_zone))
    return local.astimezone(UTC)


def utc_to_time_index(utc: datetime) -> float:
    """Julian Day of a UTC instant."""
    return utc.timestamp() / SECONDS_PER_DAY + JD_AT_UNIX_EPOCH


def time_index_to_utc(time_index: float) -> datetime:
    return datetime.fromtimestamp((time_index - JD_AT_UNIX_EPOCH) * SECONDS_PER_DAY, tz=UTC)


def to_time_index(date_str: str, time_str: str, time_zone: str) -> float:
    """Convert a civil date, time and IANA zone into a Julian Day (UT)."""
    return utc_to_time_index(local_to_utc(date_str, time_str, time_zone))


def birth_moment_to_time_index(moment: BirthMoment) -> float:
    return to_time_index(moment.date, moment.time, moment.time_zone)
