"""Natal chart stage: bodies, angles, whole-sign houses and aspects at birth."""

from __future__ import annotations

import logging
from datetime import date

from ephemeris.aspects import find_aspect, find_aspects
from ephemeris.bodies import (
    ALL_BODIES,
    ASCENDANT,
    DESCENDANT,
    IMUM_COELI,
    MIDHEAVEN,
    longitude_to_sign,
    sign_index,
)
from ephemeris.houses import assign_whole_sign_houses
from ephemeris.port import EphemerisPort, require_bodies
from ephemeris.timeindex import birth_moment_to_time_index
from pillars.errors import EphemerisUnavailable, InputValidationError, InvalidCivilTime
from pillars.schemas.birth import BirthMoment, NatalChartInput
from pillars.schemas.natal import (
    AngleAspects,
    AspectType,
    ChartAngles,
    NatalAspect,
    NatalChartResult,
    PlacedBody,
)

from pipeline.stages.base import StageOutcome
from pipeline.stages.birth_fields import split_birth_fields

logger = logging.getLogger(__name__)

CALCULATOR = "natalChart"

# Ascendant first, then bodies, then the remaining angles
CHART_ORDER = (
    ASCENDANT,
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
    "Uranus",
    "Neptune",
    "Pluto",
    "Mean Node",
    "True Node",
    "Lilith",
    "Chiron",
    "Ceres",
    "Pallas",
    "Juno",
    "Vesta",
    DESCENDANT,
    MIDHEAVEN,
    IMUM_COELI,
)

_ANGLE_GROUPS = (
    (ASCENDANT, "asc"),
    (DESCENDANT, "dsc"),
    (MIDHEAVEN, "mc"),
    (IMUM_COELI, "ic"),
)


def validate_natal_chart_input(
    data: NatalChartInput,
    *,
    today: date | None = None,
) -> InputValidationError | None:
    today = today or date.today()
    moment = data.moment
    fields = split_birth_fields(moment)

    def invalid(message: str) -> InputValidationError:
        return InputValidationError(CALCULATOR, message)

    if fields.year is None or not 1900 <= fields.year <= today.year:
        return invalid("Invalid year")
    if fields.month is None or not 1 <= fields.month <= 12:
        return invalid("Month must be 1-12")
    if fields.day is None or not 1 <= fields.day <= 31:
        return invalid("Invalid day")
    if fields.hour is None or not 0 <= fields.hour <= 23:
        return invalid("Hour must be 0-23")
    if fields.minute is None or not 0 <= fields.minute <= 59:
        return invalid("Minute must be 0-59")
    if not -90 <= moment.latitude <= 90:
        return invalid("Latitude must be -90 to 90")
    if not -180 <= moment.longitude <= 180:
        return invalid("Longitude must be -180 to 180")
    if not moment.time_zone.strip():
        return invalid("Valid timezone required")
    return None


def _angle_longitudes(angles: ChartAngles) -> dict[str, float]:
    return {
        ASCENDANT: angles.ascendant,
        DESCENDANT: angles.descendant,
        MIDHEAVEN: angles.midheaven,
        IMUM_COELI: angles.imum_coeli,
    }


def _place(name: str, longitude: float, house: int) -> PlacedBody:
    sign, degree = longitude_to_sign(longitude)
    return PlacedBody(
        name=name,
        longitude=longitude,
        sign=sign,
        sign_index=sign_index(longitude),
        degree=degree,
        house=house,
    )


def _angle_conjunctions(points: dict[str, float], bodies: dict[str, float]) -> AngleAspects:
    grouped = AngleAspects()
    for angle_name, key in _ANGLE_GROUPS:
        bucket = getattr(grouped, key)
        for body_name, longitude in bodies.items():
            if find_aspect(points[angle_name], longitude) is AspectType.CONJUNCTION:
                bucket.append(NatalAspect(body1=angle_name, body2=body_name, type=AspectType.CONJUNCTION))
    return grouped


async def build_natal_chart(
    moment: BirthMoment,
    ephemeris: EphemerisPort,
    *,
    house_system: str = "P",
) -> NatalChartResult:
    """Compute the chart; raises InvalidCivilTime or EphemerisUnavailable."""
    time_index = birth_moment_to_time_index(moment)
    longitudes = require_bodies(await ephemeris.longitudes(time_index), ALL_BODIES)
    angles = await ephemeris.angles(time_index, moment.latitude, moment.longitude, house_system)

    angle_points = _angle_longitudes(angles)
    points = {
        name: angle_points[name] if name in angle_points else longitudes[name]
        for name in CHART_ORDER
    }
    houses = assign_whole_sign_houses(angles.ascendant, points)
    body_longitudes = {name: lon for name, lon in points.items() if name not in angle_points}

    aspects = [
        NatalAspect(body1=body1, body2=body2, type=aspect)
        for body1, body2, aspect in find_aspects(body_longitudes)
    ]

    rising_sign, _ = longitude_to_sign(angles.ascendant)
    return NatalChartResult(
        bodies=[_place(name, lon, houses[name]) for name, lon in points.items()],
        aspects=aspects,
        angle_aspects=_angle_conjunctions(angle_points, body_longitudes),
        rising_sign=rising_sign,
        angles=angles,
        time_index=time_index,
    )


async def calculate_natal_chart(
    data: NatalChartInput,
    ephemeris: EphemerisPort,
    *,
    house_system: str = "P",
    today: date | None = None,
) -> StageOutcome[NatalChartResult]:
    error = validate_natal_chart_input(data, today=today)
    if error is not None:
        return StageOutcome.failure(CALCULATOR, error)

    try:
        result = await build_natal_chart(data.moment, ephemeris, house_system=house_system)
    except (InvalidCivilTime, EphemerisUnavailable) as exc:
        logger.warning("Natal chart failed: %s", exc)
        return StageOutcome.failure(CALCULATOR, exc)

    logger.debug("Natal chart computed: %s rising, %d aspects", result.rising_sign, len(result.aspects))
    return StageOutcome.success(CALCULATOR, result)
