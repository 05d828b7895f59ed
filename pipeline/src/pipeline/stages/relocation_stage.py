"""Relocation stage: birth positions read against the destination's angles."""

from __future__ import annotations

import logging
from datetime import date

from ephemeris.bodies import ALL_BODIES
from ephemeris.houses import angle_houses, assign_whole_sign_houses
from ephemeris.port import EphemerisPort, require_bodies
from ephemeris.timeindex import birth_moment_to_time_index
from pillars.errors import EphemerisUnavailable, InputValidationError, InvalidCivilTime
from pillars.schemas.birth import RelocationInput
from pillars.schemas.calculators import (
    AngularHit,
    BusinessHouseActivation,
    PlanetNature,
    RelocationResult,
)

from pipeline.stages.base import StageOutcome
from pipeline.stages.birth_fields import split_birth_fields

logger = logging.getLogger(__name__)

CALCULATOR = "relocation"

BUSINESS_HOUSES = frozenset({2, 6, 10})

BENEFICS = frozenset({"Venus", "Jupiter", "Sun", "Moon"})
MALEFICS = frozenset({"Mars", "Saturn", "Pluto"})


def classify_planet(name: str) -> PlanetNature:
    if name in BENEFICS:
        return "benefic"
    if name in MALEFICS:
        return "malefic"
    return "neutral"


def validate_relocation_input(
    data: RelocationInput,
    *,
    today: date | None = None,
) -> InputValidationError | None:
    today = today or date.today()
    moment = data.moment
    fields = split_birth_fields(moment)

    def invalid(message: str) -> InputValidationError:
        return InputValidationError(CALCULATOR, message)

    if fields.year is None or not 1900 <= fields.year <= today.year:
        return invalid("Invalid birth year")
    if fields.month is None or not 1 <= fields.month <= 12:
        return invalid("Invalid birth month")
    if fields.day is None or not 1 <= fields.day <= 31:
        return invalid("Invalid birth day")
    if fields.hour is None or not 0 <= fields.hour <= 23:
        return invalid("Invalid birth hour")
    if fields.minute is None or not 0 <= fields.minute <= 59:
        return invalid("Invalid birth minute")
    if not -90 <= moment.latitude <= 90:
        return invalid("Invalid birth latitude")
    if not -180 <= moment.longitude <= 180:
        return invalid("Invalid birth longitude")
    if not moment.time_zone.strip():
        return invalid("Valid timezone required")
    if not -90 <= data.destination_latitude <= 90:
        return invalid("Invalid destination latitude")
    if not -180 <= data.destination_longitude <= 180:
        return invalid("Invalid destination longitude")
    return None


async def build_relocation(
    data: RelocationInput,
    ephemeris: EphemerisPort,
    *,
    house_system: str = "P",
) -> RelocationResult:
    """Angular hits and business-house activations at the destination.

    A hit is a body sharing a whole-sign house with one of the destination's
    four angle points. Every hit in the house of the first MC hit is a
    career hit.
    """
    time_index = birth_moment_to_time_index(data.moment)
    longitudes = require_bodies(await ephemeris.longitudes(time_index), ALL_BODIES)
    angles = await ephemeris.angles(
        time_index, data.destination_latitude, data.destination_longitude, house_system
    )

    body_houses = assign_whole_sign_houses(
        angles.ascendant, {name: longitudes[name] for name in ALL_BODIES}
    )
    points = angle_houses(angles)

    hits: list[AngularHit] = []
    for name, house in body_houses.items():
        for angle, angle_house in points.items():
            if angle_house == house:
                hits.append(AngularHit(planet=name, angle=angle, house=house, nature=classify_planet(name)))

    mc_house = next((hit.house for hit in hits if hit.angle == "MC"), None)
    if mc_house is not None:
        for hit in hits:
            hit.is_career = hit.house == mc_house

    activations = [
        BusinessHouseActivation(planet=name, house=house, nature=classify_planet(name))
        for name, house in body_houses.items()
        if house in BUSINESS_HOUSES and classify_planet(name) != "neutral"
    ]
    activations.sort(key=lambda a: (a.house, a.planet))

    return RelocationResult(angular_hits=hits, business_house_activations=activations)


async def calculate_relocation(
    data: RelocationInput,
    ephemeris: EphemerisPort,
    *,
    house_system: str = "P",
    today: date | None = None,
) -> StageOutcome[RelocationResult]:
    error = validate_relocation_input(data, today=today)
    if error is not None:
        return StageOutcome.failure(CALCULATOR, error)

    logger.debug(
        "Relocation destination lat=%s lon=%s", data.destination_latitude, data.destination_longitude
    )
    try:
        result = await build_relocation(data, ephemeris, house_system=house_system)
    except (InvalidCivilTime, EphemerisUnavailable) as exc:
        logger.warning("Relocation failed: %s", exc)
        return StageOutcome.failure(CALCULATOR, exc)
    return StageOutcome.success(CALCULATOR, result)


def relocation_summary(result: RelocationResult) -> str:
    """One-line summary, e.g. ``3 angular hit(s) | No business house activations``."""
    hits = result.angular_hits
    activations = result.business_house_activations
    angular = f"{len(hits)} angular hit(s)" if hits else "No angular hits"
    business = (
        f"{len(activations)} business house activation(s)" if activations else "No business house activations"
    )
    return f"{angular} | {business}"
