"""Three Pillars grader.

Pure: consumes finished calculator results and classifies individual facts as
pressure (F), support (A) or neutral, grouped into three pillars:

1. Structure: natal bodies in angular houses.
2. Timing: malefic transits and the personal-year cycle.
3. Environment: bodies housed at the current location, and the combined
   address level.

No ephemeris calls happen here; destination houses are computed upstream and
passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pillars.errors import GradingError
from pillars.schemas.calculators import AddressNumerologyResult, LifePathResult, TransitsResult
from pillars.schemas.diagnostic import (
    DiagnosticReport,
    Grade,
    GradeItem,
    PillarSummary,
    PlanetHouse,
    Section,
)
from pillars.schemas.natal import NatalChartResult
from pillars.services.numerology import reduce_forced

from pipeline import grading_rules as rules

logger = logging.getLogger(__name__)


@dataclass
class GraderInput:
    natal_chart: NatalChartResult | None = None
    transits: TransitsResult | None = None
    life_path: LifePathResult | None = None
    destination_planet_houses: list[PlanetHouse] | None = None
    address_numerology: AddressNumerologyResult | None = None


def grade_natal(natal_chart: NatalChartResult | None) -> list[GradeItem]:
    if natal_chart is None:
        return []

    items = []
    for body in natal_chart.bodies:
        name, house = body.name, body.house
        if house is None:
            continue
        malefic = name in rules.PILLAR_1_MALEFICS
        benefic = name in rules.PILLAR_1_BENEFICS
        if not (malefic or benefic):
            continue

        angular = house in rules.ANGULAR_HOUSES
        grade = Grade.NEUTRAL
        if angular and malefic:
            grade = Grade.PRESSURE
            reason = f"Malefic {name} in angular house {house}"
        elif name in rules.PILLAR_1_SOFT_SPOT_PLANETS and house in rules.PILLAR_1_SOFT_SPOT_HOUSES:
            grade = Grade.PRESSURE
            reason = f"{name} placement in house {house} (8th/12th)"
        elif angular and benefic:
            grade = Grade.SUPPORT
            reason = f"Benefic {name} in angular house {house}"
        else:
            reason = f"{name} in house {house} (not angular)"

        items.append(
            GradeItem(
                source=f"Natal {name} in House {house} ({body.sign})",
                pillar=1,
                section=Section.NATAL_ANGULAR,
                planet=name,
                house=house,
                grade=grade,
                reason=reason,
            )
        )
    return items


def grade_transits(transits: TransitsResult | None) -> list[GradeItem]:
    if transits is None:
        return []

    items = []
    for transit in transits.transits:
        name, house = transit.planet, transit.house_number
        # Only malefic transits are graded
        if name not in rules.PILLAR_2_MALEFICS:
            continue

        grade = Grade.NEUTRAL
        if house in rules.ANGULAR_HOUSES:
            grade = Grade.PRESSURE
            reason = f"Malefic transit {name} in angular house {house}"
        elif house in rules.PILLAR_2_PRESSURE_HOUSES:
            grade = Grade.PRESSURE
            reason = f"Malefic transit {name} in pressure house {house} (2nd/6th/8th/11th)"
        else:
            reason = f"Transit {name} in house {house} (not angular or pressure)"

        items.append(
            GradeItem(
                source=f"Transit {name} in House {house} ({transit.current.sign})",
                pillar=2,
                section=Section.TRANSIT_ANGULAR,
                planet=name,
                house=house,
                grade=grade,
                reason=reason,
            )
        )
    return items


def grade_life_cycle(life_path: LifePathResult | None) -> list[GradeItem]:
    if life_path is None:
        return []

    year = reduce_forced(life_path.personal_year)
    if year in rules.LIFE_CYCLE_F_YEARS:
        grade, reason = Grade.PRESSURE, f"Personal year {year} is a pressure year"
    elif year in rules.LIFE_CYCLE_A_YEARS:
        grade, reason = Grade.SUPPORT, f"Personal year {year} is a supportive year"
    else:
        grade, reason = Grade.NEUTRAL, f"Personal year {year} is neutral"

    return [
        GradeItem(
            source=f"Life Cycle Year {year}",
            pillar=2,
            section=Section.LIFE_CYCLE,
            grade=grade,
            reason=reason,
        )
    ]


def grade_destination(planet_houses: list[PlanetHouse] | None) -> list[GradeItem]:
    if planet_houses is None:
        return []

    items = []
    for placement in planet_houses:
        name, house = placement.planet, placement.house
        malefic = name in rules.PILLAR_3_MALEFICS
        benefic = name in rules.PILLAR_3_BENEFICS
        if not (malefic or benefic):
            continue

        angular = house in rules.ANGULAR_HOUSES
        grade = Grade.NEUTRAL
        if angular and malefic:
            grade = Grade.PRESSURE
            reason = f"Malefic {name} in angular house {house} at current location"
        elif angular and benefic:
            grade = Grade.SUPPORT
            reason = f"Benefic {name} in angular house {house} at current location"
        else:
            reason = f"{name} in house {house} at current location (not angular)"

        items.append(
            GradeItem(
                source=f"Env {name} in House {house}",
                pillar=3,
                section=Section.RELOCATION_ANGULAR,
                planet=name,
                house=house,
                grade=grade,
                reason=reason,
            )
        )
    return items


def grade_address(address: AddressNumerologyResult | None) -> list[GradeItem]:
    if address is None:
        return []

    items = []
    for level_name in rules.ADDRESS_GRADED_LEVELS:
        level = address.level_named(level_name)
        if level is None:
            continue

        number = level.number
        if number not in rules.ADDRESS_KEPT_MASTERS:
            number = reduce_forced(number)

        if number in rules.ADDRESS_F_NUMBERS:
            grade, reason = Grade.PRESSURE, f"{level_name} number {number} creates pressure"
        elif number in rules.ADDRESS_A_NUMBERS:
            grade, reason = Grade.SUPPORT, f"{level_name} number {number} is supportive"
        else:
            grade, reason = Grade.NEUTRAL, f"{level_name} number {number} is neutral"

        items.append(
            GradeItem(
                source=f"{level_name}: {number}",
                pillar=3,
                section=Section.ADDRESS,
                grade=grade,
                reason=reason,
            )
        )
    return items


def _summary(pillar: int, items: list[GradeItem]) -> PillarSummary:
    name, description = rules.PILLAR_NAMES[pillar]
    return PillarSummary(
        pillar=pillar,
        name=name,
        description=description,
        pressure_count=sum(1 for item in items if item.grade is Grade.PRESSURE),
        support_count=sum(1 for item in items if item.grade is Grade.SUPPORT),
        items=items,
    )


def grade_three_pillars(data: GraderInput) -> DiagnosticReport:
    """Grade every available result and aggregate the final grade.

    Missing results contribute no items. Raises GradingError if a result
    cannot be graded.
    """
    try:
        structure = grade_natal(data.natal_chart)
        timing = grade_transits(data.transits) + grade_life_cycle(data.life_path)
        environment = grade_destination(data.destination_planet_houses) + grade_address(
            data.address_numerology
        )

        all_items = structure + timing + environment
        pressure = sum(1 for item in all_items if item.grade is Grade.PRESSURE)
        support = sum(1 for item in all_items if item.grade is Grade.SUPPORT)
        caution = sum(1 for item in all_items if item.grade is Grade.CAUTION)
        score = rules.score(pressure, caution)

        report = DiagnosticReport(
            pillars=[_summary(1, structure), _summary(2, timing), _summary(3, environment)],
            total_pressure=pressure,
            total_support=support,
            total_caution=caution,
            score=score,
            final_grade=rules.compute_final_grade(score),
            all_items=all_items,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise GradingError(f"grading failed: {exc}") from exc

    logger.info(
        "Diagnostic graded: %d pressure, %d support, final grade %s",
        pressure,
        support,
        report.final_grade.value,
    )
    return report
