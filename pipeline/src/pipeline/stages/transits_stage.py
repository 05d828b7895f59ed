"""Transits stage: slow-moving bodies placed into houses from a rising sign."""

from __future__ import annotations

import logging

from ephemeris.bodies import SIGNS
from ephemeris.houses import house_for_sign
from pillars.errors import InputValidationError
from pillars.meanings import PLANET_THEMES, house_theme
from pillars.schemas.birth import TransitsInput
from pillars.schemas.calculators import Placement, PlanetaryTransit, TransitsResult

from pipeline.stages.base import StageOutcome

logger = logging.getLogger(__name__)

CALCULATOR = "transits"

# (planet, past placement, current placement)
PLANET_TRANSITS: tuple[tuple[str, Placement, Placement], ...] = (
    (
        "Pluto",
        Placement(
            sign="Capricorn",
            start="2008",
            end="2023-2025",
            high="mastery of structures, long-term legacy, responsible power",
            low="control, corruption, fear of failure, rigidity",
        ),
        Placement(
            sign="Aquarius",
            start="2023-2025",
            end="2043",
            high="collective innovation, freedom, future systems, social empowerment",
            low="chaos in tech, detachment, rebellion without cause, alienation",
        ),
    ),
    (
        "Neptune",
        Placement(
            sign="Pisces",
            start="2011",
            end="2025/2026",
            high="compassion, spiritual awakening, creativity, unity consciousness",
            low="escapism, confusion, victimhood, illusions",
        ),
        Placement(
            sign="Aries",
            start="2025/2026",
            end="2039",
            high="courageous vision, spiritual self-leadership, innovation, risk taking",
            low=(
                "self-delusion, ego-driven martyrdom, blurred identity, blurred boundaries, "
                "confused masculinity"
            ),
        ),
    ),
    (
        "Saturn",
        Placement(
            sign="Pisces",
            start="2023",
            end="2025/2026",
            high="spiritual discipline, boundaries in compassion, practical creativity",
            low="avoidance, self-pity, blurred limits, victim mindset",
        ),
        Placement(
            sign="Aries",
            start="2025/2026",
            end="2028",
            high="self-mastery, courage to take responsibility, disciplined leadership, risk taking",
            low="impatience, aggression, fear of failure, ego rigidity",
        ),
    ),
    (
        "Uranus",
        Placement(
            sign="Taurus",
            start="2018",
            end="2025/2026",
            high="innovative resources, sustainable values, embodied freedom",
            low="financial chaos, stubborn resistance, insecurity",
        ),
        Placement(
            sign="Gemini",
            start="2025/2026",
            end="2033",
            high="breakthroughs in communication, learning, tech, networks",
            low="scattered attention, shallow rebellion, information chaos",
        ),
    ),
    (
        "North Node",
        Placement(
            sign="Aries",
            start="2023",
            end="2025",
            high="independence, courage, pioneering destiny, risk taking",
            low="selfishness, recklessness, conflict",
        ),
        Placement(
            sign="Pisces",
            start="2025",
            end="2026",
            high="spiritual growth, compassion, surrender to higher flow",
            low="escapism, victimhood, lack of boundaries",
        ),
    ),
    (
        "South Node",
        Placement(
            sign="Libra",
            start="2023",
            end="2025",
            high="harmony, fairness, relationship wisdom",
            low="people-pleasing, indecision, dependency",
        ),
        Placement(
            sign="Virgo",
            start="2025",
            end="2026",
            high="discernment, service, practical wisdom",
            low="over-analysis, perfectionism, burnout",
        ),
    ),
)


def validate_transits_input(data: TransitsInput) -> InputValidationError | None:
    if not data.rising_sign:
        return InputValidationError(CALCULATOR, "Rising sign is required")
    if data.rising_sign not in SIGNS:
        return InputValidationError(CALCULATOR, f"Invalid rising sign: {data.rising_sign}")
    return None


def build_transits(rising_sign: str) -> TransitsResult:
    """Place every tracked transit relative to ``rising_sign``."""
    transits = []
    for planet, past, current in PLANET_TRANSITS:
        house = house_for_sign(current.sign, rising_sign)
        past_house = house_for_sign(past.sign, rising_sign)
        transits.append(
            PlanetaryTransit(
                planet=planet,
                planet_theme=PLANET_THEMES.get(planet, ""),
                current=current,
                past=past,
                house_number=house,
                house_theme=house_theme(house),
                past_house_number=past_house,
                past_house_theme=house_theme(past_house),
            )
        )
    return TransitsResult(rising_sign=rising_sign, transits=transits)


def calculate_transits(data: TransitsInput) -> StageOutcome[TransitsResult]:
    error = validate_transits_input(data)
    if error is not None:
        return StageOutcome.failure(CALCULATOR, error)
    result = build_transits(data.rising_sign)
    logger.debug("Transits placed for %s rising", data.rising_sign)
    return StageOutcome.success(CALCULATOR, result)
