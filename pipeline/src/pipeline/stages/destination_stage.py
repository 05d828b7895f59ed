"""Destination houses: birth positions housed by the current location's ascendant."""

from __future__ import annotations

import logging

from ephemeris.bodies import ALL_BODIES
from ephemeris.houses import assign_whole_sign_houses
from ephemeris.port import EphemerisPort, require_bodies
from ephemeris.timeindex import birth_moment_to_time_index
from pillars.schemas.birth import BirthMoment
from pillars.schemas.diagnostic import PlanetHouse

logger = logging.getLogger(__name__)


async def compute_planet_houses_at_destination(
    moment: BirthMoment,
    destination_latitude: float,
    destination_longitude: float,
    ephemeris: EphemerisPort,
    *,
    house_system: str = "W",
) -> list[PlanetHouse]:
    """Whole-sign house of every body at the destination.

    Longitudes depend only on the birth instant; only the ascendant moves
    with the location.
    """
    time_index = birth_moment_to_time_index(moment)
    longitudes = require_bodies(await ephemeris.longitudes(time_index), ALL_BODIES)
    angles = await ephemeris.angles(time_index, destination_latitude, destination_longitude, house_system)
    houses = assign_whole_sign_houses(angles.ascendant, {name: longitudes[name] for name in ALL_BODIES})
    logger.debug("Destination ascendant %.2f", angles.ascendant)
    return [PlanetHouse(planet=name, house=house) for name, house in houses.items()]
