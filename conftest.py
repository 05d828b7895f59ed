"""Shared test configuration: a deterministic in-memory ephemeris and sample requests."""

from __future__ import annotations

import asyncio
from datetime import date

import pytest
from pillars.config import Settings
from pillars.errors import EphemerisUnavailable
from pillars.schemas.birth import BirthMoment, DiagnosticRequest, Location
from pillars.schemas.natal import ChartAngles

# Aries rising (ASC 15°), Capricorn MC (280°)
SAMPLE_ANGLES = (15.0, 280.0)

SAMPLE_LONGITUDES = {
    "Sun": 10.0,  # Aries, house 1, conjunct ASC
    "Moon": 100.0,  # Cancer, house 4, on the IC
    "Mercury": 40.0,  # Taurus, 2
    "Venus": 230.0,  # Scorpio, 8
    "Mars": 283.0,  # Capricorn, 10, conjunct MC
    "Jupiter": 130.0,  # Leo, 5
    "Saturn": 350.0,  # Pisces, 12
    "Uranus": 60.0,  # Gemini, 3
    "Neptune": 0.5,  # Aries, 1
    "Pluto": 300.0,  # Aquarius, 11
    "Mean Node": 170.0,
    "True Node": 171.0,
    "Lilith": 200.0,
    "Chiron": 20.0,
    "Ceres": 150.0,
    "Pallas": 250.0,
    "Juno": 320.0,
    "Vesta": 75.0,
}


class FakeEphemeris:
    """EphemerisPort returning fixed positions, with call counters for assertions."""

    def __init__(
        self,
        longitudes: dict[str, float] | None = None,
        angles: tuple[float, float] = SAMPLE_ANGLES,
        *,
        angle_table: dict[tuple[float, float], tuple[float, float]] | None = None,
        delay: float = 0.0,
        slow_after: int = 0,
        fail_longitudes: bool = False,
        fail_house_systems: frozenset[str] = frozenset(),
    ) -> None:
        self._longitudes = dict(SAMPLE_LONGITUDES if longitudes is None else longitudes)
        self._angles = angles
        self._angle_table = angle_table or {}
        self.delay = delay
        self.slow_after = slow_after
        self.fail_longitudes = fail_longitudes
        self.fail_house_systems = fail_house_systems
        self.init_calls = 0
        self.longitude_calls = 0
        self.angle_calls: list[tuple[float, float, str]] = []

    @property
    def calls(self) -> int:
        return self.longitude_calls + len(self.angle_calls)

    async def init(self, data_location: str | None = None) -> None:
        self.init_calls += 1

    async def longitudes(self, time_index: float) -> dict[str, float]:
        self.longitude_calls += 1
        # the first `slow_after` queries answer immediately
        if self.delay and self.longitude_calls > self.slow_after:
            await asyncio.sleep(self.delay)
        if self.fail_longitudes:
            raise EphemerisUnavailable("ephemeris files missing")
        return dict(self._longitudes)

    async def angles(
        self,
        time_index: float,
        latitude: float,
        longitude: float,
        house_system: str = "P",
    ) -> ChartAngles:
        self.angle_calls.append((latitude, longitude, house_system))
        if house_system in self.fail_house_systems:
            raise EphemerisUnavailable(f"house system {house_system} failed")
        asc, mc = self._angle_table.get((latitude, longitude), self._angles)
        return ChartAngles.from_asc_mc(asc, mc)


BIRTH_LOCATION = Location(name="Orlando", latitude=28.54, longitude=-81.38, time_zone="America/New_York")
CURRENT_LOCATION = Location(name="Miami", latitude=25.76, longitude=-80.19, time_zone="America/New_York")


@pytest.fixture
def fake_ephemeris() -> FakeEphemeris:
    return FakeEphemeris()


@pytest.fixture
def today() -> date:
    return date(2026, 3, 1)


@pytest.fixture
def diagnostic_settings() -> Settings:
    return Settings(
        SWISSEPH_EPHE_PATH="",
        ORCHESTRATOR_TIMEOUT_SECONDS=2.0,
        NATAL_HOUSE_SYSTEM="P",
        DESTINATION_HOUSE_SYSTEM="W",
        DIAGNOSTIC_TIMEZONE="UTC",
    )


@pytest.fixture
def birth_moment() -> BirthMoment:
    return BirthMoment(
        date="1990-05-15",
        time="14:30",
        time_zone=BIRTH_LOCATION.time_zone,
        latitude=BIRTH_LOCATION.latitude,
        longitude=BIRTH_LOCATION.longitude,
    )


@pytest.fixture
def sample_request() -> DiagnosticRequest:
    return DiagnosticRequest(
        name="Test Person",
        date_of_birth="1990-05-15",
        time_of_birth="14:30",
        birth_location=BIRTH_LOCATION,
        current_location=CURRENT_LOCATION,
        unit_number="5B",
        street_number="14952",
        street_name="Day lily",
        postal_code="32824",
        home_built_year="1985",
    )


@pytest.fixture
def ephemeris_factory():
    """Build a FakeEphemeris with custom positions or failure modes."""
    return FakeEphemeris


@pytest.fixture
def sample_longitudes() -> dict[str, float]:
    return dict(SAMPLE_LONGITUDES)
