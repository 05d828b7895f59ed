"""Tests for the Swiss Ephemeris adapter, with pyswisseph replaced by a recorder."""

import asyncio

import pytest

import ephemeris.port as port
from ephemeris.bodies import ALL_BODIES, BODY_IDS
from ephemeris.port import SwissEphemeris, require_bodies
from pillars.errors import EphemerisUnavailable


class _RecordingSwe:
    FLG_SWIEPH = 2
    FLG_MOSEPH = 4
    FLG_SPEED = 256

    class Error(Exception):
        pass

    def __init__(self):
        self.paths = []
        self.path_failures = 0
        self.broken_bodies = set()
        self.swieph_missing = set()
        self.house_calls = []

    def set_ephe_path(self, path):
        if self.path_failures:
            self.path_failures -= 1
            raise RuntimeError("ephemeris directory unreadable")
        self.paths.append(path)

    def calc_ut(self, jd, body, flags):
        if body in self.broken_bodies:
            raise self.Error(f"body {body} not found")
        if body in self.swieph_missing and flags & self.FLG_SWIEPH:
            raise self.Error("seas_18.se1 not found")
        return (body * 10.0 + 365.0, 0.0, 1.0, 0.5, 0.0, 0.0), flags

    def houses_ex(self, jd, lat, lon, hsys):
        self.house_calls.append((lat, lon, hsys))
        return (0.0,) * 12, (375.0, 280.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@pytest.fixture
def fake_swe(monkeypatch):
    recorder = _RecordingSwe()
    monkeypatch.setattr(port, "swe", recorder)
    return recorder


@pytest.mark.asyncio
async def test_concurrent_init_runs_once(fake_swe):
    ephemeris = SwissEphemeris("/opt/swisseph/ephe")

    await asyncio.gather(ephemeris.init(), ephemeris.init(), ephemeris.longitudes(2451545.0))

    assert fake_swe.paths == ["/opt/swisseph/ephe"]
    assert ephemeris.ready is True


@pytest.mark.asyncio
async def test_failed_init_can_be_retried(fake_swe):
    fake_swe.path_failures = 1
    ephemeris = SwissEphemeris()

    with pytest.raises(EphemerisUnavailable):
        await ephemeris.init()
    assert ephemeris.ready is False

    await ephemeris.init()
    assert ephemeris.ready is True
    assert fake_swe.paths == [None]


@pytest.mark.asyncio
async def test_longitudes_cover_all_bodies(fake_swe):
    longitudes = await SwissEphemeris().longitudes(2451545.0)

    assert list(longitudes) == ALL_BODIES
    assert longitudes["Sun"] == pytest.approx(5.0)
    assert longitudes["Vesta"] == pytest.approx(BODY_IDS["Vesta"] * 10.0 + 5.0)
    assert all(0.0 <= lon < 360.0 for lon in longitudes.values())


@pytest.mark.asyncio
async def test_longitudes_fall_back_to_moshier(fake_swe):
    fake_swe.swieph_missing = {BODY_IDS["Chiron"]}

    longitudes = await SwissEphemeris().longitudes(2451545.0)

    assert longitudes["Chiron"] == pytest.approx(BODY_IDS["Chiron"] * 10.0 + 5.0)


@pytest.mark.asyncio
async def test_unavailable_body_raises(fake_swe):
    fake_swe.broken_bodies = {BODY_IDS["Ceres"]}

    with pytest.raises(EphemerisUnavailable, match="Ceres"):
        await SwissEphemeris().longitudes(2451545.0)


@pytest.mark.asyncio
async def test_angles_derive_descendant_and_ic(fake_swe):
    angles = await SwissEphemeris().angles(2451545.0, 28.5, -81.4, "w")

    assert fake_swe.house_calls == [(28.5, -81.4, b"W")]
    assert angles.ascendant == pytest.approx(15.0)
    assert angles.descendant == pytest.approx(195.0)
    assert angles.midheaven == pytest.approx(280.0)
    assert angles.imum_coeli == pytest.approx(100.0)


@pytest.mark.asyncio
async def test_unsupported_house_system(fake_swe):
    with pytest.raises(EphemerisUnavailable, match="house system"):
        await SwissEphemeris().angles(2451545.0, 0.0, 0.0, "Z")
    assert fake_swe.house_calls == []


def test_require_bodies_lists_missing():
    with pytest.raises(EphemerisUnavailable, match="Pluto"):
        require_bodies({"Sun": 1.0}, ["Sun", "Pluto"])
    assert require_bodies({"Sun": 1.0}, ["Sun"]) == {"Sun": 1.0}
