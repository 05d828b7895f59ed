"""Ephemeris capability: the contract calculators consume, and its Swiss Ephemeris adapter."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import swisseph as swe
from pillars.errors import EphemerisUnavailable
from pillars.schemas.natal import ChartAngles

from ephemeris.bodies import BODY_IDS, normalize_degrees

logger = logging.getLogger(__name__)

HOUSE_SYSTEMS: dict[str, str] = {
    "P": "placidus",
    "W": "whole_sign",
    "K": "koch",
    "E": "equal",
    "O": "porphyry",
}


class EphemerisPort(Protocol):
    """What the calculators need from an ephemeris engine."""

    async def init(self, data_location: str | None = None) -> None: ...

    async def longitudes(self, time_index: float) -> dict[str, float]: ...

    async def angles(
        self,
        time_index: float,
        latitude: float,
        longitude: float,
        house_system: str = "P",
    ) -> ChartAngles: ...


class SwissEphemeris:
    """EphemerisPort backed by pyswisseph.

    Construct once at startup and pass it to the orchestrator. The ephemeris
    path is set lazily on first use; concurrent first callers all await the
    same initialization task.
    """

    def __init__(self, data_location: str | None = None) -> None:
        self._data_location = data_location or None
        self._init_task: asyncio.Task[None] | None = None
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    async def init(self, data_location: str | None = None) -> None:
        if self._ready:
            return
        if data_location is not None and self._init_task is None:
            self._data_location = data_location or None

        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._load())
        task = self._init_task
        try:
            await asyncio.shield(task)
        except Exception:
            # Let a later request try again
            if self._init_task is task:
                self._init_task = None
            raise

    async def _load(self) -> None:
        logger.info("Initializing Swiss Ephemeris (path=%s)", self._data_location or "<default>")
        try:
            await asyncio.to_thread(swe.set_ephe_path, self._data_location)
        except Exception as exc:
            logger.error("Swiss Ephemeris initialization failed: %s", exc)
            raise EphemerisUnavailable(f"failed to initialize Swiss Ephemeris: {exc}") from exc
        self._ready = True
        logger.info("Swiss Ephemeris ready")

    async def longitudes(self, time_index: float) -> dict[str, float]:
        await self.init()
        return await asyncio.to_thread(self._calculate_longitudes, time_index)

    async def angles(
        self,
        time_index: float,
        latitude: float,
        longitude: float,
        house_system: str = "P",
    ) -> ChartAngles:
        await self.init()
        code = str(house_system or "P").strip().upper()
        if code not in HOUSE_SYSTEMS:
            raise EphemerisUnavailable(f"unsupported house system '{house_system}'")
        return await asyncio.to_thread(self._calculate_angles, time_index, latitude, longitude, code)

    @staticmethod
    def _calculate_longitudes(time_index: float) -> dict[str, float]:
        out: dict[str, float] = {}
        for body_name, body_id in BODY_IDS.items():
            try:
                result, _ = swe.calc_ut(time_index, body_id, swe.FLG_SWIEPH | swe.FLG_SPEED)
            except swe.Error:
                # Fallback to Moshier (no external files needed)
                try:
                    result, _ = swe.calc_ut(time_index, body_id, swe.FLG_MOSEPH | swe.FLG_SPEED)
                except swe.Error as exc:
                    raise EphemerisUnavailable(f"{body_name} unavailable: {exc}") from exc
            out[body_name] = normalize_degrees(result[0])
        return out

    @staticmethod
    def _calculate_angles(time_index: float, latitude: float, longitude: float, code: str) -> ChartAngles:
        try:
            _cusps, ascmc = swe.houses_ex(time_index, latitude, longitude, code.encode("ascii"))
        except swe.Error as exc:
            raise EphemerisUnavailable(f"house calculation failed: {exc}") from exc
        return ChartAngles.from_asc_mc(ascmc[0], ascmc[1])


def require_bodies(longitudes: dict[str, float], bodies: list[str] | tuple[str, ...]) -> dict[str, float]:
    """Return ``longitudes`` unchanged, or raise if any requested body is missing."""
    missing = [name for name in bodies if name not in longitudes]
    if missing:
        raise EphemerisUnavailable(f"ephemeris returned no position for: {', '.join(missing)}")
    return longitudes
