"""Calculator orchestrator - runs the five calculators and grades the result.

The natal chart runs first because its rising sign feeds the transits
calculator; the other four then run concurrently. The whole batch succeeds
or fails together. Grading runs afterwards and never fails the run.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from ephemeris.port import EphemerisPort
from pillars.config import Settings, get_settings
from pillars.errors import (
    CalculatorTimeout,
    EphemerisUnavailable,
    GradingError,
    InputValidationError,
    InvalidCivilTime,
)
from pillars.schemas.birth import DiagnosticRequest
from pillars.schemas.diagnostic import DiagnosticReport, PlanetHouse
from pillars.schemas.report import CalculatorError, CalculatorResults, ConsolidatedReport, UserInfo

from pipeline.grader import GraderInput, grade_three_pillars
from pipeline.input_mapper import CalculatorInputs, map_inputs, map_to_transits_input
from pipeline.stages.address_stage import (
    calculate_address_numerology,
    validate_address_numerology_input,
)
from pipeline.stages.base import StageOutcome
from pipeline.stages.destination_stage import compute_planet_houses_at_destination
from pipeline.stages.life_path_stage import calculate_life_path, validate_life_path_input
from pipeline.stages.natal_chart_stage import (
    CALCULATOR as NATAL_CHART,
    calculate_natal_chart,
    validate_natal_chart_input,
)
from pipeline.stages.relocation_stage import (
    CALCULATOR as RELOCATION,
    calculate_relocation,
    validate_relocation_input,
)
from pipeline.stages.transits_stage import calculate_transits

logger = logging.getLogger(__name__)

ORCHESTRATOR = "orchestrator"


class OrchestratorState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    NATAL_CHART_PENDING = "natal_chart_pending"
    PARALLEL_PENDING = "parallel_pending"
    CONSOLIDATING = "consolidating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def resolve_today(settings: Settings) -> date:
    """Today's date in the configured zone."""
    return datetime.now(ZoneInfo(settings.timezone)).date()


class CalculatorOrchestrator:
    """Single-shot run of the calculator pipeline for one request."""

    def __init__(
        self,
        ephemeris: EphemerisPort,
        settings: Settings | None = None,
        *,
        today: date | None = None,
    ) -> None:
        self.ephemeris = ephemeris
        self.settings = settings or get_settings()
        self.today = today or resolve_today(self.settings)
        self.state = OrchestratorState.IDLE
        self.transitions: list[OrchestratorState] = [OrchestratorState.IDLE]

    def _transition(self, state: OrchestratorState) -> None:
        logger.info("Orchestrator %s -> %s", self.state.value, state.value)
        self.state = state
        self.transitions.append(state)

    def _failed(self, user_info: UserInfo, errors: list[CalculatorError]) -> ConsolidatedReport:
        self._transition(OrchestratorState.FAILED)
        for error in errors:
            logger.warning("Calculator %s failed: %s", error.calculator_name, error.error_message)
        return ConsolidatedReport(success=False, user_info=user_info, errors=errors)

    def _validate(self, inputs: CalculatorInputs) -> list[CalculatorError]:
        mapping_errors = {error.calculator: error for error in inputs.errors}
        checks: list[InputValidationError | None] = [
            mapping_errors.get(NATAL_CHART)
            or validate_natal_chart_input(inputs.natal_chart, today=self.today),
            validate_life_path_input(inputs.life_path, today=self.today),
            mapping_errors.get(RELOCATION)
            or validate_relocation_input(inputs.relocation, today=self.today),
            validate_address_numerology_input(inputs.address_numerology, today=self.today),
        ]
        return [
            CalculatorError(calculator_name=error.calculator, error_message=error.message)
            for error in checks
            if error is not None
        ]

    async def run(self, request: DiagnosticRequest) -> ConsolidatedReport:
        user_info = UserInfo.from_request(request)
        timeout = self.settings.orchestrator_timeout_seconds

        self._transition(OrchestratorState.VALIDATING)
        inputs = map_inputs(request)
        validation_errors = self._validate(inputs)
        if validation_errors:
            return self._failed(user_info, validation_errors)

        try:
            self._transition(OrchestratorState.NATAL_CHART_PENDING)
            natal = await asyncio.wait_for(
                calculate_natal_chart(
                    inputs.natal_chart,
                    self.ephemeris,
                    house_system=self.settings.natal_house_system,
                    today=self.today,
                ),
                timeout,
            )
            if not natal.ok:
                return self._failed(user_info, [_as_error(natal)])

            transits_input = map_to_transits_input(natal.value.rising_sign)

            self._transition(OrchestratorState.PARALLEL_PENDING)
            outcomes: list[StageOutcome[Any]] = await asyncio.wait_for(
                asyncio.gather(
                    asyncio.to_thread(calculate_transits, transits_input),
                    asyncio.to_thread(calculate_life_path, inputs.life_path, today=self.today),
                    calculate_relocation(
                        inputs.relocation,
                        self.ephemeris,
                        house_system=self.settings.natal_house_system,
                        today=self.today,
                    ),
                    asyncio.to_thread(
                        calculate_address_numerology, inputs.address_numerology, today=self.today
                    ),
                ),
                timeout,
            )
        except TimeoutError:
            error = CalculatorTimeout(f"Calculator timeout: exceeded {timeout:g} seconds")
            return self._failed(user_info, [CalculatorError(calculator_name=ORCHESTRATOR, error_message=str(error))])
        except Exception as exc:
            logger.exception("Calculator run failed unexpectedly")
            return self._failed(
                user_info,
                [CalculatorError(calculator_name=ORCHESTRATOR, error_message=str(exc) or "Unknown error")],
            )

        failed = [outcome for outcome in outcomes if not outcome.ok]
        if failed:
            return self._failed(user_info, [_as_error(outcome) for outcome in failed])

        self._transition(OrchestratorState.CONSOLIDATING)
        transits, life_path, relocation, address = outcomes
        report = ConsolidatedReport(
            success=True,
            user_info=user_info,
            calculators=CalculatorResults(
                transits=transits.value,
                natal_chart=natal.value,
                life_path=life_path.value,
                relocation=relocation.value,
                address_numerology=address.value,
            ),
        )

        diagnostic = await self._diagnose(inputs, report.calculators)
        if diagnostic is not None:
            report.attach_diagnostic(diagnostic)

        self._transition(OrchestratorState.SUCCEEDED)
        return report

    async def _destination_houses(self, inputs: CalculatorInputs) -> list[PlanetHouse] | None:
        relocation = inputs.relocation
        if relocation is None:
            return None
        try:
            return await asyncio.wait_for(
                compute_planet_houses_at_destination(
                    relocation.moment,
                    relocation.destination_latitude,
                    relocation.destination_longitude,
                    self.ephemeris,
                    house_system=self.settings.destination_house_system,
                ),
                self.settings.orchestrator_timeout_seconds,
            )
        except (TimeoutError, InvalidCivilTime, EphemerisUnavailable) as exc:
            logger.warning("Failed to compute destination houses: %s", str(exc) or type(exc).__name__)
            return None

    async def _diagnose(
        self,
        inputs: CalculatorInputs,
        calculators: CalculatorResults,
    ) -> DiagnosticReport | None:
        destination = await self._destination_houses(inputs)
        try:
            return grade_three_pillars(
                GraderInput(
                    natal_chart=calculators.natal_chart,
                    transits=calculators.transits,
                    life_path=calculators.life_path,
                    destination_planet_houses=destination,
                    address_numerology=calculators.address_numerology,
                )
            )
        except GradingError as exc:
            logger.warning("Angular diagnostic failed: %s", exc)
            return None


def _as_error(outcome: StageOutcome[Any]) -> CalculatorError:
    return CalculatorError(calculator_name=outcome.calculator, error_message=outcome.error or "Unknown error")


async def run_all_calculators(
    request: DiagnosticRequest,
    *,
    ephemeris: EphemerisPort,
    settings: Settings | None = None,
    today: date | None = None,
) -> ConsolidatedReport:
    """Run all five calculators for ``request`` and grade the result."""
    orchestrator = CalculatorOrchestrator(ephemeris, settings, today=today)
    return await orchestrator.run(request)


def error_summary(report: ConsolidatedReport) -> str:
    return report.error_summary()
