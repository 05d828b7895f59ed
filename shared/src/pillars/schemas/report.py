"""Pydantic schemas for the consolidated report handed to presentation layers."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from pillars.schemas.birth import DiagnosticRequest
from pillars.schemas.calculators import (
    AddressNumerologyResult,
    LifePathResult,
    RelocationResult,
    TransitsResult,
)
from pillars.schemas.diagnostic import DiagnosticReport
from pillars.schemas.natal import NatalChartResult


class UserInfo(BaseModel):
    name: str
    date_of_birth: str
    time_of_birth: str
    birth_location: str
    current_location: str
    rising_sign: str | None = None

    @classmethod
    def from_request(cls, request: DiagnosticRequest) -> UserInfo:
        return cls(
            name=request.name or "Unknown",
            date_of_birth=request.date_of_birth,
            time_of_birth=request.time_of_birth,
            birth_location=request.birth_location.name if request.birth_location else "Unknown",
            current_location=request.current_location.name if request.current_location else "Unknown",
            rising_sign=request.rising_sign or None,
        )


class CalculatorError(BaseModel):
    calculator_name: str
    error_message: str


class CalculatorResults(BaseModel):
    """One independently typed slot per calculator; None when it did not produce output."""

    transits: TransitsResult | None = None
    natal_chart: NatalChartResult | None = None
    life_path: LifePathResult | None = None
    relocation: RelocationResult | None = None
    address_numerology: AddressNumerologyResult | None = None


class ConsolidatedReport(BaseModel):
    success: bool
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    user_info: UserInfo
    calculators: CalculatorResults = Field(default_factory=CalculatorResults)
    diagnostic: DiagnosticReport | None = None
    errors: list[CalculatorError] | None = None

    def attach_diagnostic(self, diagnostic: DiagnosticReport) -> None:
        """Attach the grading output once grading completes."""
        self.diagnostic = diagnostic

    def error_summary(self) -> str:
        """Human-readable ``calculator: message`` lines for a failed run."""
        if self.success:
            return ""
        if self.errors:
            return "\n".join(f"{e.calculator_name}: {e.error_message}" for e in self.errors)
        return "Unknown error occurred"
