"""Error taxonomy for the diagnostic pipeline."""

from __future__ import annotations


class DiagnosticError(Exception):
    """Base class for every error raised by the diagnostic core."""


class InputValidationError(DiagnosticError):
    """Malformed or out-of-range calculator input, detected before computation."""

    def __init__(self, calculator: str, message: str) -> None:
        super().__init__(message)
        self.calculator = calculator
        self.message = message

    def __str__(self) -> str:
        return f"{self.calculator}: {self.message}"


class InvalidCivilTime(DiagnosticError, ValueError):
    """A civil date/time could not be parsed or its time zone is unknown."""


class EphemerisUnavailable(DiagnosticError):
    """The ephemeris engine is not initialized or a query failed."""


class CalculatorTimeout(DiagnosticError, TimeoutError):
    """The calculator batch did not settle before the global deadline."""


class GradingError(DiagnosticError):
    """The grading engine failed after the calculators succeeded."""
