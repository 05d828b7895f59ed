"""Explicit success/failure result shared by every calculator stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """Result of one calculator run: a value or an error message, never both."""

    calculator: str
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, calculator: str, value: T) -> StageOutcome[T]:
        return cls(calculator=calculator, value=value)

    @classmethod
    def failure(cls, calculator: str, error: str | BaseException) -> StageOutcome[T]:
        message = error.message if hasattr(error, "message") else str(error)
        return cls(calculator=calculator, error=message or "Unknown error")
