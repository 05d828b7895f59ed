"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from pillars.config import Settings, get_settings, reset_settings_cache

_ENV = (
    "SWISSEPH_EPHE_PATH",
    "ORCHESTRATOR_TIMEOUT_SECONDS",
    "NATAL_HOUSE_SYSTEM",
    "DESTINATION_HOUSE_SYSTEM",
    "DIAGNOSTIC_TIMEZONE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_defaults():
    settings = Settings()
    assert settings.ephe_path == ""
    assert settings.orchestrator_timeout_seconds == 10.0
    assert settings.natal_house_system == "P"
    assert settings.destination_house_system == "W"
    assert settings.timezone == "UTC"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SWISSEPH_EPHE_PATH", "/opt/swisseph/ephe")
    monkeypatch.setenv("ORCHESTRATOR_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("DIAGNOSTIC_TIMEZONE", "America/New_York")

    settings = get_settings()

    assert settings.ephe_path == "/opt/swisseph/ephe"
    assert settings.orchestrator_timeout_seconds == 2.5
    assert settings.timezone == "America/New_York"


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("NATAL_HOUSE_SYSTEM", "K")
    assert get_settings() is first

    reset_settings_cache()
    assert get_settings().natal_house_system == "K"


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("ORCHESTRATOR_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()
