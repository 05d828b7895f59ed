"""Pydantic schemas for birth data, the request form and calculator inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BirthMoment(BaseModel):
    """Civil birth date/time in a named zone, plus where it happened."""

    model_config = ConfigDict(frozen=True)

    date: str
    time: str
    time_zone: str
    latitude: float
    longitude: float


class Location(BaseModel):
    """A resolved city, as produced by the external lookup layer."""

    name: str
    latitude: float
    longitude: float
    time_zone: str
    country: str | None = None


class DiagnosticRequest(BaseModel):
    """Everything the form layer collects for one diagnostic run."""

    name: str = ""
    date_of_birth: str
    time_of_birth: str
    birth_location: Location | None = None
    current_location: Location | None = None
    rising_sign: str = ""
    unit_number: str = ""
    street_number: str = ""
    street_name: str = ""
    postal_code: str = ""
    home_built_year: str = ""


class TransitsInput(BaseModel):
    rising_sign: str


class NatalChartInput(BaseModel):
    moment: BirthMoment


class LifePathInput(BaseModel):
    birth_date: str


class RelocationInput(BaseModel):
    moment: BirthMoment
    destination_latitude: float
    destination_longitude: float


class AddressNumerologyInput(BaseModel):
    unit_number: str = ""
    street_number: str = ""
    street_name: str = ""
    postal_code: str = ""
    home_year: str = ""
    birth_year: str = Field(default="")
