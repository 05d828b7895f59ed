"""Split one diagnostic request into the per-calculator inputs."""

from __future__ import annotations

from dataclasses import dataclass, field

from pillars.errors import InputValidationError
from pillars.schemas.birth import (
    AddressNumerologyInput,
    BirthMoment,
    DiagnosticRequest,
    LifePathInput,
    NatalChartInput,
    RelocationInput,
    TransitsInput,
)

from pipeline.stages import natal_chart_stage, relocation_stage


@dataclass
class CalculatorInputs:
    """Mapped inputs; a calculator whose input could not be built has None and an error."""

    natal_chart: NatalChartInput | None
    life_path: LifePathInput
    relocation: RelocationInput | None
    address_numerology: AddressNumerologyInput
    errors: list[InputValidationError] = field(default_factory=list)


def birth_moment(request: DiagnosticRequest) -> BirthMoment | None:
    if request.birth_location is None:
        return None
    location = request.birth_location
    return BirthMoment(
        date=request.date_of_birth,
        time=request.time_of_birth,
        time_zone=location.time_zone,
        latitude=location.latitude,
        longitude=location.longitude,
    )


def map_to_transits_input(rising_sign: str) -> TransitsInput:
    return TransitsInput(rising_sign=rising_sign)


def map_to_address_numerology_input(request: DiagnosticRequest) -> AddressNumerologyInput:
    return AddressNumerologyInput(
        unit_number=request.unit_number.strip(),
        street_number=request.street_number.strip(),
        street_name=request.street_name.strip(),
        postal_code=request.postal_code.strip(),
        home_year=request.home_built_year.strip(),
        birth_year=request.date_of_birth.split("-")[0],
    )


def map_inputs(request: DiagnosticRequest) -> CalculatorInputs:
    errors: list[InputValidationError] = []
    moment = birth_moment(request)

    natal_input = None
    if moment is None:
        errors.append(
            InputValidationError(natal_chart_stage.CALCULATOR, "Birth location is required for natal chart")
        )
    else:
        natal_input = NatalChartInput(moment=moment)

    relocation_input = None
    if moment is None or request.current_location is None:
        errors.append(
            InputValidationError(
                relocation_stage.CALCULATOR,
                "Both birth and current locations are required for relocation",
            )
        )
    else:
        relocation_input = RelocationInput(
            moment=moment,
            destination_latitude=request.current_location.latitude,
            destination_longitude=request.current_location.longitude,
        )

    address_input = map_to_address_numerology_input(request)
    return CalculatorInputs(
        natal_chart=natal_input,
        life_path=LifePathInput(birth_date=request.date_of_birth.strip()),
        relocation=relocation_input,
        address_numerology=address_input,
        errors=errors,
    )
