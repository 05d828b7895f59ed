"""Tests for the shared pydantic schemas."""

import pytest
from pydantic import TypeAdapter, ValidationError

from pillars.schemas.calculators import NumerologyNumber
from pillars.schemas.diagnostic import DiagnosticReport
from pillars.schemas.natal import ChartAngles
from pillars.schemas.report import CalculatorError, ConsolidatedReport, UserInfo

_numbers = TypeAdapter(NumerologyNumber)


@pytest.mark.parametrize("value", [1, 5, 9, 11, 22, 33])
def test_numerology_number_accepts(value):
    assert _numbers.validate_python(value) == value


@pytest.mark.parametrize("value", [0, 10, 12, 44, -1])
def test_numerology_number_rejects(value):
    with pytest.raises(ValidationError):
        _numbers.validate_python(value)


def test_chart_angles_are_normalized_and_opposed():
    angles = ChartAngles.from_asc_mc(370.0, -80.0)
    assert angles.ascendant == pytest.approx(10.0)
    assert angles.descendant == pytest.approx(190.0)
    assert angles.midheaven == pytest.approx(280.0)
    assert angles.imum_coeli == pytest.approx(100.0)
    assert list(angles.as_points()) == ["ASC", "DSC", "MC", "IC"]


def test_user_info_from_request(sample_request):
    info = UserInfo.from_request(sample_request)
    assert info.name == "Test Person"
    assert info.birth_location == "Orlando"
    assert info.current_location == "Miami"
    assert info.rising_sign is None


def test_error_summary():
    info = UserInfo(
        name="x",
        date_of_birth="1990-05-15",
        time_of_birth="14:30",
        birth_location="Orlando",
        current_location="Miami",
    )
    failed = ConsolidatedReport(
        success=False,
        user_info=info,
        errors=[
            CalculatorError(calculator_name="lifePath", error_message="Invalid birth date"),
            CalculatorError(calculator_name="relocation", error_message="Invalid destination latitude"),
        ],
    )
    assert failed.error_summary() == "lifePath: Invalid birth date\nrelocation: Invalid destination latitude"
    assert ConsolidatedReport(success=False, user_info=info).error_summary() == "Unknown error occurred"
    assert ConsolidatedReport(success=True, user_info=info).error_summary() == ""


def test_diagnostic_report_requires_three_pillars():
    with pytest.raises(ValidationError):
        DiagnosticReport(pillars=[], total_pressure=0, total_support=0, score=0, final_grade="A", all_items=[])
