"""Tests for Employee and PensionPlan models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pension_planner.models.employee import Employee, PensionPlan


def test_accepts_camel_case_and_snake_case_names():
    camel = Employee.model_validate(
        {"id": 1, "firstName": "Daniel", "lastName": "Agar", "employmentDate": "2023-01-17"}
    )
    snake = Employee(id=1, first_name="Daniel", last_name="Agar", employment_date=date(2023, 1, 17))
    assert camel == snake


def test_salary_is_exact_decimal():
    employee = Employee(id=1, employment_date=date(2023, 1, 17), yearly_salary="105945.50")
    assert employee.yearly_salary == Decimal("105945.50")
    assert str(employee.yearly_salary) == "105945.50"


def test_identifier_is_immutable():
    employee = Employee(id=1, employment_date=date(2023, 1, 17))
    with pytest.raises(ValidationError):
        employee.id = 2


def test_employment_date_is_required():
    with pytest.raises(ValidationError):
        Employee(id=1)


def test_missing_plan_means_not_enrolled():
    employee = Employee(id=4, employment_date=date(2023, 7, 21))
    assert employee.pension_plan is None
    assert not employee.is_enrolled


def test_plan_tolerates_enrollment_date_without_reference():
    plan = PensionPlan(enrollment_date=date(2025, 9, 3))
    employee = Employee(id=2, employment_date=date(2022, 9, 3), pension_plan=plan)
    assert employee.is_enrolled
    assert employee.pension_plan.plan_reference_number is None


def test_text_fields_are_kept_verbatim():
    employee = Employee.model_validate(
        {
            "id": 3,
            "lastName": "  Agar ",
            "employmentDate": "2014-05-16",
            "pensionPlan": {"planReferenceNumber": " SM2307"},
        }
    )
    assert employee.last_name == "  Agar "
    assert employee.pension_plan.plan_reference_number == " SM2307"
