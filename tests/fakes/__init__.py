"""Shared test doubles and record builders."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pension_planner.models.employee import Employee, PensionPlan
from pension_planner.persistence.memory_source import MemoryEmployeeSource


def make_employee(
    id: int,
    last_name: str | None = "Doe",
    *,
    first_name: str | None = "Jane",
    employment_date: date = date(2020, 1, 1),
    salary: str | None = "50000.00",
    plan: PensionPlan | None = None,
) -> Employee:
    return Employee(
        id=id,
        first_name=first_name,
        last_name=last_name,
        employment_date=employment_date,
        yearly_salary=Decimal(salary) if salary is not None else None,
        pension_plan=plan,
    )


__all__ = ["MemoryEmployeeSource", "make_employee"]
