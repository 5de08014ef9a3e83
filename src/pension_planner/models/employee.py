"""Employee roster records.

Both records are immutable. JSON field names are camelCase; Python
attributes are snake_case and either spelling is accepted on input.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PensionPlan(BaseModel):
    """Pension plan enrollment owned by a single employee.

    No invariant ties ``enrollment_date`` to ``plan_reference_number``; any
    combination of present and absent fields is accepted.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    plan_reference_number: Optional[str] = None
    enrollment_date: Optional[date] = None
    monthly_contribution: Optional[Decimal] = None


class Employee(BaseModel):
    """Single employee and their optional pension plan."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    employment_date: date
    yearly_salary: Optional[Decimal] = None
    pension_plan: Optional[PensionPlan] = None  # None -> not enrolled

    @property
    def is_enrolled(self) -> bool:
        return self.pension_plan is not None
