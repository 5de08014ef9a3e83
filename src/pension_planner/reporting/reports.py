"""Read-only roster reports.

``list_by_compensation`` orders the whole roster; ``upcoming_enrollees``
selects unenrolled employees whose three-year anniversary lands in the
next calendar quarter.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from pension_planner.core.logging_config import get_logger
from pension_planner.models.employee import Employee
from pension_planner.reporting.ordering import NullsLast
from pension_planner.reporting.quarters import QuarterWindow, add_years, next_quarter_window

logger = get_logger(__name__)

ELIGIBILITY_YEARS = 3


def _compensation_key(employee: Employee) -> tuple[NullsLast, NullsLast]:
    return (
        NullsLast(employee.yearly_salary, descending=True),
        NullsLast(employee.last_name),
    )


def list_by_compensation(employees: Iterable[Employee]) -> list[Employee]:
    """Every employee, highest salary first, ties broken by last name."""
    ordered = sorted(employees, key=_compensation_key)
    logger.info("report_generated", report="list", count=len(ordered))
    return ordered


def three_year_anniversary(employee: Employee) -> date:
    return add_years(employee.employment_date, ELIGIBILITY_YEARS)


def is_upcoming_enrollee(employee: Employee, window: QuarterWindow) -> bool:
    if employee.is_enrolled:
        return False
    return window.contains(three_year_anniversary(employee))


def upcoming_enrollees(employees: Iterable[Employee], today: date) -> list[Employee]:
    """Unenrolled employees reaching three years of service next quarter.

    Most recently hired first.
    """
    window = next_quarter_window(today)
    matches = [e for e in employees if is_upcoming_enrollee(e, window)]
    matches.sort(key=lambda e: e.employment_date, reverse=True)
    logger.info(
        "report_generated",
        report="upcoming",
        count=len(matches),
        as_of=today.isoformat(),
        window_start=window.start.isoformat(),
        window_end=window.end.isoformat(),
    )
    return matches
