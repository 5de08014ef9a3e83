"""Calendar quarter arithmetic.

Quarters are fixed: Jan-Mar, Apr-Jun, Jul-Sep, Oct-Dec.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class QuarterWindow:
    """Inclusive date range covering one calendar quarter."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def today() -> date:
    """Current local date.

    Wrapped so tests can patch it.
    """
    return date.today()


def quarter_of(day: date) -> int:
    """1-indexed quarter containing ``day``."""
    return (day.month - 1) // 3 + 1


def first_day_of_next_quarter(day: date) -> date:
    current = quarter_of(day)
    if current == 4:
        return date(day.year + 1, 1, 1)
    return date(day.year, current * 3 + 1, 1)


def last_day_of_quarter(first_day_of_quarter: date) -> date:
    end_month = first_day_of_quarter.month + 2
    _, days_in_month = calendar.monthrange(first_day_of_quarter.year, end_month)
    return date(first_day_of_quarter.year, end_month, days_in_month)


def next_quarter_window(day: date) -> QuarterWindow:
    start = first_day_of_next_quarter(day)
    return QuarterWindow(start=start, end=last_day_of_quarter(start))


def add_years(day: date, years: int) -> date:
    """Calendar-year addition; Feb 29 falls back to Feb 28 in non-leap years."""
    year = day.year + years
    _, days_in_month = calendar.monthrange(year, day.month)
    return date(year, day.month, min(day.day, days_in_month))
