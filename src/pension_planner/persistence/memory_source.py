"""In-memory employee source for unit tests."""

from __future__ import annotations

from collections.abc import Iterable

from pension_planner.models.employee import Employee


class MemoryEmployeeSource:
    """Tuple-backed IEmployeeSource for unit tests."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees = tuple(employees)

    @property
    def origin(self) -> str:
        return "memory"

    def load(self) -> tuple[Employee, ...]:
        return self._employees
