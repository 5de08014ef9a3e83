"""JSON file employee source.

The file holds a JSON array of employee objects with camelCase keys.
Monetary amounts should be JSON strings so they stay exact.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from pension_planner.core.exceptions import DuplicateEmployeeError, SeedDataError
from pension_planner.core.logging_config import get_logger
from pension_planner.models.employee import Employee

logger = get_logger(__name__)

BUNDLED_ROSTER = Path(__file__).resolve().parent.parent / "data" / "employees.json"

_roster = TypeAdapter(tuple[Employee, ...])


class JsonEmployeeSource:
    """IEmployeeSource reading a roster JSON file."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else BUNDLED_ROSTER

    @property
    def origin(self) -> str:
        return str(self._path)

    def load(self) -> tuple[Employee, ...]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise SeedDataError(self.origin, exc.strerror or str(exc)) from exc

        try:
            employees = _roster.validate_json(raw)
        except ValidationError as exc:
            raise SeedDataError(self.origin, _describe(exc)) from exc

        seen: set[int] = set()
        for employee in employees:
            if employee.id in seen:
                raise DuplicateEmployeeError(self.origin, employee.id)
            seen.add(employee.id)

        logger.info("employees_loaded", origin=self.origin, count=len(employees))
        return employees


def _describe(exc: ValidationError) -> str:
    """First validation error as ``location: message``."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    more = exc.error_count() - 1
    suffix = f" (+{more} more)" if more else ""
    return f"{location}: {first['msg']}{suffix}"
