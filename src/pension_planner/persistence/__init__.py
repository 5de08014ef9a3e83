"""Pluggable employee sources behind the IEmployeeSource protocol."""

from __future__ import annotations

from pension_planner.core.config import PlannerSettings
from pension_planner.persistence.json_source import JsonEmployeeSource
from pension_planner.persistence.memory_source import MemoryEmployeeSource


def create_employee_source(settings: PlannerSettings | None = None) -> JsonEmployeeSource:
    """Create the roster source described by application settings.

    ``settings.data_file`` selects a roster file; when unset the bundled
    seed roster is used.
    """
    if settings is None:
        settings = PlannerSettings()
    return JsonEmployeeSource(settings.data_file)


__all__ = ["JsonEmployeeSource", "MemoryEmployeeSource", "create_employee_source"]
