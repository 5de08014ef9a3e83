"""Pension planner exception hierarchy."""

from __future__ import annotations

from pension_planner.core.types import EmployeeId, ReportName


class PensionPlannerError(Exception):
    """Base exception for all pension planner errors."""


class SeedDataError(PensionPlannerError):
    """Employee roster could not be read or parsed."""

    def __init__(self, origin: str, message: str) -> None:
        self.origin = origin
        super().__init__(f"Cannot load employees from {origin}: {message}")


class DuplicateEmployeeError(SeedDataError):
    """Two roster records share the same identifier."""

    def __init__(self, origin: str, employee_id: EmployeeId) -> None:
        self.employee_id = employee_id
        super().__init__(origin, f"duplicate employee id {employee_id}")


class ReportSerializationError(PensionPlannerError):
    """Report could not be rendered as JSON."""

    def __init__(self, report: ReportName, message: str) -> None:
        self.report = report
        super().__init__(f"Failed to serialize {report} report to JSON: {message}")
