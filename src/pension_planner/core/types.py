"""Type aliases used across the pension planner."""

from __future__ import annotations

EmployeeId = int
ReportName = str
