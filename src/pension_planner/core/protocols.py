"""Protocol interfaces for pension planner abstractions.

Structural typing only; implementations do not inherit from these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pension_planner.models.employee import Employee


# ---------------------------------------------------------------------------
# Persistence: Employee Source
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeSource(Protocol):
    """Read-only provider of the employee roster."""

    @property
    def origin(self) -> str: ...

    def load(self) -> tuple[Employee, ...]: ...
