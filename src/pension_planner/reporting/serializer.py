"""JSON rendering for roster reports.

Dates render as ISO calendar dates. Decimals render as JSON number tokens
carrying their exact base-10 text (``105945.50``); simplejson writes
``Decimal`` values through ``str`` so no binary float is involved.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

import simplejson
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from pension_planner.core.exceptions import ReportSerializationError
from pension_planner.core.types import ReportName
from pension_planner.models.employee import Employee

INDENT = 2

_employee_list = TypeAdapter(list[Employee])


def _encode_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_employees(employees: Sequence[Employee], report: ReportName = "employees") -> str:
    """Render ``employees`` as an indented JSON array.

    Raises:
        ReportSerializationError: if a record cannot be serialized.
    """
    try:
        records = _employee_list.dump_python(list(employees), mode="python", by_alias=True)
        return simplejson.dumps(records, use_decimal=True, indent=INDENT, default=_encode_default)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise ReportSerializationError(report, str(exc)) from exc
