"""End-to-end runs against the bundled seed roster."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

from pension_planner import cli
from pension_planner.persistence import JsonEmployeeSource
from pension_planner.reporting.quarters import next_quarter_window


def test_bundled_roster_loads_twelve_employees():
    employees = JsonEmployeeSource().load()
    assert len(employees) == 12
    assert len({e.id for e in employees}) == 12


def test_list_orders_whole_roster(capsys):
    assert cli.main(["list"]) == 0
    document = json.loads(capsys.readouterr().out, parse_float=Decimal)
    assert [r["id"] for r in document] == [3, 2, 1, 10, 6, 8, 12, 7, 9, 5, 11, 4]
    assert document[0]["yearlySalary"] == Decimal("842000.75")
    assert document[2]["pensionPlan"] == {
        "planReferenceNumber": "EX1089",
        "enrollmentDate": None,
        "monthlyContribution": Decimal("100.00"),
    }


def test_upcoming_for_third_quarter_2025(capsys):
    assert cli.main(["upcoming", "--as-of", "2025-08-20"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in document] == [12, 11, 10, 7, 9, 8]

    window = next_quarter_window(date(2025, 8, 20))
    for record in document:
        hired = date.fromisoformat(record["employmentDate"])
        assert record["pensionPlan"] is None
        assert window.contains(hired.replace(year=hired.year + 3))


def test_upcoming_excludes_enrolled_agar(capsys):
    cli.main(["upcoming", "--as-of", "2025-11-01"])
    document = json.loads(capsys.readouterr().out)
    assert 1 not in [r["id"] for r in document]
