"""Command-line entry point.

Usage:
    pension-planner list
    pension-planner upcoming [--as-of 2025-08-20]
    python -m pension_planner list --data-file roster.json
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from pension_planner.core.config import PlannerSettings
from pension_planner.core.exceptions import ReportSerializationError, SeedDataError
from pension_planner.core.logging_config import configure_logging, get_logger
from pension_planner.core.protocols import IEmployeeSource
from pension_planner.core.types import ReportName
from pension_planner.models.employee import Employee
from pension_planner.persistence import create_employee_source
from pension_planner.reporting import quarters
from pension_planner.reporting.reports import list_by_compensation, upcoming_enrollees
from pension_planner.reporting.serializer import render_employees

logger = get_logger(__name__)

USAGE = "Usage: pension-planner [list|upcoming]"

Report = Callable[[Sequence[Employee], date], list[Employee]]

COMMANDS: dict[ReportName, Report] = {
    "list": lambda employees, as_of: list_by_compensation(employees),
    "upcoming": upcoming_enrollees,
}


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pension-planner",
        add_help=False,
        description="Report on employees and their pension plan enrollment",
    )
    parser.add_argument("command", nargs="?", default=None, help="list | upcoming (case-insensitive)")
    parser.add_argument(
        "--as-of",
        type=_iso_date,
        default=None,
        help="Reporting date for 'upcoming' as YYYY-MM-DD (default: today)",
    )
    parser.add_argument("--data-file", default=None, help="Roster JSON file (default: bundled seed roster)")
    return parser


def main(argv: Sequence[str] | None = None, source: IEmployeeSource | None = None) -> int:
    """Run a single report and return the process exit code."""
    args, _ = build_parser().parse_known_args(argv)

    try:
        settings = PlannerSettings()
    except ValidationError as exc:
        configure_logging()
        logger.error("invalid_configuration", error=str(exc))
        return 1
    if args.data_file is not None:
        settings = settings.model_copy(update={"data_file": Path(args.data_file)})
    configure_logging(level=settings.log_level, format_json=settings.log_json)

    command = (args.command or "").lower()
    report = COMMANDS.get(command)
    if report is None:
        print(USAGE)
        return 0

    if source is None:
        source = create_employee_source(settings)
    try:
        employees = source.load()
    except SeedDataError as exc:
        logger.error("roster_unavailable", origin=exc.origin, error=str(exc))
        return 1

    as_of = args.as_of or settings.as_of or quarters.today()
    try:
        rendered = render_employees(report(employees, as_of), report=command)
    except ReportSerializationError as exc:
        # Exit status stays 0; only stderr reports the failure.
        logger.error("report_serialization_failed", report=command, error=str(exc))
        return 0

    print(rendered)
    return 0


def run() -> None:
    """Console-script entry point."""
    raise SystemExit(main())
