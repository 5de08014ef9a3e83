"""Roster reports, quarter arithmetic and JSON rendering."""

from __future__ import annotations

from pension_planner.reporting.reports import list_by_compensation, upcoming_enrollees
from pension_planner.reporting.serializer import render_employees

__all__ = ["list_by_compensation", "render_employees", "upcoming_enrollees"]
