"""Application configuration using pydantic-settings."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class PlannerSettings(BaseSettings):
    """Root application settings.

    Every field can be overridden from the environment with the
    ``PENSION_PLANNER_`` prefix, e.g. ``PENSION_PLANNER_AS_OF=2025-08-20``.
    """

    model_config = {"env_prefix": "PENSION_PLANNER_"}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_json: bool = False
    data_file: Path | None = None  # None -> bundled seed roster
    as_of: date | None = None  # None -> wall-clock today
