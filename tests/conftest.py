"""Shared fixtures."""

from __future__ import annotations

import pytest

from pension_planner.core.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _structlog_to_stdlib():
    """Route structlog through stdlib logging so caplog sees events."""
    configure_logging(level="DEBUG")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_JSON", "DATA_FILE", "AS_OF"):
        monkeypatch.delenv(f"PENSION_PLANNER_{name}", raising=False)
