"""Employee pension-plan enrollment reporting."""

__version__ = "0.1.0"
