"""Observability module: structured logging setup."""

from .logging_config import configure_logging, JSONFormatter

__all__ = [
    "configure_logging",
    "JSONFormatter",
]
