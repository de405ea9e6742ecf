"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging

from forms2mermaid.config import FORMS2MERMAID_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Send package logs to stderr at ``level`` (defaults to the env setting)."""
    resolved = level if level is not None else FORMS2MERMAID_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=_FORMAT, force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
