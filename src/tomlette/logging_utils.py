"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a single stderr handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        handlers=[handler],
        force=True,
    )
