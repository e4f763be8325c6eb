"""Logging configuration for the command line entry point."""
from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr.

    Unknown level names fall back to INFO. aiohttp is kept at WARNING so
    transport chatter does not drown the per-query messages.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(format=_LOG_FORMAT, datefmt=_DATE_FORMAT)
    logging.getLogger().setLevel(numeric_level)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
