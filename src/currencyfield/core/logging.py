"""Centralised logging configuration for the ``currencyfield`` package."""

from __future__ import annotations

import logging
from typing import Literal

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | int | str = "INFO",
) -> None:
    """Initialise standard logging with a consistent formatter.

    ``level`` normally comes from ``AppSettings.log_level``.
    """
    if isinstance(level, str):
        logging_level = logging.getLevelName(level.upper())
    else:
        logging_level = level

    logging.basicConfig(level=logging_level, format=DEFAULT_FORMAT)


__all__ = ["DEFAULT_FORMAT", "configure"]
