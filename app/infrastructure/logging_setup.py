"""Logging configuration for the service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with the service format.

    Unknown level names fall back to ``INFO`` instead of failing startup.
    """

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        logging.getLogger(__name__).warning(
            "Unknown log level '%s'. Falling back to INFO.", level
        )
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)


__all__ = ["LOG_FORMAT", "configure_logging"]
