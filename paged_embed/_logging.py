"""Logging setup for the ``embed-pages`` console script."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Route ``paged_embed`` log records to stderr at ``level``.

    Raises
    ------
    ValueError
        If ``level`` is not a standard logging level name.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level {level!r}."
        raise ValueError(msg)
    logger = logging.getLogger("paged_embed")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(numeric)


__all__ = ["LOG_FORMAT", "configure_logging"]
