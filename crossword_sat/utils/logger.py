"""Logging utilities for the crossword SAT solver."""

from __future__ import annotations

import logging
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single stream handler on the root logger.

    Every solver round logs one INFO line, so long enumeration sessions stay
    readable at INFO and quiet at WARNING. ``stream`` defaults to stderr.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossword_sat")
