"""Centralized logging configuration.

The CLI calls ``setup_logging`` once at start-up; every other module only
asks for a named logger.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the root logger to write to stderr.

    stdout stays reserved for command output. Reportlab is kept at WARNING
    whatever *level* is asked for.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("reportlab").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, typically called with ``__name__``."""
    return logging.getLogger(name)
