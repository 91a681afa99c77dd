"""Logging setup for the command line.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for the ``lifeimpact`` package.

    Raises:
        ValueError: If ``level`` is not a standard logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("lifeimpact").setLevel(numeric_level)
