"""Package logging. The API and dashboard entry points call ``configure_logging``."""

from __future__ import annotations

import logging
import sys
from typing import IO

LOGGER_NAME = "project_costs"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_CONFIGURED = False


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = "INFO", *, stream: IO[str] = sys.stderr) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    # Silent until an entry point configures output.
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
