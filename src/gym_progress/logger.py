"""loguru sinks for the CLI.

Library modules only call ``from loguru import logger``; nothing is configured
until ``setup_logger`` runs, so importing ``gym_progress`` never touches the
caller's handlers.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from pathlib import Path

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace every loguru sink with stderr plus an optional log file.

    Safe to call repeatedly; each call starts from a clean set of sinks.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation="10 MB")

    logger.debug("Logging at {}", level)
