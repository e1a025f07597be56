# Logging utilities

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..core.constants import LOGGER_NAME
from ..core.types import Diagnostic


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Setup logging configuration.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def emit_diagnostics(
    diagnostics: Iterable[Diagnostic],
    logger: logging.Logger,
) -> int:
    """Forward diagnostics from pure code to a logger.

    Args:
        diagnostics: Events to log, in order
        logger: Destination logger

    Returns:
        Number of records emitted
    """
    count = 0
    for diagnostic in diagnostics:
        level = logging.getLevelName(diagnostic.level.upper())
        if not isinstance(level, int):
            level = logging.ERROR
        logger.log(level, diagnostic.message)
        count += 1
    return count
