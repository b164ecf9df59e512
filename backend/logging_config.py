"""
Logging configuration shared by the API and the CLI.

Call setup_logging() once at start-up; modules only ever do
logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "backend"

_LOGGING_CONFIGURED = False


def setup_logging(level: Union[int, str] = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to the package logger.

    Args:
        level: Log level name or number for the package logger
        log_file: Optional file that receives the same records

    Returns:
        The configured package logger
    """
    global _LOGGING_CONFIGURED

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _LOGGING_CONFIGURED:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    _LOGGING_CONFIGURED = True
    return logger
