"""
Logging configuration for the Answer Grader application.

Every module obtains its logger through ``setup_logger`` so that console and
rotating file output share one format and one level taken from ``LOG_LEVEL``.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from answer_grader.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DIR_LOGS,
    ENV_LOG_LEVEL,
    VALID_LOG_LEVELS,
)


def _resolve_level() -> int:
    log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    if log_level not in VALID_LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL
    return getattr(logging, log_level, logging.INFO)


def setup_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with console and rotating file output.

    Args:
        name: Name of the logger (usually __name__)
        log_file: Optional log file path. If not provided, logs to logs/app.log

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = _resolve_level()
    logger.setLevel(level)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is None:
        log_dir = Path(DIR_LOGS)
        log_dir.mkdir(exist_ok=True)
        log_file = log_dir / "app.log"

    file_handler = RotatingFileHandler(
        str(log_file),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        delay=True,
        encoding=DEFAULT_ENCODING,
    )
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


logger = setup_logger("answer_grader")
