"""Utility helpers for the Answer Grader package."""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
