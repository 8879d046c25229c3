"""Configuration package for the Answer Grader application."""

from .config_manager import Config, ConfigManager

__all__ = ["Config", "ConfigManager"]
