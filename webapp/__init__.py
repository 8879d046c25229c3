"""
Webapp package for the Answer Grader application.

Contains the Flask application factory and the HTTP routes exposing the
answer-key and correction workflows.
"""

__version__ = "0.1.0"

from .app_factory import create_app

__all__ = ["create_app"]
