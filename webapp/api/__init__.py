"""
API Module

HTTP endpoints for exams, answer keys and student answer checking.
"""

from .error_handlers import register_error_handlers
from .exam_routes import exam_bp

__all__ = ["exam_bp", "register_error_handlers"]
