"""
Database package for the Answer Grader application.

Provides the SQLAlchemy models backing exams and their answer keys.
"""

from .models import AnswerKeyEntry, Exam, db

__all__ = ["db", "Exam", "AnswerKeyEntry"]
