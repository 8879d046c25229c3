"""
Answer Grader - answer-key extraction, verification and fuzzy grading of
OCR-transcribed exam sheets.
"""

__version__ = "0.1.0"
