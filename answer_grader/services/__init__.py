"""Workflow services for answer-key management and student correction."""

from .correction_service import CorrectionService
from .key_service import AnswerKeyService
from .ocr_service import OCRService

__all__ = ["AnswerKeyService", "CorrectionService", "OCRService"]
