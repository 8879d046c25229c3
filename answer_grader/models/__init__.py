"""Typed records exchanged between the parser, the workflows and the web layer."""

from .answers import (
    AnswerKeyRecord,
    CorrectionReport,
    CorrectionResult,
    CorrectionStatus,
    CorrectionSummary,
    ExamRecord,
    KeyCorrection,
    ParsedAnswer,
    VerifiedKey,
)

__all__ = [
    "AnswerKeyRecord",
    "CorrectionReport",
    "CorrectionResult",
    "CorrectionStatus",
    "CorrectionSummary",
    "ExamRecord",
    "KeyCorrection",
    "ParsedAnswer",
    "VerifiedKey",
]
