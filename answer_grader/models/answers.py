"""Answer, answer-key and correction records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from answer_grader.constants import (
    MAX_QUESTION_NUMBER,
    STATUS_CORRECT,
    STATUS_INCORRECT,
    STATUS_KEY_MISSING,
)
from answer_grader.exceptions import InvalidVerificationPayload


@dataclass(frozen=True)
class ParsedAnswer:
    """One numbered line recovered from an OCR transcript."""

    question_number: int
    text: str


@dataclass(frozen=True)
class ExamRecord:
    id: int
    title: str

    def to_dict(self) -> Dict[str, Any]:
        return {"exam_id": self.id, "title": self.title}


@dataclass(frozen=True)
class AnswerKeyRecord:
    """Snapshot of a persisted answer-key entry."""

    id: int
    exam_id: int
    question_number: int
    raw_text: str
    corrected_text: Optional[str] = None
    verified: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Unverified-key shape returned after ingestion."""
        return {
            "key_id": self.id,
            "question_number": self.question_number,
            "raw_text": self.raw_text,
        }


@dataclass(frozen=True)
class VerifiedKey:
    question_number: int
    corrected_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_number": self.question_number,
            "corrected_text": self.corrected_text,
        }


@dataclass(frozen=True)
class KeyCorrection:
    """A human-supplied correction for one answer-key entry."""

    key_id: int
    question_number: int
    corrected_text: str

    @classmethod
    def from_dict(cls, data: Any) -> "KeyCorrection":
        """Build a correction from a JSON payload item.

        Raises:
            InvalidVerificationPayload: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise InvalidVerificationPayload("Each correction must be a JSON object")

        key_id = data.get("key_id")
        question_number = data.get("question_number")
        corrected_text = data.get("corrected_text", "")

        # bool is an int subclass; reject it explicitly
        if not isinstance(key_id, int) or isinstance(key_id, bool):
            raise InvalidVerificationPayload(
                "Field 'key_id' is required and must be an integer", field="key_id"
            )
        if (
            not isinstance(question_number, int)
            or isinstance(question_number, bool)
            or not 0 <= question_number <= MAX_QUESTION_NUMBER
        ):
            raise InvalidVerificationPayload(
                "Field 'question_number' must be a non-negative 64-bit integer",
                field="question_number",
            )
        if corrected_text is None:
            corrected_text = ""
        if not isinstance(corrected_text, str):
            raise InvalidVerificationPayload(
                "Field 'corrected_text' must be a string", field="corrected_text"
            )
        return cls(key_id=key_id, question_number=question_number, corrected_text=corrected_text)


class CorrectionStatus(Enum):
    CORRECT = STATUS_CORRECT
    INCORRECT = STATUS_INCORRECT
    KEY_MISSING = STATUS_KEY_MISSING


@dataclass(frozen=True)
class CorrectionResult:
    question_number: int
    student_answer: str
    is_correct: bool
    score: float
    status: CorrectionStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_number": self.question_number,
            "student_answer": self.student_answer,
            "is_correct": self.is_correct,
            "score": self.score,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class CorrectionSummary:
    total_correct: int
    total_questions: int
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_correct": self.total_correct,
            "total_questions": self.total_questions,
            "summary_text": self.text,
        }


@dataclass(frozen=True)
class CorrectionReport:
    """Per-question results of a student sheet plus the aggregate summary."""

    summary: CorrectionSummary
    details: List[CorrectionResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "details": [result.to_dict() for result in self.details],
        }
