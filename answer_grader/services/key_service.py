"""
Answer-key workflows: exam creation, key ingestion from an OCR transcript,
human verification, and read-back of verified keys.
"""

from typing import Any, List, Sequence

from answer_grader.exceptions import (
    ExamNotFound,
    InvalidVerificationPayload,
    NoAnswersParsed,
    ValidationError,
)
from answer_grader.models import AnswerKeyRecord, ExamRecord, KeyCorrection, VerifiedKey
from answer_grader.parsing import parse_transcript
from answer_grader.storage import AnswerKeyStore
from answer_grader.utils.logger import logger


class AnswerKeyService:
    """Builds and verifies the answer key of an exam."""

    def __init__(self, store: AnswerKeyStore):
        self.store = store

    def create_exam(self, title: Any) -> ExamRecord:
        """Create a new exam.

        Raises:
            ValidationError: If the title is missing or blank.
        """
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Field 'title' is required", field="title")
        return self.store.create_exam(title.strip())

    def get_exam(self, exam_id: int) -> ExamRecord:
        """Return the exam or raise ExamNotFound."""
        exam = self.store.get_exam(exam_id)
        if exam is None:
            raise ExamNotFound(exam_id)
        return exam

    def ingest_key(self, exam_id: int, raw_text: str) -> List[AnswerKeyRecord]:
        """
        Parse an answer-key transcript and store it as the exam's unverified key.

        All existing keys of the exam, including verified ones, are replaced in
        one atomic unit of work.

        Args:
            exam_id: Exam the key belongs to
            raw_text: OCR transcript of the answer-key sheet

        Returns:
            The new unverified entries in transcript order

        Raises:
            NoAnswersParsed: If no numbered line survives parsing.
            PersistenceFailure: If the store cannot apply the replacement.
        """
        parsed = parse_transcript(raw_text)
        if not parsed:
            logger.warning(f"No answers parsed from answer-key transcript for exam {exam_id}")
            raise NoAnswersParsed(details={"exam_id": exam_id})

        if parsed.discarded_count:
            logger.info(
                f"Discarded {parsed.discarded_count} duplicate answer lines "
                f"from answer key of exam {exam_id}"
            )

        records = self.store.replace_keys(exam_id, parsed.answers)
        logger.info(f"Stored {len(records)} unverified answer keys for exam {exam_id}")
        return records

    def verify_keys(self, exam_id: int, corrections: Sequence[KeyCorrection]) -> None:
        """
        Apply human corrections to the exam's key entries and mark them verified.

        Raises:
            VerificationFailure: If any referenced entry cannot be updated; no
                correction of the batch is applied.
        """
        self.store.apply_corrections(exam_id, list(corrections))
        logger.info(f"Applied {len(corrections)} corrections to exam {exam_id}")

    def verify_payload(self, exam_id: int, payload: Any) -> None:
        """Validate a JSON verification payload and apply it.

        Raises:
            InvalidVerificationPayload: If the payload is not a list of corrections.
        """
        if not isinstance(payload, list):
            raise InvalidVerificationPayload("Verification data must be a JSON list")
        corrections = [KeyCorrection.from_dict(item) for item in payload]
        self.verify_keys(exam_id, corrections)

    def list_verified_keys(self, exam_id: int) -> List[VerifiedKey]:
        """Return the exam's verified keys ordered by question number."""
        return [
            VerifiedKey(
                question_number=record.question_number,
                corrected_text=record.corrected_text or "",
            )
            for record in self.store.verified_keys(exam_id)
        ]
