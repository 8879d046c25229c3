"""
Student Correction Workflow

Grades an OCR transcript of a student's answer sheet against the verified
answer key of an exam. Never changes persisted state.
"""

from typing import Dict, Optional

from answer_grader.constants import MSG_NO_STUDENT_ANSWERS, MSG_SUMMARY_TEMPLATE
from answer_grader.grading import AnswerMatcher
from answer_grader.models import (
    CorrectionReport,
    CorrectionResult,
    CorrectionStatus,
    CorrectionSummary,
)
from answer_grader.parsing import parse_transcript
from answer_grader.storage import AnswerKeyStore
from answer_grader.utils.logger import logger


class CorrectionService:
    """Scores student transcripts against verified answer keys."""

    def __init__(self, store: AnswerKeyStore, matcher: Optional[AnswerMatcher] = None):
        self.store = store
        self.matcher = matcher or AnswerMatcher()

    def _key_map(self, exam_id: int) -> Dict[int, str]:
        """Map question number to corrected text; first verified entry wins."""
        key_map: Dict[int, str] = {}
        for record in self.store.verified_keys(exam_id):
            if record.question_number in key_map:
                logger.warning(
                    f"Exam {exam_id} has several verified keys for question "
                    f"{record.question_number}; skipping key {record.id}"
                )
                continue
            key_map[record.question_number] = record.corrected_text or ""
        return key_map

    def check_answers(self, exam_id: int, raw_text: str) -> CorrectionReport:
        """
        Grade a student transcript.

        Args:
            exam_id: Exam whose verified key is used
            raw_text: OCR transcript of the student's sheet

        Returns:
            CorrectionReport with one result per unique student question, in
            transcript order, and the summary

        Raises:
            PersistenceFailure: If the verified keys cannot be read.
        """
        parsed = parse_transcript(raw_text)
        if not parsed:
            logger.info(f"No student answers detected for exam {exam_id}")
            return CorrectionReport(
                summary=CorrectionSummary(
                    total_correct=0, total_questions=0, text=MSG_NO_STUDENT_ANSWERS
                ),
                details=[],
            )

        key_map = self._key_map(exam_id)

        details = []
        for answer in parsed.answers:
            key_answer = key_map.get(answer.question_number)
            if key_answer is None:
                logger.info(
                    f"No verified key for question {answer.question_number} of exam {exam_id}"
                )
                details.append(
                    CorrectionResult(
                        question_number=answer.question_number,
                        student_answer=answer.text,
                        is_correct=False,
                        score=0.0,
                        status=CorrectionStatus.KEY_MISSING,
                    )
                )
                continue

            is_correct, score = self.matcher.compare(key_answer, answer.text)
            details.append(
                CorrectionResult(
                    question_number=answer.question_number,
                    student_answer=answer.text,
                    is_correct=is_correct,
                    score=score,
                    status=CorrectionStatus.CORRECT if is_correct else CorrectionStatus.INCORRECT,
                )
            )

        total_correct = sum(1 for result in details if result.is_correct)
        # Fall back to the number of graded answers when the exam has no verified key
        total_questions = len(key_map) or len(details)

        logger.info(
            f"Checked {len(details)} answers for exam {exam_id}: "
            f"{total_correct}/{total_questions} correct"
        )
        return CorrectionReport(
            summary=CorrectionSummary(
                total_correct=total_correct,
                total_questions=total_questions,
                text=MSG_SUMMARY_TEMPLATE.format(correct=total_correct, total=total_questions),
            ),
            details=details,
        )
