"""
Storage interface for exams and answer keys.

Every mutating call is one atomic unit of work: it either fully applies or
leaves the store exactly as it was before the call.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from answer_grader.models import AnswerKeyRecord, ExamRecord, KeyCorrection, ParsedAnswer


class AnswerKeyStore(ABC):
    """Persistence capability consumed by the workflows."""

    @abstractmethod
    def create_exam(self, title: str) -> ExamRecord:
        """Create an exam and return it with its assigned id."""

    @abstractmethod
    def get_exam(self, exam_id: int) -> Optional[ExamRecord]:
        """Return the exam, or None when it does not exist."""

    @abstractmethod
    def replace_keys(
        self, exam_id: int, answers: Sequence[ParsedAnswer]
    ) -> List[AnswerKeyRecord]:
        """
        Delete every answer key of the exam, verified or not, and insert one
        unverified entry per answer, in the given order.

        Raises:
            ExamNotFound: If the exam does not exist.
            PersistenceFailure: If the unit of work cannot be committed.
        """

    @abstractmethod
    def apply_corrections(
        self, exam_id: int, corrections: Sequence[KeyCorrection]
    ) -> None:
        """
        Set corrected text and question number on each referenced entry of the
        exam and mark it verified.

        Raises:
            VerificationFailure: If an entry is missing or belongs to another
                exam. Nothing from the batch is applied.
            PersistenceFailure: If the unit of work cannot be committed.
        """

    @abstractmethod
    def verified_keys(self, exam_id: int) -> List[AnswerKeyRecord]:
        """Return verified entries of the exam ordered by question number, then id."""
