"""
SQLAlchemy-backed answer-key store.

Uses the Flask-SQLAlchemy scoped session, so calls must run inside an
application context. Each mutating call commits once at the end or rolls back.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from answer_grader.database.models import AnswerKeyEntry, Exam, db
from answer_grader.exceptions import (
    ApplicationError,
    ExamNotFound,
    PersistenceFailure,
    VerificationFailure,
)
from answer_grader.models import AnswerKeyRecord, ExamRecord, KeyCorrection, ParsedAnswer
from answer_grader.storage.base_storage import AnswerKeyStore
from answer_grader.utils.logger import logger


class SQLAnswerKeyStore(AnswerKeyStore):
    """Answer-key store over the application's relational database."""

    @contextmanager
    def _unit_of_work(self, operation: str) -> Iterator[Session]:
        session = db.session
        try:
            yield session
            session.commit()
        except ApplicationError:
            session.rollback()
            logger.error(f"Rolled back {operation}")
            raise
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error during {operation}, rolled back: {str(e)}")
            raise PersistenceFailure(
                f"Database error during {operation}: {str(e)}",
                operation=operation,
                original_error=e,
            ) from e
        except Exception:
            session.rollback()
            logger.error(f"Unexpected error during {operation}, rolled back")
            raise

    def create_exam(self, title: str) -> ExamRecord:
        with self._unit_of_work("create_exam") as session:
            exam = Exam(title=title)
            session.add(exam)
            session.flush()
            record = exam.to_record()
        logger.info(f"Created exam {record.id} ({record.title!r})")
        return record

    def get_exam(self, exam_id: int) -> Optional[ExamRecord]:
        try:
            exam = db.session.get(Exam, exam_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise PersistenceFailure(
                f"Failed to load exam {exam_id}: {str(e)}",
                operation="get_exam",
                original_error=e,
            ) from e
        return exam.to_record() if exam else None

    def replace_keys(
        self, exam_id: int, answers: Sequence[ParsedAnswer]
    ) -> List[AnswerKeyRecord]:
        with self._unit_of_work("replace_keys") as session:
            if session.get(Exam, exam_id) is None:
                raise ExamNotFound(exam_id)

            deleted = AnswerKeyEntry.query.filter_by(exam_id=exam_id).delete(
                synchronize_session="fetch"
            )
            entries = [
                AnswerKeyEntry(
                    exam_id=exam_id,
                    question_number=answer.question_number,
                    raw_text=answer.text,
                    is_verified=False,
                )
                for answer in answers
            ]
            session.add_all(entries)
            session.flush()
            records = [entry.to_record() for entry in entries]

        logger.info(
            f"Replaced answer keys for exam {exam_id}: "
            f"{deleted} removed, {len(records)} inserted"
        )
        return records

    def apply_corrections(
        self, exam_id: int, corrections: Sequence[KeyCorrection]
    ) -> None:
        with self._unit_of_work("apply_corrections") as session:
            for correction in corrections:
                entry = AnswerKeyEntry.query.filter_by(
                    id=correction.key_id, exam_id=exam_id
                ).one_or_none()
                if entry is None:
                    raise VerificationFailure(correction.key_id)

                entry.corrected_text = correction.corrected_text
                entry.question_number = correction.question_number
                entry.is_verified = True
                try:
                    session.flush()
                except SQLAlchemyError as e:
                    raise VerificationFailure(
                        correction.key_id, reason=str(e), original_error=e
                    ) from e

        logger.info(f"Verified {len(corrections)} answer keys for exam {exam_id}")

    def verified_keys(self, exam_id: int) -> List[AnswerKeyRecord]:
        try:
            entries = (
                AnswerKeyEntry.query.filter_by(exam_id=exam_id, is_verified=True)
                .order_by(AnswerKeyEntry.question_number, AnswerKeyEntry.id)
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to read verified keys for exam {exam_id}: {str(e)}")
            raise PersistenceFailure(
                f"Failed to read verified keys for exam {exam_id}: {str(e)}",
                operation="verified_keys",
                original_error=e,
            ) from e
        return [entry.to_record() for entry in entries]
