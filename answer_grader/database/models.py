"""
Database models for the Answer Grader application.

An ``Exam`` owns its ``AnswerKeyEntry`` rows. Entries are created unverified
from an OCR transcript and later verified with human-corrected text.
"""

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from answer_grader.models import AnswerKeyRecord, ExamRecord

# Initialize SQLAlchemy
db = SQLAlchemy()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Mixin for adding timestamp fields to models."""

    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class Exam(db.Model, TimestampMixin):
    """Exam model; the scope of an answer key."""

    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)

    answer_keys = relationship(
        "AnswerKeyEntry", back_populates="exam", cascade="all, delete-orphan"
    )

    def to_record(self) -> ExamRecord:
        return ExamRecord(id=self.id, title=self.title)


class AnswerKeyEntry(db.Model, TimestampMixin):
    """One answer of an exam's key, as read by OCR and later verified."""

    __tablename__ = "answer_keys"
    __table_args__ = (
        Index("idx_answer_key_exam_question", "exam_id", "question_number"),
        Index("idx_answer_key_exam_verified", "exam_id", "is_verified"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=False)
    question_number = Column(BigInteger, nullable=False)
    raw_text = Column(Text, nullable=False, default="")
    corrected_text = Column(Text)
    is_verified = Column(Boolean, default=False, nullable=False)

    exam = relationship("Exam", back_populates="answer_keys")

    def to_record(self) -> AnswerKeyRecord:
        return AnswerKeyRecord(
            id=self.id,
            exam_id=self.exam_id,
            question_number=self.question_number,
            raw_text=self.raw_text,
            corrected_text=self.corrected_text,
            verified=bool(self.is_verified),
        )

    def __repr__(self):
        return (
            f"<AnswerKeyEntry {self.id} exam={self.exam_id} "
            f"q={self.question_number} verified={self.is_verified}>"
        )
