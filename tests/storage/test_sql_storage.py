"""Tests for the SQLAlchemy answer-key store."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from answer_grader.database import AnswerKeyEntry, Exam, db
from answer_grader.exceptions import ExamNotFound, PersistenceFailure, VerificationFailure
from answer_grader.models import KeyCorrection, ParsedAnswer


@pytest.fixture
def exam(sql_store):
    return sql_store.create_exam("Geography Quiz")


def _entries(exam_id):
    return AnswerKeyEntry.query.filter_by(exam_id=exam_id).order_by(AnswerKeyEntry.id).all()


class TestSQLAnswerKeyStore:
    def test_create_and_get_exam(self, sql_store, exam):
        assert exam.id is not None
        assert sql_store.get_exam(exam.id) == exam
        assert db.session.get(Exam, exam.id).title == "Geography Quiz"

    def test_get_missing_exam(self, sql_store):
        assert sql_store.get_exam(12345) is None

    def test_replace_keys_inserts_unverified_entries(self, sql_store, exam):
        records = sql_store.replace_keys(
            exam.id, [ParsedAnswer(2, "London"), ParsedAnswer(1, "Paris")]
        )

        assert [(r.question_number, r.raw_text) for r in records] == [(2, "London"), (1, "Paris")]
        assert all(r.id is not None for r in records)
        entries = _entries(exam.id)
        assert [e.id for e in entries] == [r.id for r in records]
        assert all(e.is_verified is False and e.corrected_text is None for e in entries)

    def test_replace_keys_removes_verified_entries_too(self, sql_store, exam):
        old = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Paris")])
        sql_store.apply_corrections(exam.id, [KeyCorrection(old[0].id, 1, "Paris")])

        new = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Rome")])

        assert [e.id for e in _entries(exam.id)] == [new[0].id]
        assert sql_store.verified_keys(exam.id) == []

    def test_replace_keys_for_missing_exam(self, sql_store):
        with pytest.raises(ExamNotFound):
            sql_store.replace_keys(999, [ParsedAnswer(1, "Paris")])

    def test_failed_commit_keeps_previous_keys(self, sql_store, exam):
        old = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Paris")])

        with patch.object(db.session, "commit", side_effect=SQLAlchemyError("disk full")):
            with pytest.raises(PersistenceFailure) as exc_info:
                sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Rome"), ParsedAnswer(2, "Oslo")])

        assert exc_info.value.operation == "replace_keys"
        assert [(e.id, e.raw_text) for e in _entries(exam.id)] == [(old[0].id, "Paris")]

    def test_apply_corrections(self, sql_store, exam):
        records = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Pariss"), ParsedAnswer(2, "Oslo")])

        sql_store.apply_corrections(exam.id, [KeyCorrection(records[0].id, 3, "Paris")])

        verified = sql_store.verified_keys(exam.id)
        assert len(verified) == 1
        assert (verified[0].question_number, verified[0].corrected_text) == (3, "Paris")
        assert verified[0].raw_text == "Pariss"
        assert verified[0].verified is True

    def test_failed_batch_is_rolled_back(self, sql_store, exam):
        records = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Paris")])

        with pytest.raises(VerificationFailure) as exc_info:
            sql_store.apply_corrections(
                exam.id,
                [KeyCorrection(records[0].id, 1, "Paris"), KeyCorrection(777, 2, "x")],
            )

        assert exc_info.value.key_id == 777
        (entry,) = _entries(exam.id)
        assert entry.is_verified is False
        assert entry.corrected_text is None

    def test_flush_failure_becomes_verification_failure(self, sql_store, exam):
        records = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Pariss"), ParsedAnswer(2, "Oslo")])

        with patch.object(db.session, "flush", side_effect=SQLAlchemyError("constraint failed")):
            with pytest.raises(VerificationFailure) as exc_info:
                sql_store.apply_corrections(
                    exam.id,
                    [
                        KeyCorrection(records[0].id, 1, "Paris"),
                        KeyCorrection(records[1].id, 2, "Oslo"),
                    ],
                )

        assert exc_info.value.key_id == records[0].id
        assert isinstance(exc_info.value.original_error, SQLAlchemyError)
        entries = _entries(exam.id)
        assert [(e.is_verified, e.corrected_text) for e in entries] == [(False, None), (False, None)]
        assert sql_store.verified_keys(exam.id) == []

    def test_unexpected_error_rolls_back(self, sql_store, exam):
        old = sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Paris")])

        with patch.object(db.session, "flush", side_effect=OverflowError("int too large")):
            with pytest.raises(OverflowError):
                sql_store.replace_keys(exam.id, [ParsedAnswer(1, "Rome")])

        assert [(e.id, e.raw_text) for e in _entries(exam.id)] == [(old[0].id, "Paris")]

    def test_key_scoped_to_exam(self, sql_store, exam):
        other = sql_store.create_exam("History")
        foreign = sql_store.replace_keys(other.id, [ParsedAnswer(1, "1945")])

        with pytest.raises(VerificationFailure):
            sql_store.apply_corrections(exam.id, [KeyCorrection(foreign[0].id, 1, "1945")])

        assert sql_store.verified_keys(other.id) == []

    def test_verified_keys_ordering(self, sql_store, exam):
        records = sql_store.replace_keys(
            exam.id, [ParsedAnswer(3, "c"), ParsedAnswer(1, "a"), ParsedAnswer(2, "b")]
        )
        sql_store.apply_corrections(
            exam.id, [KeyCorrection(r.id, r.question_number, r.raw_text) for r in records]
        )

        assert [k.question_number for k in sql_store.verified_keys(exam.id)] == [1, 2, 3]

    def test_large_question_number_round_trips(self, sql_store, exam):
        big = 2**40
        sql_store.replace_keys(exam.id, [ParsedAnswer(big, "x")])
        assert _entries(exam.id)[0].question_number == big
