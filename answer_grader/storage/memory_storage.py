"""In-process answer-key store with the same atomicity as the SQL store."""

import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from answer_grader.exceptions import ExamNotFound, VerificationFailure
from answer_grader.models import AnswerKeyRecord, ExamRecord, KeyCorrection, ParsedAnswer
from answer_grader.storage.base_storage import AnswerKeyStore
from answer_grader.utils.logger import logger


class InMemoryAnswerKeyStore(AnswerKeyStore):
    """Dictionary-backed store.

    Mutations build a new key table and swap it in under the lock, so a
    failed batch leaves no partial writes and readers never see a half-applied
    replace.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._exam_ids = itertools.count(1)
        self._key_ids = itertools.count(1)
        self._exams: Dict[int, ExamRecord] = {}
        self._keys: Dict[int, AnswerKeyRecord] = {}

    def create_exam(self, title: str) -> ExamRecord:
        with self._lock:
            exam = ExamRecord(id=next(self._exam_ids), title=title)
            self._exams[exam.id] = exam
        return exam

    def get_exam(self, exam_id: int) -> Optional[ExamRecord]:
        with self._lock:
            return self._exams.get(exam_id)

    def replace_keys(
        self, exam_id: int, answers: Sequence[ParsedAnswer]
    ) -> List[AnswerKeyRecord]:
        with self._lock:
            if exam_id not in self._exams:
                raise ExamNotFound(exam_id)

            keys = {
                key_id: record
                for key_id, record in self._keys.items()
                if record.exam_id != exam_id
            }
            records = []
            for answer in answers:
                record = AnswerKeyRecord(
                    id=next(self._key_ids),
                    exam_id=exam_id,
                    question_number=answer.question_number,
                    raw_text=answer.text,
                )
                keys[record.id] = record
                records.append(record)

            removed = len(self._keys) - (len(keys) - len(records))
            self._keys = keys

        logger.info(
            f"Replaced answer keys for exam {exam_id}: "
            f"{removed} removed, {len(records)} inserted"
        )
        return records

    def apply_corrections(
        self, exam_id: int, corrections: Sequence[KeyCorrection]
    ) -> None:
        with self._lock:
            keys = dict(self._keys)
            for correction in corrections:
                record = keys.get(correction.key_id)
                if record is None or record.exam_id != exam_id:
                    raise VerificationFailure(correction.key_id)
                keys[correction.key_id] = replace(
                    record,
                    question_number=correction.question_number,
                    corrected_text=correction.corrected_text,
                    verified=True,
                )
            self._keys = keys

    def verified_keys(self, exam_id: int) -> List[AnswerKeyRecord]:
        with self._lock:
            records = [
                record
                for record in self._keys.values()
                if record.exam_id == exam_id and record.verified
            ]
        return sorted(records, key=lambda record: (record.question_number, record.id))

    def all_keys(self, exam_id: int) -> List[AnswerKeyRecord]:
        """Every entry of the exam, verified or not, in insertion order."""
        with self._lock:
            return [record for record in self._keys.values() if record.exam_id == exam_id]
