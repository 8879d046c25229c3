"""First-occurrence-wins deduplication of parsed answers."""

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from answer_grader.models import ParsedAnswer
from answer_grader.utils.logger import logger


@dataclass
class DeduplicationResult:
    answers: List[ParsedAnswer] = field(default_factory=list)
    discarded: List[ParsedAnswer] = field(default_factory=list)

    @property
    def discarded_count(self) -> int:
        return len(self.discarded)

    def __bool__(self) -> bool:
        return bool(self.answers)


def deduplicate_answers(answers: Iterable[ParsedAnswer]) -> DeduplicationResult:
    """
    Keep the first answer for each question number, preserving input order.

    Later answers for an already seen number are not an error; they are
    collected in ``discarded`` and logged so callers can report them.
    """
    result = DeduplicationResult()
    seen_numbers: Set[int] = set()

    for answer in answers:
        if answer.question_number in seen_numbers:
            logger.warning(
                f"Ignoring duplicate question number {answer.question_number}"
            )
            result.discarded.append(answer)
            continue
        seen_numbers.add(answer.question_number)
        result.answers.append(answer)

    return result
