"""
Numbered Answer Line Parser

Turns a raw OCR transcript into ordered ``ParsedAnswer`` records. Each line is
read with the grammar::

    line    := ws* number ws* "."? ws* answer
    number  := [0-9]+
    answer  := remainder of the line, surrounding whitespace trimmed

Lines that are blank, do not start with a number, or carry a number larger
than ``MAX_QUESTION_NUMBER`` are skipped silently. A line holding only a number
yields an empty answer. Case and inner punctuation of the answer are kept.

Example Usage:
    ```python
    answers = parse_lines("1. Paris\\n2) noise\\n3 London")
    # [ParsedAnswer(1, "Paris"), ParsedAnswer(2, ") noise"), ParsedAnswer(3, "London")]
    ```
"""

import re
from typing import List, Optional

from answer_grader.constants import MAX_QUESTION_NUMBER
from answer_grader.models import ParsedAnswer
from answer_grader.parsing.deduplication import DeduplicationResult, deduplicate_answers
from answer_grader.utils.logger import logger

# ASCII digits only; OCR sometimes emits other Unicode digits inside noise.
NUMBERED_LINE_PATTERN = re.compile(r"^\s*([0-9]+)\s*\.?\s*(.*)$")


def parse_line(line: str) -> Optional[ParsedAnswer]:
    """Parse a single transcript line, or return None when it is not a numbered answer."""
    line = line.strip()
    if not line:
        return None

    match = NUMBERED_LINE_PATTERN.match(line)
    if not match:
        return None

    question_number = int(match.group(1))
    if question_number > MAX_QUESTION_NUMBER:
        logger.debug(f"Skipping line with out-of-range question number: {line[:40]!r}")
        return None

    return ParsedAnswer(question_number=question_number, text=match.group(2).strip())


def parse_lines(raw_text: str) -> List[ParsedAnswer]:
    """Parse every numbered line of a transcript, in input order."""
    answers = []
    # Only "\n" separates lines; parse_line strips a trailing "\r"
    for line in (raw_text or "").split("\n"):
        parsed = parse_line(line)
        if parsed is not None:
            answers.append(parsed)
    return answers


def parse_transcript(raw_text: str) -> DeduplicationResult:
    """Parse a transcript and keep one answer per question number."""
    return deduplicate_answers(parse_lines(raw_text))
