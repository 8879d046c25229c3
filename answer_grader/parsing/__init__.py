"""Transcript parsing: numbered-line extraction and duplicate removal."""

from .deduplication import DeduplicationResult, deduplicate_answers
from .line_parser import parse_line, parse_lines, parse_transcript

__all__ = [
    "DeduplicationResult",
    "deduplicate_answers",
    "parse_line",
    "parse_lines",
    "parse_transcript",
]
