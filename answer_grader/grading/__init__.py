"""Fuzzy answer comparison."""

from .answer_matcher import AnswerMatcher, compare_answers, is_correct_score

__all__ = ["AnswerMatcher", "compare_answers", "is_correct_score"]
