from typing import Tuple

from Levenshtein import jaro_winkler

from answer_grader.constants import JARO_WINKLER_PREFIX_WEIGHT, SIMILARITY_THRESHOLD


def is_correct_score(score: float) -> bool:
    """A score counts as correct only when strictly above the threshold."""
    return score > SIMILARITY_THRESHOLD


class AnswerMatcher:
    """Case-insensitive Jaro-Winkler comparison of key and student answers.

    Only case is folded. Whitespace and punctuation are compared as-is, so
    ``"Paris "`` and ``"Paris"`` do not score 1.0.
    """

    def similarity(self, key_answer: str, student_answer: str) -> float:
        """Return the Jaro-Winkler similarity of the case-folded answers in [0, 1]."""
        score = jaro_winkler(
            key_answer.casefold(),
            student_answer.casefold(),
            prefix_weight=JARO_WINKLER_PREFIX_WEIGHT,
        )
        return min(1.0, max(0.0, float(score)))

    def compare(self, key_answer: str, student_answer: str) -> Tuple[bool, float]:
        """Compare two answers.

        Returns:
            Tuple of (is_correct, score)
        """
        score = self.similarity(key_answer, student_answer)
        return is_correct_score(score), score


def compare_answers(key_answer: str, student_answer: str) -> Tuple[bool, float]:
    """Main function to compare a student answer against the key answer."""
    matcher = AnswerMatcher()
    return matcher.compare(key_answer, student_answer)
