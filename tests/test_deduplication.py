"""Tests for first-occurrence-wins deduplication."""

from answer_grader.models import ParsedAnswer
from answer_grader.parsing import deduplicate_answers, parse_transcript


class TestDeduplicateAnswers:
    def test_first_occurrence_wins(self):
        result = deduplicate_answers(
            [
                ParsedAnswer(1, "Paris"),
                ParsedAnswer(2, "London"),
                ParsedAnswer(1, "Wrong"),
                ParsedAnswer(2, "Also wrong"),
                ParsedAnswer(3, "Rome"),
            ]
        )

        assert result.answers == [
            ParsedAnswer(1, "Paris"),
            ParsedAnswer(2, "London"),
            ParsedAnswer(3, "Rome"),
        ]
        assert result.discarded == [ParsedAnswer(1, "Wrong"), ParsedAnswer(2, "Also wrong")]
        assert result.discarded_count == 2

    def test_exactly_one_entry_per_number(self):
        answers = [ParsedAnswer(n % 4, f"text {n}") for n in range(20)]
        result = deduplicate_answers(answers)

        numbers = [answer.question_number for answer in result.answers]
        assert sorted(numbers) == [0, 1, 2, 3]
        assert len(numbers) == len(set(numbers))
        for answer in result.answers:
            assert answer.text == f"text {answer.question_number}"

    def test_order_follows_first_appearance(self):
        result = deduplicate_answers(
            [ParsedAnswer(5, "e"), ParsedAnswer(2, "b"), ParsedAnswer(5, "x"), ParsedAnswer(1, "a")]
        )
        assert [a.question_number for a in result.answers] == [5, 2, 1]

    def test_unique_input_is_unchanged(self):
        answers = [ParsedAnswer(1, "a"), ParsedAnswer(2, "b")]
        result = deduplicate_answers(answers)
        assert result.answers == answers
        assert result.discarded == []

    def test_empty_input_is_falsy(self):
        result = deduplicate_answers([])
        assert not result
        assert result.answers == []
        assert result.discarded_count == 0

    def test_accepts_any_iterable(self):
        result = deduplicate_answers(iter([ParsedAnswer(1, "a"), ParsedAnswer(1, "b")]))
        assert result.answers == [ParsedAnswer(1, "a")]


class TestParseTranscript:
    def test_duplicate_line_of_key_is_dropped(self):
        result = parse_transcript("1. Paris\n2. London\n1. Wrong")
        assert result.answers == [ParsedAnswer(1, "Paris"), ParsedAnswer(2, "London")]
        assert result.discarded == [ParsedAnswer(1, "Wrong")]

    def test_noise_only_transcript(self):
        assert not parse_transcript("scan failed\n\n---")
