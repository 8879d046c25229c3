"""Tests for the application error hierarchy."""

from answer_grader.exceptions import (
    ApplicationError,
    ErrorCode,
    ExamNotFound,
    NoAnswersParsed,
    PersistenceFailure,
    ValidationError,
    VerificationFailure,
)


class TestApplicationErrors:
    def test_to_dict(self):
        error = ApplicationError("boom")
        data = error.to_dict()

        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["error"] == error.user_message
        assert data["error_id"].startswith("ERR_")

    def test_original_error_is_recorded(self):
        cause = RuntimeError("connection reset")
        error = PersistenceFailure("write failed", operation="replace_keys", original_error=cause)

        assert error.details["original_error"] == {
            "type": "RuntimeError",
            "message": "connection reset",
        }
        assert error.details["operation"] == "replace_keys"
        assert error.http_status == 500

    def test_no_answers_parsed_is_client_error(self):
        error = NoAnswersParsed()

        assert isinstance(error, ValidationError)
        assert error.http_status == 400
        assert error.error_code == ErrorCode.NO_ANSWERS_PARSED

    def test_verification_failure_names_key(self):
        error = VerificationFailure(17)

        assert isinstance(error, PersistenceFailure)
        assert error.key_id == 17
        assert "17" in error.user_message
        assert error.details["key_id"] == 17

    def test_exam_not_found(self):
        error = ExamNotFound(5)

        assert isinstance(error, PersistenceFailure)
        assert error.http_status == 404
        assert error.exam_id == 5

    def test_str_contains_code_and_id(self):
        error = ValidationError("bad title", field="title")

        assert "[VALIDATION_ERROR]" in str(error)
        assert error.error_id in str(error)
        assert error.details["field"] == "title"
