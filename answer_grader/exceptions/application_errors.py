"""Application-specific exception classes with standardized error handling."""

import traceback
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for consistent error handling."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_ANSWERS_PARSED = "NO_ANSWERS_PARSED"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    VERIFICATION_ERROR = "VERIFICATION_ERROR"
    OCR_ERROR = "OCR_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApplicationError(Exception):
    """Base application error class.

    Carries a technical message for logs, a user-friendly message for API
    responses, a standardized error code and the HTTP status the web layer
    should answer with.
    """

    http_status = 500

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize application error.

        Args:
            message: Technical error message for developers
            error_code: Standardized error code
            user_message: User-friendly error message
            details: Additional error details
            original_error: Original exception that caused this error
        """
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.user_message = user_message or self._get_default_user_message()
        self.details = details or {}
        self.original_error = original_error

        self.timestamp = datetime.now(timezone.utc)
        self.error_id = f"ERR_{uuid.uuid4().hex[:8].upper()}"
        self.traceback_info = traceback.format_exc() if original_error else None

        if original_error:
            self.details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }

    def _get_default_user_message(self) -> str:
        """Get default user-friendly message based on error code."""
        user_messages = {
            ErrorCode.VALIDATION_ERROR: "Please check your input and try again.",
            ErrorCode.NO_ANSWERS_PARSED: "No numbered answers could be read from the document.",
            ErrorCode.NOT_FOUND: "The requested resource was not found.",
            ErrorCode.PERSISTENCE_ERROR: "The answer keys could not be saved or loaded. Please try again.",
            ErrorCode.VERIFICATION_ERROR: "The answer keys could not be verified.",
            ErrorCode.OCR_ERROR: "The image could not be processed.",
            ErrorCode.CONFIGURATION_ERROR: "The service is misconfigured.",
            ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again later.",
        }
        return user_messages.get(
            self.error_code, "An error occurred. Please try again."
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging and API responses."""
        return {
            "error": self.user_message,
            "error_code": self.error_code.value,
            "error_id": self.error_id,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message} (ID: {self.error_id})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code={self.error_code}, "
            f"error_id='{self.error_id}'"
            f")"
        )


class ValidationError(ApplicationError):
    """Client-side input error; no state has been changed."""

    http_status = 400

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.VALIDATION_ERROR)
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)
        self.field = field
        if field:
            self.details["field"] = field


class NoAnswersParsed(ValidationError):
    """Raised when an answer-key transcript yields no numbered lines."""

    def __init__(self, message: str = "Transcript contains no numbered answer lines", **kwargs):
        kwargs.setdefault("error_code", ErrorCode.NO_ANSWERS_PARSED)
        kwargs.setdefault(
            "user_message", "No numbered answers could be parsed from the answer key."
        )
        super().__init__(message, **kwargs)


class InvalidVerificationPayload(ValidationError):
    """Raised when a verification batch is malformed."""


class ConfigurationError(ApplicationError):
    """Raised when environment configuration is invalid."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.CONFIGURATION_ERROR)
        super().__init__(message, **kwargs)
        self.setting = setting
        if setting:
            self.details["setting"] = setting


class PersistenceFailure(ApplicationError):
    """Server-side storage failure. The unit of work has been rolled back."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.PERSISTENCE_ERROR)
        super().__init__(message, **kwargs)
        self.operation = operation
        if operation:
            self.details["operation"] = operation


class ExamNotFound(PersistenceFailure):
    """Raised when an operation references an exam that does not exist."""

    http_status = 404

    def __init__(self, exam_id: int, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.NOT_FOUND)
        kwargs.setdefault("user_message", f"Exam {exam_id} was not found.")
        super().__init__(f"Exam {exam_id} does not exist", **kwargs)
        self.exam_id = exam_id
        self.details["exam_id"] = exam_id


class VerificationFailure(PersistenceFailure):
    """Raised when one correction of a verification batch cannot be applied."""

    def __init__(self, key_id: int, reason: str = "answer key not found for exam", **kwargs):
        kwargs.setdefault("error_code", ErrorCode.VERIFICATION_ERROR)
        kwargs.setdefault("user_message", f"Failed to verify answer key ID {key_id}.")
        kwargs.setdefault("operation", "apply_corrections")
        super().__init__(f"Cannot verify answer key {key_id}: {reason}", **kwargs)
        self.key_id = key_id
        self.details["key_id"] = key_id


class OCRServiceError(ApplicationError):
    """Exception raised for errors in the OCR collaborator."""

    http_status = 502

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.OCR_ERROR)
        super().__init__(message, **kwargs)
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code
