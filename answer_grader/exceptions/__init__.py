"""Custom exception classes for the Answer Grader application."""

from .application_errors import (
    ApplicationError,
    ConfigurationError,
    ErrorCode,
    ExamNotFound,
    InvalidVerificationPayload,
    NoAnswersParsed,
    OCRServiceError,
    PersistenceFailure,
    ValidationError,
    VerificationFailure,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ErrorCode",
    "ExamNotFound",
    "InvalidVerificationPayload",
    "NoAnswersParsed",
    "OCRServiceError",
    "PersistenceFailure",
    "ValidationError",
    "VerificationFailure",
]
