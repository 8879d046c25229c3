"""
Application Constants

This module contains hard-coded strings and configuration constants
used throughout the application.
"""

# Environment variable names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_DEBUG = "DEBUG"
ENV_DATABASE_URL = "DATABASE_URL"
ENV_SECRET_KEY = "SECRET_KEY"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_CORS_ORIGINS = "CORS_ORIGINS"
ENV_VISION_API_KEY = "GOOGLE_VISION_API_KEY"
ENV_VISION_API_URL = "GOOGLE_VISION_API_URL"
ENV_OCR_TIMEOUT = "OCR_TIMEOUT"
ENV_MAX_UPLOAD_MB = "MAX_UPLOAD_MB"

# Default values
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = "8080"
DEFAULT_DEBUG = "False"
DEFAULT_DATABASE_URL = "sqlite:///answer_grader.db"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = "*"
DEFAULT_VISION_API_URL = "https://vision.googleapis.com/v1/images:annotate"
DEFAULT_OCR_TIMEOUT = "30"
DEFAULT_MAX_UPLOAD_MB = "10"
DEFAULT_ENCODING = "utf-8"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Directory names
DIR_LOGS = "logs"

# Grading
SIMILARITY_THRESHOLD = 0.85
JARO_WINKLER_PREFIX_WEIGHT = 0.1

# Largest question number accepted by the line parser (signed 64-bit range)
MAX_QUESTION_NUMBER = 2**63 - 1

# Correction status labels
STATUS_CORRECT = "Correct"
STATUS_INCORRECT = "Incorrect"
STATUS_KEY_MISSING = "KeyMissing"

# User-facing messages
MSG_NO_ANSWERS_PARSED = "No numbered answers could be parsed from the answer key."
MSG_NO_STUDENT_ANSWERS = "No answers were detected on the student sheet."
MSG_KEYS_VERIFIED = "All answer keys were verified successfully."
MSG_SUMMARY_TEMPLATE = "Correct: {correct} of {total} questions"

# Upload form fields
FORM_FIELD_IMAGE = "image"
