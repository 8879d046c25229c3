"""
API Error Handling

Translates application errors into JSON responses. Every failure is scoped
to the request that raised it.
"""

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from answer_grader.exceptions import ApplicationError
from answer_grader.utils.logger import logger


def register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers on the application."""

    @app.errorhandler(ApplicationError)
    def handle_application_error(error: ApplicationError):
        if error.http_status >= 500:
            logger.error(f"{request.method} {request.path} failed: {error}")
        else:
            logger.warning(f"{request.method} {request.path} rejected: {error}")
        return jsonify(error.to_dict()), error.http_status

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return jsonify({"error": error.description, "error_code": error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {error}")
        return (
            jsonify(
                {
                    "error": "An unexpected error occurred. Please try again later.",
                    "error_code": "INTERNAL_ERROR",
                }
            ),
            500,
        )
