"""
Error handlers for the Exam Quiz API.

Provides:
- Custom exception classes
- The uniform ``{"status": "OK" | "NOK", ...}`` envelope
- Flask error handlers
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException


class ExamQuizError(Exception):
    """Base exception class for the service."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        error: Optional[str] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.error = error
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to the NOK envelope."""
        payload = {
            'status': 'NOK',
            'message': self.message,
        }
        if self.error:
            payload['error'] = self.error
        return payload


class NotFoundError(ExamQuizError):
    """Referenced learner, question or subject does not exist."""

    def __init__(self, message: str = 'Resource not found'):
        super().__init__(message=message, code='NOT_FOUND', status_code=404)


class ValidationError(ExamQuizError):
    """Required input is missing or malformed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        self.errors = errors or {}
        super().__init__(message=message, code='VALIDATION_ERROR', status_code=400)


class UpstreamError(ExamQuizError):
    """The persistence layer failed."""

    def __init__(self, message: str = 'Database error', error: Optional[str] = None):
        super().__init__(message=message, code='UPSTREAM_ERROR', status_code=500, error=error)


def error_response(message: str, status_code: int = 400, error: Optional[str] = None) -> tuple:
    """Create a NOK envelope response."""
    response = {'status': 'NOK', 'message': message}
    if error:
        response['error'] = error
    return jsonify(response), status_code


def success_response(**payload: Any) -> dict:
    """Create an OK envelope; keyword arguments become top-level keys."""
    response = {'status': 'OK'}
    response.update(payload)
    return response


def register_error_handlers(app):
    """Register error handlers with the Flask app."""

    @app.errorhandler(ExamQuizError)
    def handle_examquiz_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message} ({error.error})")
        else:
            current_app.logger.warning(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if request.path.startswith('/api/'):
            return error_response(error.description or error.name, error.code or 500)
        return error

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception('Internal server error')
        return error_response('Internal server error', 500, str(error))
