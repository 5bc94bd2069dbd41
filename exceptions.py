"""
Application error taxonomy. Handlers in main.py turn these into
{success: false, message, description, data} responses.
"""
from typing import Any, Optional


class AppError(Exception):
    status_code = 500
    error_type = "INTERNAL_ERROR"

    def __init__(self, message: str, description: Optional[str] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.description = description
        self.data = data


class ValidationError(AppError):
    status_code = 422
    error_type = "VALIDATION_ERROR"


class NotFoundError(AppError):
    status_code = 404
    error_type = "NOT_FOUND"


class InternalError(AppError):
    status_code = 500
    error_type = "INTERNAL_ERROR"


class ExternalServiceError(InternalError):
    """The file-storage provider rejected the call or could not be reached."""


class UnauthorizedError(AppError):
    status_code = 401
    error_type = "UNAUTHORIZED"


class ForbiddenError(AppError):
    status_code = 403
    error_type = "FORBIDDEN"
