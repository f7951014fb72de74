# medtrack/errors.py
"""
Error kinds raised by the services and mapped to HTTP responses by
``medtrack.helpers.handles_errors``.
"""


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class DuplicateResource(ApiError):
    status_code = 400
    message = "Resource already exists"


class Unauthorized(ApiError):
    status_code = 401
    message = "Invalid credentials"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class ValidationFailure(ApiError):
    status_code = 400
    message = "Invalid request data"
