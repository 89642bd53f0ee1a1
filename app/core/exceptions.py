"""
Service error hierarchy.

Services raise these; the handlers registered in app.main turn them into
JSON responses, so routes never build error responses themselves.
"""


class ServiceError(Exception):
    """Base error for every failure a service reports to its caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or malformed field, or a value outside its enum."""

    status_code = 400


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds the configured size limit."""

    status_code = 413


class NotFoundError(ServiceError):
    """Identifier does not resolve to a stored record."""

    status_code = 404


class ConflictError(ServiceError):
    """A record with the same natural key already exists."""

    status_code = 409


__all__ = [
    "ConflictError",
    "FileTooLargeError",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
]
