"""
Custom exceptions for the StaffSphere API.
Every exception carries the HTTP status code it is reported with, so the
application error handlers can turn it into a JSON ``{"message": ...}`` body.
"""


class StaffSphereException(Exception):
    """Base exception for all StaffSphere exceptions."""

    status_code = 500
    default_message = "Unexpected server error."

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        if status_code is not None:
            self.status_code = status_code

    @property
    def message(self) -> str:
        return self.args[0]


class UnauthenticatedException(StaffSphereException):
    """Raised when no credential was presented."""

    status_code = 401
    default_message = "Not authenticated"


class InvalidTokenException(UnauthenticatedException):
    """Raised when a credential is malformed, tampered with or expired."""

    pass


class ForbiddenException(StaffSphereException):
    """Raised when a valid caller lacks the required role."""

    status_code = 403
    default_message = "Access denied."


class NotFoundException(StaffSphereException):
    """Raised when a resource id does not resolve."""

    status_code = 404
    default_message = "Resource not found."


class ConflictException(StaffSphereException):
    """Raised on uniqueness violations (duplicate email, duplicate attendance)."""

    status_code = 400
    default_message = "Resource already exists."


class DuplicateAttendanceException(ConflictException):
    """Raised when an employee already has attendance for the target day."""

    default_message = "Attendance already marked for today."


class ValidationException(StaffSphereException):
    """Raised for missing or invalid input."""

    status_code = 400
    default_message = "Invalid request."


class UnexpectedException(StaffSphereException):
    """Raised for store or runtime failures."""

    default_message = "Server error"
