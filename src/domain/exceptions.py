"""
Application error hierarchy.

Every error carries the HTTP status it maps to and a client-facing
message.  The API layer renders them into the standard
``{"success": false, "message": ...}`` envelope.
"""


class AttendanceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(AttendanceError):
    status_code = 400
    default_message = "Invalid request"


class AuthenticationRequired(AttendanceError):
    status_code = 401
    default_message = "Authentication required"


class InvalidToken(AttendanceError):
    status_code = 401
    default_message = "Invalid or expired token"


class PermissionDenied(AttendanceError):
    status_code = 403
    default_message = "Manager access required"


class NotFound(AttendanceError):
    status_code = 404
    default_message = "Resource not found"


class Conflict(AttendanceError):
    status_code = 409
    default_message = "Conflict"


class ReportGenerationError(AttendanceError):
    default_message = "Failed to generate daily summary"
