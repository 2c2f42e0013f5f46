"""Error taxonomy for session and check-in operations."""


class AttendanceError(Exception):
    """Base class for every per-call outcome other than success."""

    status_code = 400
    code = 'attendance_error'
    default_message = 'Attendance request rejected'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AttendanceError):
    """Input has the wrong shape or is out of bounds."""

    status_code = 400
    code = 'validation_error'
    default_message = 'Invalid input'


class NotFound(AttendanceError):
    """A lookup did not resolve."""

    status_code = 404
    code = 'not_found'
    default_message = 'Not found'


class InvalidToken(NotFound):
    """The presented token does not belong to any session."""

    code = 'invalid_token'
    default_message = 'Invalid QR code. Please scan a valid code'


class SessionExpired(AttendanceError):
    """The session's validity window has closed."""

    status_code = 410
    code = 'session_expired'
    default_message = 'This session has expired'


class DuplicateCheckIn(AttendanceError):
    """The student already holds a record for this session.

    Expected outcome of a repeat scan or of two racing scans. Callers must
    not retry it.
    """

    status_code = 409
    code = 'duplicate_check_in'
    default_message = 'You have already marked attendance for this session'


class StorageUnavailable(AttendanceError):
    """The database could not complete the call; safe to retry."""

    status_code = 503
    code = 'storage_unavailable'
    default_message = 'Attendance storage is temporarily unavailable. Please retry'
