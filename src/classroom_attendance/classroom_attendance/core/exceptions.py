class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when an action is not allowed (dead session, outside the geofence)."""

    status_code = 403


class SessionNotFoundError(DomainError):
    """Raised when there is no live session or the token does not match it."""

    status_code = 404


class SessionExpiredError(DomainError):
    """Raised when the token matches a session whose window has closed."""

    status_code = 410


class ConflictError(DomainError):
    """Raised when a unique constraint would be violated."""

    status_code = 409
