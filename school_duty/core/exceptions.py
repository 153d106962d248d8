class DomainError(Exception):
    """Base exception for expected, user-facing failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Raised when an entity is absent or a result set is empty."""

    status_code = 404


class ValidationError(DomainError):
    """Raised when a request payload carries nothing usable."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when the bearer token is missing, expired or invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when the caller is neither the subject user nor an admin."""

    status_code = 403
