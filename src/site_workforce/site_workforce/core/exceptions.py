class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateRecordError(ValidationError):
    """Raised when a unique key (employee code, email, employee+date) already exists."""


class NoDataError(ValidationError):
    """Raised when an export is requested for an empty report."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
