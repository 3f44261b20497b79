class DomainError(Exception):
    """Base exception for errors raised by the meeting and attendance stores."""


class ValidationError(DomainError):
    """Raised when required input is missing, empty or malformed."""


class PreconditionError(DomainError):
    """Raised when an operation needs a current meeting and none is configured."""


class NotFoundError(DomainError):
    """Raised when the target of a delete does not exist."""


class StorageError(DomainError):
    """Raised when the persistence backend fails to read or write."""
