class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an update/remove references an unknown shift id."""


class DuplicateShiftError(DomainError):
    """Raised when a shift is added with an id that already exists."""


class StorageCorruptError(DomainError):
    """Raised when persisted data cannot be read back as a shift collection."""
