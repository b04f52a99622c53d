"""Domain-level exceptions.

All business rule violations and storage failures are expressed as
subclasses of DomainException so the application and CLI layers can
catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """A persistence backend failed."""


class StorageUnavailableError(StorageError):
    """The backend is not supported or cannot be opened in this runtime."""


class LoadError(StorageError):
    """A read from the durable store was rejected."""


class SaveError(StorageError):
    """A write to a store was rejected."""


class QuotaExceededError(SaveError):
    """A write was rejected because the store is full."""

    hint = "Please try using smaller images."


class MigrationParseError(StorageError):
    """A legacy document was present but could not be parsed."""
