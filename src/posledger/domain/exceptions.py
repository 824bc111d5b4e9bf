"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class SerializationError(DomainException):
    """Persisted data could not be decoded.

    The persistence layer logs and recovers from this one; it is only
    raised out of the codec functions.
    """


class ImportShapeError(DomainException):
    """A backup document does not have the expected shape."""


class StorageError(DomainException):
    """A collection could not be written to the local store."""
