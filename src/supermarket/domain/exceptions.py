"""Domain-level exceptions.

Every checkout failure is a subclass of DomainException so the CLI layer
can catch them uniformly and display a one-line message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity (usually a product) does not exist."""
