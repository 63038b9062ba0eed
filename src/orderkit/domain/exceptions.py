"""Domain-level exceptions.

The order state machine never raises: refused transitions are reported
as notices.  These exceptions cover lookups and configuration choices
made by the application layer so the CLI can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An unknown option or malformed request was supplied."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
