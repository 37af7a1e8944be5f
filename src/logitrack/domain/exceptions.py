"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Store failures (I/O, corrupt data) are *not* part of this
hierarchy and propagate unchanged.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or referenced something that does not exist.

    ``field`` names the offending input and ``value`` carries the
    rejected value (e.g. the unknown inventory item id).
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        entity_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id
