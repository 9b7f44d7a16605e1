"""Domain-level exceptions.

Every failure the core reports is a subclass of DomainException so the
CLI layer can catch them uniformly and display a readable message.
Storage faults are translated into PersistenceError subclasses by the
Database handle; SQLAlchemy exceptions never leak past the repositories.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied data violates a precondition."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The backing storage rejected or failed an operation."""

    def __init__(
        self,
        operation: str,
        message: str,
        entity_id: int | None = None,
    ) -> None:
        self.operation = operation
        self.entity_id = entity_id
        where = f" (id={entity_id})" if entity_id is not None else ""
        super().__init__(f"{operation}{where}: {message}")


class ConstraintError(PersistenceError):
    """A uniqueness or referential rule was rejected by storage."""


class StorageError(PersistenceError):
    """Any other backing-storage fault (connectivity, disk, corruption)."""
