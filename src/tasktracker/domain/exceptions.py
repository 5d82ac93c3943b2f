"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API layer can catch them uniformly and map them to responses.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DomainException):
    """Input is missing, malformed or breaks a business rule."""


class ConflictError(DomainException):
    """A uniqueness rule would be violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
