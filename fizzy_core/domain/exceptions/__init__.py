"""
DOMAIN EXCEPTIONS - Failures local to a single store operation

These are raised by repositories and value objects and translated by the
application layer into caller-facing errors (see application/errors.py).
"""

from fizzy_core.domain.exceptions.base import DomainError
from fizzy_core.domain.exceptions.entity_not_found import EntityNotFoundError
from fizzy_core.domain.exceptions.invalid_state import InvalidStateError
from fizzy_core.domain.exceptions.validation_error import (
    InvalidIdentifierError,
    ValidationFailedError,
)
from fizzy_core.domain.exceptions.infrastructure_error import InfrastructureError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "InvalidStateError",
    "ValidationFailedError",
    "InvalidIdentifierError",
    "InfrastructureError",
]
