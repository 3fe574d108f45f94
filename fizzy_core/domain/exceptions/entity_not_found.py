"""
EntityNotFoundError - Raised when a store operation targets a missing row.
Maps to: NotFoundError at the application layer
"""

from fizzy_core.domain.exceptions.base import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    def __init__(self, entity: str, identifier: str):
        super().__init__(f"Entity '{entity}' with id '{identifier}' not found")
        self.entity = entity
        self.identifier = identifier
