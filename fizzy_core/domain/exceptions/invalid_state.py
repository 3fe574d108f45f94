"""
InvalidStateError - Raised when the store is left in a state a write should have ruled out
(e.g. a card that cannot be read back right after it was written).
"""

from fizzy_core.domain.exceptions.base import DomainError


class InvalidStateError(DomainError):
    def __init__(self, message: str):
        super().__init__(f"Invalid state: {message}")
