"""
ValidationFailedError - Raised when a value does not satisfy a domain rule.
"""

from fizzy_core.domain.exceptions.base import DomainError


class ValidationFailedError(DomainError):
    """Exception raised for domain validation errors."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Validation failed for field '{field}': {reason}")
        self.field = field
        self.reason = reason


class InvalidIdentifierError(ValidationFailedError, ValueError):
    """Raised when a string is not a well-formed FizzyId."""

    def __init__(self, raw: object):
        super().__init__("id", f"expected 25 lowercase base36 characters, got {raw!r}")
        self.raw = raw
