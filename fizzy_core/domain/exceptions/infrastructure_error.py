"""
InfrastructureError - Opaque wrapper around connectivity or query failures.

Only the message survives; the driver exception is chained via ``from``.
"""

from fizzy_core.domain.exceptions.base import DomainError


class InfrastructureError(DomainError):
    def __init__(self, message: str):
        super().__init__(f"Infrastructure error: {message}")
