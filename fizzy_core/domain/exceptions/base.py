"""
DomainError - Common base for every store-level failure.
"""


class DomainError(Exception):
    """Base class for errors raised by the domain and persistence layers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
