"""
Application errors - what a use case reports back to the chat facade.

The facade renders ``kind`` and ``message``; it never sees store internals.

    ApplicationError
    ├── NotFoundError       card/board the caller referenced does not exist
    ├── UnauthorizedError   access check failed
    ├── InvalidInputError   bad argument (empty comment, column on other board)
    ├── StoreError          store rejected the operation (keeps the DomainError)
    └── InternalError       infrastructure failure, details only in the logs
"""

from typing import Optional

from fizzy_core.domain.exceptions import DomainError


class ApplicationError(Exception):
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApplicationError):
    kind = "not_found"


class UnauthorizedError(ApplicationError):
    kind = "unauthorized"


class InvalidInputError(ApplicationError):
    kind = "invalid_input"


class StoreError(ApplicationError):
    kind = "store"

    def __init__(self, message: str, cause: Optional[DomainError] = None):
        super().__init__(message)
        self.cause = cause


class InternalError(ApplicationError):
    kind = "internal"
