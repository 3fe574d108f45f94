"""
Single translation point from store-level DomainError to ApplicationError.

Usage:
    with store_errors(f"card #{number}"):
        card = await self._card_repository.update(...)

    EntityNotFoundError  -> NotFoundError   ("card #42: ...")
    InfrastructureError  -> InternalError   (logged, message kept generic)
    other DomainError    -> StoreError      (original kept as .cause)

ApplicationError raised inside the block passes through untouched.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fizzy_core.application.errors import InternalError, NotFoundError, StoreError
from fizzy_core.domain.exceptions import (
    DomainError,
    EntityNotFoundError,
    InfrastructureError,
)

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(context: str) -> Iterator[None]:
    try:
        yield
    except EntityNotFoundError as e:
        raise NotFoundError(f"{context}: {e.message}") from e
    except InfrastructureError as e:
        logger.error(f"[store] {context}: {e.message}")
        raise InternalError(f"{context}: storage is unavailable") from e
    except DomainError as e:
        raise StoreError(f"{context}: {e.message}", cause=e) from e
