"""
Card Repository Port - Interface for card persistence.
Implementation: fizzy_core/infrastructure/persistence/prisma_card_repository.py

Reads return Card entities with their display fields filled in. Writes never
emit audit events; that is left to the use-case handlers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.exceptions.validation_error import ValidationFailedError
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class CreateCardInput:
    board_id: FizzyId
    creator_id: FizzyId
    title: str
    status: CardStatus = CardStatus.DRAFTED
    description: Optional[str] = None
    column_id: Optional[FizzyId] = None


@dataclass(frozen=True)
class UpdateCardInput:
    """Partial update: None means "leave the stored value as it is"."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[CardStatus] = None
    column_id: Optional[FizzyId] = None
    due_on: Optional[date] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.title,
                self.description,
                self.status,
                self.column_id,
                self.due_on,
            )
        )


@dataclass(frozen=True)
class CardFilters:
    """
    Optional, independently combinable filters for listing cards.

    Results are always ordered most-recently-active first; limit and offset
    apply after filtering and ordering. No limit means no limit.
    """

    assignee_id: Optional[FizzyId] = None
    creator_id: Optional[FizzyId] = None
    board_id: Optional[FizzyId] = None
    column_id: Optional[FizzyId] = None
    status: Optional[tuple[CardStatus, ...]] = None
    exclude_status: Optional[tuple[CardStatus, ...]] = None
    is_golden: Optional[bool] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ValidationFailedError("limit", "must not be negative")
        if self.offset is not None and self.offset < 0:
            raise ValidationFailedError("offset", "must not be negative")


class CardRepository(ABC):
    @abstractmethod
    async def find_by_id(
        self, account_id: FizzyId, card_id: FizzyId
    ) -> Optional[Card]: ...

    @abstractmethod
    async def find_by_number(
        self, account_id: FizzyId, number: int
    ) -> Optional[Card]: ...

    @abstractmethod
    async def list(self, account_id: FizzyId, filters: CardFilters) -> list[Card]: ...

    @abstractmethod
    async def create(self, account_id: FizzyId, data: CreateCardInput) -> Card:
        """Allocate an id and the next account number, then persist the card."""
        ...

    @abstractmethod
    async def update(
        self, account_id: FizzyId, card_id: FizzyId, data: UpdateCardInput
    ) -> Card: ...

    @abstractmethod
    async def close(self, account_id: FizzyId, card_id: FizzyId) -> None: ...

    @abstractmethod
    async def reopen(self, account_id: FizzyId, card_id: FizzyId) -> None: ...
