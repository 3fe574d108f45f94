"""
In-Memory Card Repository Implementation.

Mirrors PrismaCardRepository row for row: the same account scoping, filter
semantics, ordering (last_active_at DESC, id DESC) and display fields, so
either backend can stand in for the other.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.exceptions import EntityNotFoundError
from fizzy_core.domain.ports.repositories.card_repository import (
    CardFilters,
    CardRepository,
    CreateCardInput,
    UpdateCardInput,
)
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.memory.database import InMemoryDatabase

logger = logging.getLogger(__name__)


def matches(db: InMemoryDatabase, card: Card, filters: CardFilters) -> bool:
    """Evaluate CardFilters against one stored card."""
    if filters.assignee_id is not None and (card.id, filters.assignee_id) not in db.assignments:
        return False
    if filters.creator_id is not None and card.creator_id != filters.creator_id:
        return False
    if filters.board_id is not None and card.board_id != filters.board_id:
        return False
    if filters.column_id is not None and card.column_id != filters.column_id:
        return False
    if filters.status and card.status not in filters.status:
        return False
    if filters.exclude_status and card.status in filters.exclude_status:
        return False
    if filters.is_golden is not None and (card.id in db.goldnesses) != filters.is_golden:
        return False
    return True


class MemoryCardRepository(CardRepository):
    """In-memory implementation of CardRepository."""

    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def _hydrate(self, card: Card) -> Card:
        db = self._db
        board = db.boards[card.board_id]
        column = db.columns.get(card.column_id) if card.column_id else None
        return replace(
            card,
            board_name=board.name,
            column_name=column.name if column else None,
            column_color=column.color if column else None,
            creator_name=db.users.get(card.creator_id),
            assignee_names=sorted(
                db.users[user_id]
                for card_id, user_id in db.assignments
                if card_id == card.id and user_id in db.users
            ),
            tag_titles=sorted(
                db.tags[tag_id]
                for card_id, tag_id in db.taggings
                if card_id == card.id and tag_id in db.tags
            ),
            is_golden=card.id in db.goldnesses,
        )

    def _scoped(self, account_id: FizzyId) -> list[Card]:
        # Cards whose board is gone drop out, like the INNER JOIN on boards
        return [
            card
            for card in self._db.cards.values()
            if card.account_id == account_id and card.board_id in self._db.boards
        ]

    async def find_by_id(
        self, account_id: FizzyId, card_id: FizzyId
    ) -> Optional[Card]:
        for card in self._scoped(account_id):
            if card.id == card_id:
                return self._hydrate(card)
        return None

    async def find_by_number(self, account_id: FizzyId, number: int) -> Optional[Card]:
        for card in self._scoped(account_id):
            if card.number == number:
                return self._hydrate(card)
        return None

    async def list(self, account_id: FizzyId, filters: CardFilters) -> list[Card]:
        selected = [
            card for card in self._scoped(account_id) if matches(self._db, card, filters)
        ]
        selected.sort(key=lambda card: (card.last_active_at, card.id), reverse=True)

        start = filters.offset or 0
        stop = start + filters.limit if filters.limit is not None else None
        return [self._hydrate(card) for card in selected[start:stop]]

    async def create(self, account_id: FizzyId, data: CreateCardInput) -> Card:
        with self._db.transaction():
            now = self._db.now()
            card = Card(
                id=FizzyId.generate(),
                account_id=account_id,
                board_id=data.board_id,
                column_id=data.column_id,
                creator_id=data.creator_id,
                number=self._db.next_card_number(account_id),
                title=data.title,
                description=data.description,
                status=data.status,
                last_active_at=now,
                created_at=now,
                updated_at=now,
            )
            self._db.cards[card.id] = card

        logger.info(f"[cards] Created card #{card.number} ({card.id})")
        return self._hydrate(card)

    async def update(
        self, account_id: FizzyId, card_id: FizzyId, data: UpdateCardInput
    ) -> Card:
        card = self._stored(account_id, card_id)
        changes = {
            name: value
            for name, value in (
                ("title", data.title),
                ("description", data.description),
                ("status", data.status),
                ("column_id", data.column_id),
                ("due_on", data.due_on),
            )
            if value is not None
        }
        updated = replace(card, updated_at=self._db.now(), **changes)
        self._db.cards[card_id] = updated
        return self._hydrate(updated)

    async def close(self, account_id: FizzyId, card_id: FizzyId) -> None:
        self._set_status(account_id, card_id, CardStatus.CLOSED)

    async def reopen(self, account_id: FizzyId, card_id: FizzyId) -> None:
        self._set_status(account_id, card_id, CardStatus.TRIAGED)

    def _set_status(
        self, account_id: FizzyId, card_id: FizzyId, status: CardStatus
    ) -> None:
        card = self._stored(account_id, card_id)
        self._db.cards[card_id] = replace(card, status=status, updated_at=self._db.now())

    def _stored(self, account_id: FizzyId, card_id: FizzyId) -> Card:
        card = self._db.cards.get(card_id)
        if card is None or card.account_id != account_id:
            raise EntityNotFoundError("Card", str(card_id))
        return card
