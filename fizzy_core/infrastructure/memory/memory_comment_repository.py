"""
In-Memory Comment Repository Implementation.

Create inserts the comment and advances the card's activity timestamps inside
one InMemoryDatabase.transaction(), so a missing card leaves no comment.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.exceptions import EntityNotFoundError
from fizzy_core.domain.ports.repositories.comment_repository import CommentRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.memory.database import InMemoryDatabase

logger = logging.getLogger(__name__)


class MemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def list_for_card(
        self, account_id: FizzyId, card_id: FizzyId, limit: int = 50
    ) -> list[Comment]:
        comments = [
            comment
            for comment in self._db.comments.values()
            if comment.account_id == account_id and comment.card_id == card_id
        ]
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return [
            replace(comment, creator_name=self._db.users.get(comment.creator_id))
            for comment in comments[:limit]
        ]

    async def create(
        self,
        account_id: FizzyId,
        card_id: FizzyId,
        creator_id: FizzyId,
        content: str,
    ) -> Comment:
        with self._db.transaction():
            now = self._db.now()
            comment = Comment(
                id=FizzyId.generate(),
                account_id=account_id,
                card_id=card_id,
                creator_id=creator_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            self._db.comments[comment.id] = comment

            card = self._db.cards.get(card_id)
            if card is None or card.account_id != account_id:
                raise EntityNotFoundError("Card", str(card_id))
            self._db.cards[card_id] = replace(card, last_active_at=now, updated_at=now)

        logger.info(f"[comments] Added comment {comment.id} to card {card_id}")
        return comment
