"""
Comment Repository Port - Interface for comment persistence.
Implementation: fizzy_core/infrastructure/persistence/prisma_comment_repository.py
"""

from abc import ABC, abstractmethod

from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


class CommentRepository(ABC):
    @abstractmethod
    async def list_for_card(
        self, account_id: FizzyId, card_id: FizzyId, limit: int = 50
    ) -> list[Comment]:
        """Most recent first."""
        ...

    @abstractmethod
    async def create(
        self,
        account_id: FizzyId,
        card_id: FizzyId,
        creator_id: FizzyId,
        content: str,
    ) -> Comment:
        """
        Write the comment row, its rich-text body and the card's activity bump
        as one transaction. Nothing is left behind if any of the three fails.
        """
        ...
