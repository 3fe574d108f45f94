"""
Prisma Comment Repository Implementation.

A comment is split across two tables: the comments row holds ownership and
timestamps, action_text_rich_texts holds the text (record_type 'Comment',
name 'body'). Writing one also marks the card as recently active.

Create is a three-statement transaction:
1. INSERT comments
2. INSERT action_text_rich_texts
3. UPDATE cards SET last_active_at, updated_at
If any statement fails (or the card is gone) the transaction rolls back and
nothing is left behind.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.exceptions import EntityNotFoundError
from fizzy_core.domain.ports.repositories.comment_repository import CommentRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.records import (
    comment_from_row,
    id_param,
    to_db_timestamp,
    translate_errors,
)
from fizzy_core.infrastructure.persistence.rich_text import insert_rich_text

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

LIST_COMMENTS = """
SELECT
    HEX(cm.id) AS id,
    HEX(cm.account_id) AS account_id,
    HEX(cm.card_id) AS card_id,
    HEX(cm.creator_id) AS creator_id,
    cm.created_at AS created_at,
    cm.updated_at AS updated_at,
    rt.body AS content,
    u.name AS creator_name
FROM comments cm
INNER JOIN action_text_rich_texts rt
    ON rt.record_type = 'Comment' AND rt.record_id = cm.id AND rt.name = 'body'
LEFT JOIN users u ON u.id = cm.creator_id
WHERE cm.account_id = UNHEX(?) AND cm.card_id = UNHEX(?)
ORDER BY cm.created_at DESC, cm.id DESC
LIMIT ?
""".strip()

INSERT_COMMENT = """
INSERT INTO comments (id, account_id, card_id, creator_id, created_at, updated_at)
VALUES (UNHEX(?), UNHEX(?), UNHEX(?), UNHEX(?), ?, ?)
""".strip()

TOUCH_CARD = """
UPDATE cards SET last_active_at = ?, updated_at = ?
WHERE id = UNHEX(?) AND account_id = UNHEX(?)
""".strip()


class PrismaCommentRepository(CommentRepository):
    """Prisma implementation of CommentRepository."""

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def list_for_card(
        self, account_id: FizzyId, card_id: FizzyId, limit: int = 50
    ) -> list[Comment]:
        async with translate_errors("list comments"):
            rows = await self._prisma.query_raw(
                LIST_COMMENTS, id_param(account_id), id_param(card_id), limit
            )
        return [comment_from_row(row) for row in rows]

    async def create(
        self,
        account_id: FizzyId,
        card_id: FizzyId,
        creator_id: FizzyId,
        content: str,
    ) -> Comment:
        comment_id = FizzyId.generate()
        created_at = datetime.now(timezone.utc)
        now = to_db_timestamp(created_at)

        async with translate_errors("create comment"):
            async with self._prisma.tx() as tx:
                await tx.execute_raw(
                    INSERT_COMMENT,
                    id_param(comment_id),
                    id_param(account_id),
                    id_param(card_id),
                    id_param(creator_id),
                    now,
                    now,
                )
                await insert_rich_text(
                    tx, account_id, "Comment", comment_id, "body", content, now
                )
                touched = await tx.execute_raw(
                    TOUCH_CARD, now, now, id_param(card_id), id_param(account_id)
                )
                if not touched:
                    raise EntityNotFoundError("Card", str(card_id))

        logger.info(f"[comments] Added comment {comment_id} to card {card_id}")

        return Comment(
            id=comment_id,
            account_id=account_id,
            card_id=card_id,
            creator_id=creator_id,
            content=content,
            created_at=created_at,
            updated_at=created_at,
        )
