"""
Prisma Card Repository Implementation.

The cards table belongs to an existing Fizzy (MySQL) schema, so this
repository talks to it through Prisma's raw query API rather than generated
models:

- query_raw(sql, *params)   → list of row dicts
- execute_raw(sql, *params) → affected row count
- tx()                      → interactive transaction (commit on exit,
                               rollback on exception)

Reads:
- One SELECT compiled by CardQueryBuilder (card row + single-valued joins)
- Then, per returned row, one query for assignee names and one for tag titles

Writes:
- create: allocate the next account number (accounts.cards_count) and insert
  the card, plus its description body, in one transaction
- update: partial SET built from the supplied fields only
- close / reopen: status change only
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.exceptions import EntityNotFoundError, InvalidStateError
from fizzy_core.domain.ports.repositories.card_repository import (
    CardFilters,
    CardRepository,
    CreateCardInput,
    UpdateCardInput,
)
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.card_query import (
    ASSIGNEE_NAMES_QUERY,
    TAG_TITLES_QUERY,
    CardQueryBuilder,
    Clause,
    CompiledQuery,
    id_equals,
    join_clauses,
)
from fizzy_core.infrastructure.persistence.records import (
    card_from_row,
    id_param,
    to_db_timestamp,
    translate_errors,
)
from fizzy_core.infrastructure.persistence.rich_text import (
    insert_rich_text,
    upsert_rich_text,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

INSERT_CARD = """
INSERT INTO cards (
    id, account_id, board_id, column_id, creator_id, number, title, status,
    last_active_at, created_at, updated_at
)
VALUES (UNHEX(?), UNHEX(?), UNHEX(?), UNHEX(?), UNHEX(?), ?, ?, ?, ?, ?, ?)
""".strip()

BUMP_CARDS_COUNT = "UPDATE accounts SET cards_count = cards_count + 1 WHERE id = UNHEX(?)"
READ_CARDS_COUNT = "SELECT cards_count FROM accounts WHERE id = UNHEX(?)"


class PrismaCardRepository(CardRepository):
    """Prisma implementation of CardRepository."""

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    # ==================== READS ====================

    async def find_by_id(
        self, account_id: FizzyId, card_id: FizzyId
    ) -> Optional[Card]:
        query = CardQueryBuilder(account_id).where(id_equals("c.id", card_id)).build()
        async with translate_errors("find card by id"):
            cards = await self._fetch(query)
        return cards[0] if cards else None

    async def find_by_number(self, account_id: FizzyId, number: int) -> Optional[Card]:
        query = (
            CardQueryBuilder(account_id)
            .where(Clause("c.number = ?", (number,)))
            .build()
        )
        async with translate_errors("find card by number"):
            cards = await self._fetch(query)
        return cards[0] if cards else None

    async def list(self, account_id: FizzyId, filters: CardFilters) -> list[Card]:
        query = CardQueryBuilder(account_id).filter(filters).build()
        async with translate_errors("list cards"):
            return await self._fetch(query)

    async def _fetch(self, query: CompiledQuery) -> list[Card]:
        rows = await self._prisma.query_raw(query.sql, *query.params)
        cards = []
        for row in rows:
            card_hex = row["id"]
            assignees = await self._prisma.query_raw(ASSIGNEE_NAMES_QUERY, card_hex)
            tags = await self._prisma.query_raw(TAG_TITLES_QUERY, card_hex)
            cards.append(
                card_from_row(
                    row,
                    assignee_names=[r["name"] for r in assignees],
                    tag_titles=[r["title"] for r in tags],
                )
            )
        return cards

    # ==================== WRITES ====================

    async def create(self, account_id: FizzyId, data: CreateCardInput) -> Card:
        card_id = FizzyId.generate()
        now = to_db_timestamp(datetime.now(timezone.utc))

        async with translate_errors("create card"):
            async with self._prisma.tx() as tx:
                number = await self._next_number(tx, account_id)
                await tx.execute_raw(
                    INSERT_CARD,
                    id_param(card_id),
                    id_param(account_id),
                    id_param(data.board_id),
                    id_param(data.column_id),
                    id_param(data.creator_id),
                    number,
                    data.title,
                    data.status.value,
                    now,
                    now,
                    now,
                )
                if data.description is not None:
                    await insert_rich_text(
                        tx, account_id, "Card", card_id, "description",
                        data.description, now,
                    )

        logger.info(f"[cards] Created card #{number} ({card_id})")
        return await self._require(account_id, card_id)

    async def _next_number(self, tx: Any, account_id: FizzyId) -> int:
        """
        Increment the account's card counter inside the caller's transaction.

        The UPDATE takes the row lock, so concurrent creators serialize here
        and never read the same number.
        """
        bumped = await tx.execute_raw(BUMP_CARDS_COUNT, id_param(account_id))
        if not bumped:
            raise EntityNotFoundError("Account", str(account_id))
        rows = await tx.query_raw(READ_CARDS_COUNT, id_param(account_id))
        return int(rows[0]["cards_count"])

    async def update(
        self, account_id: FizzyId, card_id: FizzyId, data: UpdateCardInput
    ) -> Card:
        now = to_db_timestamp(datetime.now(timezone.utc))

        assignments: list[Clause] = []
        if data.title is not None:
            assignments.append(Clause("title = ?", (data.title,)))
        if data.status is not None:
            assignments.append(Clause("status = ?", (data.status.value,)))
        if data.column_id is not None:
            assignments.append(Clause("column_id = UNHEX(?)", (id_param(data.column_id),)))
        if data.due_on is not None:
            assignments.append(Clause("due_on = ?", (data.due_on.isoformat(),)))
        assignments.append(Clause("updated_at = ?", (now,)))

        set_sql, params = join_clauses(assignments, ", ")
        sql = f"UPDATE cards SET {set_sql} WHERE id = UNHEX(?) AND account_id = UNHEX(?)"
        params.extend([id_param(card_id), id_param(account_id)])

        async with translate_errors("update card"):
            async with self._prisma.tx() as tx:
                updated = await tx.execute_raw(sql, *params)
                if not updated:
                    raise EntityNotFoundError("Card", str(card_id))
                if data.description is not None:
                    await upsert_rich_text(
                        tx, account_id, "Card", card_id, "description",
                        data.description, now,
                    )

        return await self._require(account_id, card_id)

    async def close(self, account_id: FizzyId, card_id: FizzyId) -> None:
        await self._set_status(account_id, card_id, CardStatus.CLOSED)

    async def reopen(self, account_id: FizzyId, card_id: FizzyId) -> None:
        await self._set_status(account_id, card_id, CardStatus.TRIAGED)

    async def _set_status(
        self, account_id: FizzyId, card_id: FizzyId, status: CardStatus
    ) -> None:
        now = to_db_timestamp(datetime.now(timezone.utc))
        async with translate_errors(f"set card status to {status.value}"):
            updated = await self._prisma.execute_raw(
                "UPDATE cards SET status = ?, updated_at = ? "
                "WHERE id = UNHEX(?) AND account_id = UNHEX(?)",
                status.value,
                now,
                id_param(card_id),
                id_param(account_id),
            )
        if not updated:
            raise EntityNotFoundError("Card", str(card_id))

    async def _require(self, account_id: FizzyId, card_id: FizzyId) -> Card:
        card = await self.find_by_id(account_id, card_id)
        if card is None:
            raise InvalidStateError(f"card {card_id} missing right after write")
        return card
