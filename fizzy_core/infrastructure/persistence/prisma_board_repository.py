"""
Prisma Board Repository Implementation.

Boards, their columns and per-user access grants. Every board row carries an
open-card count computed by a correlated subquery.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.ports.repositories.board_repository import BoardRepository
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.records import (
    board_from_row,
    column_from_row,
    id_param,
    translate_errors,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

_TERMINAL = ", ".join(f"'{status.value}'" for status in CardStatus.terminal())

BOARD_SELECT = f"""
SELECT
    HEX(b.id) AS id,
    HEX(b.account_id) AS account_id,
    HEX(b.creator_id) AS creator_id,
    b.name AS name,
    b.all_access AS all_access,
    b.created_at AS created_at,
    b.updated_at AS updated_at,
    (
        SELECT COUNT(*) FROM cards c
        WHERE c.board_id = b.id AND c.status NOT IN ({_TERMINAL})
    ) AS card_count
FROM boards b
""".strip()

COLUMN_SELECT = """
SELECT
    HEX(id) AS id,
    HEX(account_id) AS account_id,
    HEX(board_id) AS board_id,
    name,
    color,
    position
FROM columns
WHERE account_id = UNHEX(?) AND board_id = UNHEX(?)
ORDER BY position ASC, id ASC
""".strip()

ACCESS_CHECK = """
SELECT
    CASE WHEN b.all_access = 1 OR a.board_id IS NOT NULL THEN 1 ELSE 0 END AS has_access
FROM boards b
LEFT JOIN accesses a ON a.board_id = b.id AND a.user_id = UNHEX(?)
WHERE b.account_id = UNHEX(?) AND b.id = UNHEX(?)
""".strip()


class PrismaBoardRepository(BoardRepository):
    """Prisma implementation of BoardRepository."""

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def find_by_id(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> Optional[Board]:
        async with translate_errors("find board by id"):
            rows = await self._prisma.query_raw(
                f"{BOARD_SELECT}\nWHERE b.account_id = UNHEX(?) AND b.id = UNHEX(?)",
                id_param(account_id),
                id_param(board_id),
            )
        return board_from_row(rows[0]) if rows else None

    async def find_by_name(self, account_id: FizzyId, name: str) -> Optional[Board]:
        async with translate_errors("find board by name"):
            rows = await self._prisma.query_raw(
                f"{BOARD_SELECT}\n"
                "WHERE b.account_id = UNHEX(?) AND LOWER(b.name) = LOWER(?)\n"
                "ORDER BY b.id ASC",
                id_param(account_id),
                name,
            )
        return board_from_row(rows[0]) if rows else None

    async def list_accessible(
        self, account_id: FizzyId, user_id: FizzyId
    ) -> list[Board]:
        # accesses has at most one row per (board, user), so the join never duplicates
        sql = (
            f"{BOARD_SELECT}\n"
            "LEFT JOIN accesses a ON a.board_id = b.id AND a.user_id = UNHEX(?)\n"
            "WHERE b.account_id = UNHEX(?) AND (b.all_access = 1 OR a.board_id IS NOT NULL)\n"
            "ORDER BY b.name ASC, b.id ASC"
        )
        async with translate_errors("list accessible boards"):
            rows = await self._prisma.query_raw(
                sql, id_param(user_id), id_param(account_id)
            )
        return [board_from_row(row) for row in rows]

    async def get_columns(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> list[Column]:
        async with translate_errors("get board columns"):
            rows = await self._prisma.query_raw(
                COLUMN_SELECT, id_param(account_id), id_param(board_id)
            )
        return [column_from_row(row) for row in rows]

    async def user_has_access(
        self, account_id: FizzyId, board_id: FizzyId, user_id: FizzyId
    ) -> bool:
        async with translate_errors("check board access"):
            rows = await self._prisma.query_raw(
                ACCESS_CHECK,
                id_param(user_id),
                id_param(account_id),
                id_param(board_id),
            )
        if not rows:
            logger.debug(f"[boards] Access check on missing board {board_id}")
            return False
        return bool(rows[0]["has_access"])
