"""
In-Memory Board Repository Implementation.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.ports.repositories.board_repository import BoardRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.memory.database import InMemoryDatabase


class MemoryBoardRepository(BoardRepository):
    """In-memory implementation of BoardRepository."""

    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def _with_count(self, board: Board) -> Board:
        open_cards = sum(
            1
            for card in self._db.cards.values()
            if card.board_id == board.id and card.status.is_active
        )
        return replace(board, card_count=open_cards)

    def _in_account(self, account_id: FizzyId) -> list[Board]:
        return [b for b in self._db.boards.values() if b.account_id == account_id]

    async def find_by_id(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> Optional[Board]:
        board = self._db.boards.get(board_id)
        if board is None or board.account_id != account_id:
            return None
        return self._with_count(board)

    async def find_by_name(self, account_id: FizzyId, name: str) -> Optional[Board]:
        wanted = name.lower()
        found = sorted(
            (b for b in self._in_account(account_id) if b.name.lower() == wanted),
            key=lambda b: b.id,
        )
        return self._with_count(found[0]) if found else None

    async def list_accessible(
        self, account_id: FizzyId, user_id: FizzyId
    ) -> list[Board]:
        visible = [
            board
            for board in self._in_account(account_id)
            if board.all_access or (board.id, user_id) in self._db.accesses
        ]
        visible.sort(key=lambda b: (b.name, b.id))
        return [self._with_count(board) for board in visible]

    async def get_columns(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> list[Column]:
        columns = [
            column
            for column in self._db.columns.values()
            if column.account_id == account_id and column.board_id == board_id
        ]
        return sorted(columns, key=lambda c: (c.position, c.id))

    async def user_has_access(
        self, account_id: FizzyId, board_id: FizzyId, user_id: FizzyId
    ) -> bool:
        board = self._db.boards.get(board_id)
        if board is None or board.account_id != account_id:
            return False
        return board.all_access or (board_id, user_id) in self._db.accesses
