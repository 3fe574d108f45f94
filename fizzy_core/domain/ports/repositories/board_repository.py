"""
Board Repository Port - Interface for board, column and access lookups.
Implementation: fizzy_core/infrastructure/persistence/prisma_board_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


class BoardRepository(ABC):
    @abstractmethod
    async def find_by_id(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> Optional[Board]: ...

    @abstractmethod
    async def find_by_name(self, account_id: FizzyId, name: str) -> Optional[Board]:
        """Case-insensitive lookup within the account."""
        ...

    @abstractmethod
    async def list_accessible(
        self, account_id: FizzyId, user_id: FizzyId
    ) -> list[Board]: ...

    @abstractmethod
    async def get_columns(
        self, account_id: FizzyId, board_id: FizzyId
    ) -> list[Column]: ...

    @abstractmethod
    async def user_has_access(
        self, account_id: FizzyId, board_id: FizzyId, user_id: FizzyId
    ) -> bool:
        """True for all-access boards or an explicit grant; False if the board is missing."""
        ...
