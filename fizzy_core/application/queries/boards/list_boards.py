"""List Boards Query."""

from dataclasses import dataclass

from fizzy_core.application.common.interfaces import Query, QueryHandler
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.ports.repositories import BoardRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class ListBoardsQuery(Query[list[Board]]):
    account_id: FizzyId
    user_id: FizzyId


class ListBoardsHandler(QueryHandler[list[Board]]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, query: ListBoardsQuery) -> list[Board]:
        with store_errors("boards"):
            return await self._board_repository.list_accessible(
                query.account_id, query.user_id
            )
