"""List Board Columns Query - choices for moving a card."""

from dataclasses import dataclass

from fizzy_core.application.common.interfaces import Query, QueryHandler
from fizzy_core.application.common.lookups import require_board_access
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.ports.repositories import BoardRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class ListBoardColumnsQuery(Query[list[Column]]):
    account_id: FizzyId
    user_id: FizzyId
    board_id: FizzyId


class ListBoardColumnsHandler(QueryHandler[list[Column]]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, query: ListBoardColumnsQuery) -> list[Column]:
        await require_board_access(
            self._board_repository, query.account_id, query.board_id, query.user_id
        )
        with store_errors(f"board {query.board_id}"):
            return await self._board_repository.get_columns(
                query.account_id, query.board_id
            )
