"""List Board Cards Query."""

from dataclasses import dataclass
from typing import Optional

from fizzy_core.application.common.interfaces import Query, QueryHandler
from fizzy_core.application.common.lookups import (
    require_board_access,
    require_board_by_name,
)
from fizzy_core.application.common.paging import page_limit, page_offset
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.config.settings import Config
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories import (
    BoardRepository,
    CardFilters,
    CardRepository,
)
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class BoardCards:
    board_name: str  # as stored, whatever casing the caller typed
    cards: list[Card]


@dataclass(frozen=True)
class ListBoardCardsQuery(Query[BoardCards]):
    account_id: FizzyId
    user_id: FizzyId
    board_name: str
    include_closed: bool = False
    column_id: Optional[FizzyId] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListBoardCardsHandler(QueryHandler[BoardCards]):
    def __init__(
        self, card_repository: CardRepository, board_repository: BoardRepository
    ):
        self._card_repository = card_repository
        self._board_repository = board_repository

    async def execute(self, query: ListBoardCardsQuery) -> BoardCards:
        limit = page_limit(query.limit, Config.DEFAULT_PAGE_SIZE)
        offset = page_offset(query.offset)

        board = await require_board_by_name(
            self._board_repository, query.account_id, query.board_name
        )
        await require_board_access(
            self._board_repository, query.account_id, board.id, query.user_id
        )

        filters = CardFilters(
            board_id=board.id,
            column_id=query.column_id,
            exclude_status=None if query.include_closed else CardStatus.terminal(),
            limit=limit,
            offset=offset,
        )
        with store_errors(f"board '{board.name}'"):
            cards = await self._card_repository.list(query.account_id, filters)
        return BoardCards(board_name=board.name, cards=cards)
