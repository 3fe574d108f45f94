"""List My Cards Query."""

from dataclasses import dataclass
from typing import Optional

from fizzy_core.application.common.interfaces import Query, QueryHandler
from fizzy_core.application.common.paging import page_limit, page_offset
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.config.settings import Config
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories import CardFilters, CardRepository
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class ListMyCardsQuery(Query[list[Card]]):
    account_id: FizzyId
    user_id: FizzyId
    assigned: bool = False  # cards assigned to the user instead of created by them
    include_closed: bool = False
    limit: Optional[int] = None
    offset: Optional[int] = None


class ListMyCardsHandler(QueryHandler[list[Card]]):
    def __init__(self, card_repository: CardRepository):
        self._card_repository = card_repository

    async def execute(self, query: ListMyCardsQuery) -> list[Card]:
        limit = page_limit(query.limit, Config.DEFAULT_PAGE_SIZE)
        offset = page_offset(query.offset)
        filters = CardFilters(
            assignee_id=query.user_id if query.assigned else None,
            creator_id=None if query.assigned else query.user_id,
            exclude_status=None if query.include_closed else CardStatus.terminal(),
            limit=limit,
            offset=offset,
        )
        with store_errors("my cards"):
            return await self._card_repository.list(query.account_id, filters)
