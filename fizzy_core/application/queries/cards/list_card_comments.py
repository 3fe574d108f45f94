"""List Card Comments Query."""

from dataclasses import dataclass
from typing import Optional

from fizzy_core.application.common.interfaces import Query, QueryHandler
from fizzy_core.application.common.lookups import require_card
from fizzy_core.application.common.paging import page_limit
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.config.settings import Config
from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.ports.repositories import CardRepository, CommentRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass(frozen=True)
class ListCardCommentsQuery(Query[list[Comment]]):
    account_id: FizzyId
    user_id: FizzyId
    card_number: int
    limit: Optional[int] = None


class ListCardCommentsHandler(QueryHandler[list[Comment]]):
    def __init__(
        self, card_repository: CardRepository, comment_repository: CommentRepository
    ):
        self._card_repository = card_repository
        self._comment_repository = comment_repository

    async def execute(self, query: ListCardCommentsQuery) -> list[Comment]:
        limit = page_limit(query.limit, Config.COMMENT_LIST_LIMIT)
        card = await require_card(
            self._card_repository, query.account_id, query.card_number
        )
        with store_errors(f"card #{query.card_number}"):
            return await self._comment_repository.list_for_card(
                query.account_id, card.id, limit
            )
