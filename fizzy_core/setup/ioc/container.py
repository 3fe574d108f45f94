"""
Dishka DI Container Setup.

- One store provider, chosen by STORE_BACKEND ("prisma" or "memory")
- One use-case provider with every command/query handler
- Handlers are request-scoped; the Prisma client / in-memory database is
  app-scoped and shared

Flow:
  Container → provides → PrismaCardRepository → to → CreateCardHandler
                                 ↓
                         uses CardRepository interface

Usage (chat facade):
    container = await create_container()
    async with container() as request:
        handler = await request.get(CreateCardHandler)
        card = await handler.execute(CreateCardCommand(...))
    ...
    await container.close()
"""

import logging
from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from fizzy_core.application.commands.cards import (
    CloseCardHandler,
    CreateCardHandler,
    MoveCardHandler,
    ReopenCardHandler,
    UpdateCardHandler,
)
from fizzy_core.application.commands.comments import AddCommentHandler
from fizzy_core.application.queries.boards import (
    ListBoardColumnsHandler,
    ListBoardsHandler,
)
from fizzy_core.application.queries.cards import (
    GetCardDetailsHandler,
    ListBoardCardsHandler,
    ListCardCommentsHandler,
    ListMyCardsHandler,
)
from fizzy_core.config.settings import Config
from fizzy_core.domain.ports.repositories import (
    BoardRepository,
    CardRepository,
    CommentRepository,
    EventRepository,
)
from fizzy_core.infrastructure.memory import (
    InMemoryDatabase,
    MemoryBoardRepository,
    MemoryCardRepository,
    MemoryCommentRepository,
    MemoryEventRepository,
)

logger = logging.getLogger(__name__)

BACKENDS = ("prisma", "memory")


class MemoryStoreProvider(Provider):
    """Repositories over a shared InMemoryDatabase."""

    def __init__(self, database: Optional[InMemoryDatabase] = None):
        super().__init__()
        self._database = database or InMemoryDatabase()

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        return self._database

    @provide(scope=Scope.REQUEST)
    def get_card_repository(self, db: InMemoryDatabase) -> CardRepository:
        return MemoryCardRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_board_repository(self, db: InMemoryDatabase) -> BoardRepository:
        return MemoryBoardRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, db: InMemoryDatabase) -> CommentRepository:
        return MemoryCommentRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, db: InMemoryDatabase) -> EventRepository:
        return MemoryEventRepository(db)


class UseCaseProvider(Provider):
    """
    Command and query handlers.

    - Parameters ask for the abstract repositories
    - Dishka resolves them from whichever store provider is registered
    """

    # ==================== CARD COMMANDS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_card_handler(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ) -> CreateCardHandler:
        return CreateCardHandler(card_repository, board_repository, event_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_card_handler(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ) -> UpdateCardHandler:
        return UpdateCardHandler(card_repository, board_repository, event_repository)

    @provide(scope=Scope.REQUEST)
    def get_move_card_handler(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ) -> MoveCardHandler:
        return MoveCardHandler(card_repository, board_repository, event_repository)

    @provide(scope=Scope.REQUEST)
    def get_close_card_handler(
        self, card_repository: CardRepository, event_repository: EventRepository
    ) -> CloseCardHandler:
        return CloseCardHandler(card_repository, event_repository)

    @provide(scope=Scope.REQUEST)
    def get_reopen_card_handler(
        self, card_repository: CardRepository, event_repository: EventRepository
    ) -> ReopenCardHandler:
        return ReopenCardHandler(card_repository, event_repository)

    # ==================== COMMENT COMMANDS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_comment_handler(
        self,
        comment_repository: CommentRepository,
        card_repository: CardRepository,
        event_repository: EventRepository,
    ) -> AddCommentHandler:
        return AddCommentHandler(comment_repository, card_repository, event_repository)

    # ==================== QUERIES ====================

    @provide(scope=Scope.REQUEST)
    def get_list_my_cards_handler(
        self, card_repository: CardRepository
    ) -> ListMyCardsHandler:
        return ListMyCardsHandler(card_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_board_cards_handler(
        self, card_repository: CardRepository, board_repository: BoardRepository
    ) -> ListBoardCardsHandler:
        return ListBoardCardsHandler(card_repository, board_repository)

    @provide(scope=Scope.REQUEST)
    def get_card_details_handler(
        self, card_repository: CardRepository, comment_repository: CommentRepository
    ) -> GetCardDetailsHandler:
        return GetCardDetailsHandler(card_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_card_comments_handler(
        self, card_repository: CardRepository, comment_repository: CommentRepository
    ) -> ListCardCommentsHandler:
        return ListCardCommentsHandler(card_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_boards_handler(
        self, board_repository: BoardRepository
    ) -> ListBoardsHandler:
        return ListBoardsHandler(board_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_board_columns_handler(
        self, board_repository: BoardRepository
    ) -> ListBoardColumnsHandler:
        return ListBoardColumnsHandler(board_repository)


def store_provider(
    backend: str, database: Optional[InMemoryDatabase] = None
) -> Provider:
    if backend == "memory":
        return MemoryStoreProvider(database)
    if backend == "prisma":
        # Deferred: the generated Prisma client only exists after `prisma generate`
        from fizzy_core.setup.ioc.prisma_provider import PrismaStoreProvider

        return PrismaStoreProvider()
    raise ValueError(f"Unknown STORE_BACKEND {backend!r}, expected one of {BACKENDS}")


async def create_container(
    backend: Optional[str] = None, database: Optional[InMemoryDatabase] = None
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at bot startup, and close() it at shutdown
    - ``database`` seeds the memory backend (ignored for prisma)
    """
    backend = (backend or Config.STORE_BACKEND).lower()
    logger.info(f"[ioc] Building container with {backend} store")
    return make_async_container(store_provider(backend, database), UseCaseProvider())
