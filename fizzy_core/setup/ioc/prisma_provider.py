"""
Prisma store provider (STORE_BACKEND=prisma).

Kept apart from container.py because importing ``prisma`` needs a generated
client (``prisma generate``); the memory backend never imports this module.
"""

import logging
from datetime import timedelta
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from fizzy_core.config.settings import Config
from fizzy_core.domain.ports.repositories import (
    BoardRepository,
    CardRepository,
    CommentRepository,
    EventRepository,
)
from fizzy_core.infrastructure.persistence import (
    PrismaBoardRepository,
    PrismaCardRepository,
    PrismaCommentRepository,
    PrismaEventRepository,
)

logger = logging.getLogger(__name__)


class PrismaStoreProvider(Provider):
    """Repositories backed by one shared, connected Prisma client."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Connected once when first requested
        - Disconnected when the container closes
        """
        prisma = Prisma(
            datasource={"url": Config.DATABASE_URL},
            connect_timeout=timedelta(seconds=Config.DATABASE_CONNECT_TIMEOUT),
        )
        await prisma.connect()
        logger.info("[prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[prisma] Disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_card_repository(self, prisma: Prisma) -> CardRepository:
        return PrismaCardRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_board_repository(self, prisma: Prisma) -> BoardRepository:
        return PrismaBoardRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, prisma: Prisma) -> EventRepository:
        return PrismaEventRepository(prisma)
