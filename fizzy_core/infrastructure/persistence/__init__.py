"""
PERSISTENCE - Prisma-backed repositories over the Fizzy MySQL schema

All statements go through Prisma's raw query API (query_raw / execute_raw)
because the tables are owned by the Fizzy application, not by this package.
"""

from fizzy_core.infrastructure.persistence.prisma_board_repository import (
    PrismaBoardRepository,
)
from fizzy_core.infrastructure.persistence.prisma_card_repository import (
    PrismaCardRepository,
)
from fizzy_core.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from fizzy_core.infrastructure.persistence.prisma_event_repository import (
    PrismaEventRepository,
)

__all__ = [
    "PrismaBoardRepository",
    "PrismaCardRepository",
    "PrismaCommentRepository",
    "PrismaEventRepository",
]
