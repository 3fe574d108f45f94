"""
MEMORY - Process-local repositories (STORE_BACKEND=memory)

Same ports, same ordering and filter semantics as the Prisma repositories,
backed by an InMemoryDatabase instead of MySQL. Used for local runs and tests.
"""

from fizzy_core.infrastructure.memory.database import InMemoryDatabase
from fizzy_core.infrastructure.memory.memory_board_repository import (
    MemoryBoardRepository,
)
from fizzy_core.infrastructure.memory.memory_card_repository import (
    MemoryCardRepository,
)
from fizzy_core.infrastructure.memory.memory_comment_repository import (
    MemoryCommentRepository,
)
from fizzy_core.infrastructure.memory.memory_event_repository import (
    MemoryEventRepository,
)

__all__ = [
    "InMemoryDatabase",
    "MemoryBoardRepository",
    "MemoryCardRepository",
    "MemoryCommentRepository",
    "MemoryEventRepository",
]
