"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Is account-scoped: every method takes the account id first
- Returns Optional[...] from point lookups; absence is not an error here

The DI container picks the implementation at wiring time.
"""

from fizzy_core.domain.ports.repositories.board_repository import BoardRepository
from fizzy_core.domain.ports.repositories.card_repository import (
    CardFilters,
    CardRepository,
    CreateCardInput,
    UpdateCardInput,
)
from fizzy_core.domain.ports.repositories.comment_repository import CommentRepository
from fizzy_core.domain.ports.repositories.event_repository import (
    CreateEventInput,
    EventAction,
    EventRepository,
)

__all__ = [
    "BoardRepository",
    "CardFilters",
    "CardRepository",
    "CreateCardInput",
    "UpdateCardInput",
    "CommentRepository",
    "CreateEventInput",
    "EventAction",
    "EventRepository",
]
