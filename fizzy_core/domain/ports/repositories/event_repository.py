"""
Event Repository Port - Append-only audit trail for the activity timeline.
Implementation: fizzy_core/infrastructure/persistence/prisma_event_repository.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fizzy_core.domain.value_objects.fizzy_id import FizzyId


class EventAction(str, Enum):
    CARD_CREATED = "card_created"
    CARD_UPDATED = "card_updated"
    CARD_CLOSED = "card_closed"
    CARD_REOPENED = "card_reopened"
    CARD_COLUMN_CHANGED = "card_column_changed"
    COMMENT_CREATED = "comment_created"


@dataclass(frozen=True)
class CreateEventInput:
    board_id: FizzyId
    eventable_id: FizzyId
    eventable_type: str  # "Card" or "Comment"
    creator_id: FizzyId
    action: EventAction
    particulars: dict[str, Any] = field(default_factory=dict)


class EventRepository(ABC):
    @abstractmethod
    async def create_event(
        self, account_id: FizzyId, event: CreateEventInput
    ) -> None: ...
