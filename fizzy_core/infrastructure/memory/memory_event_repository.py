"""
In-Memory Event Repository Implementation.
"""

from __future__ import annotations

import logging

from fizzy_core.domain.ports.repositories.event_repository import (
    CreateEventInput,
    EventRepository,
)
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.memory.database import InMemoryDatabase

logger = logging.getLogger(__name__)


class MemoryEventRepository(EventRepository):
    """Appends events to InMemoryDatabase.events."""

    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def create_event(self, account_id: FizzyId, event: CreateEventInput) -> None:
        self._db.events.append((account_id, event, self._db.now()))
        logger.debug(f"[events] {event.action.value} on {event.eventable_type} {event.eventable_id}")
