"""
Prisma Event Repository Implementation.

Appends rows to the events table that backs the activity timeline. Rows are
never updated or deleted from here.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fizzy_core.domain.ports.repositories.event_repository import (
    CreateEventInput,
    EventRepository,
)
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.records import (
    id_param,
    to_db_timestamp,
    translate_errors,
)

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

INSERT_EVENT = """
INSERT INTO events (
    id, account_id, board_id, eventable_id, eventable_type, creator_id,
    action, particulars, created_at, updated_at
)
VALUES (UNHEX(?), UNHEX(?), UNHEX(?), UNHEX(?), ?, UNHEX(?), ?, ?, ?, ?)
""".strip()


class PrismaEventRepository(EventRepository):
    """Prisma implementation of EventRepository."""

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def create_event(self, account_id: FizzyId, event: CreateEventInput) -> None:
        now = to_db_timestamp(datetime.now(timezone.utc))
        async with translate_errors(f"record {event.action.value} event"):
            await self._prisma.execute_raw(
                INSERT_EVENT,
                id_param(FizzyId.generate()),
                id_param(account_id),
                id_param(event.board_id),
                id_param(event.eventable_id),
                event.eventable_type,
                id_param(event.creator_id),
                event.action.value,
                json.dumps(event.particulars),
                now,
                now,
            )
        logger.debug(f"[events] {event.action.value} on {event.eventable_type} {event.eventable_id}")
