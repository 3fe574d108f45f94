"""
Best-effort audit events.

Events feed the Fizzy activity timeline. They are written after the business
mutation has already committed, and losing one is acceptable: a failed write
is logged at WARNING and dropped. No retry, no rollback, at most once.
Task cancellation is not a write failure and still propagates.
"""

import logging

from fizzy_core.domain.ports.repositories.event_repository import (
    CreateEventInput,
    EventRepository,
)
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


async def emit_event_best_effort(
    event_repository: EventRepository,
    account_id: FizzyId,
    event: CreateEventInput,
) -> None:
    try:
        await event_repository.create_event(account_id, event)
    except Exception as e:
        # Intentionally swallowed: the caller's operation has already succeeded
        logger.warning(
            f"[audit] Dropped {event.action.value} event for "
            f"{event.eventable_type} {event.eventable_id}: {e}"
        )
