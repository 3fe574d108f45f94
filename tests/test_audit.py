"""
Best-effort audit events.

Invariants:
- a failed event write never changes the outcome of the use case
- the failure is logged at WARNING and the event is dropped
- task cancellation is not swallowed
"""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from fizzy_core.application.commands.cards import CloseCardCommand, CloseCardHandler
from fizzy_core.application.commands.comments import AddCommentCommand, AddCommentHandler
from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.domain.ports.repositories import (
    CreateEventInput,
    EventAction,
    EventRepository,
)
from fizzy_core.domain.value_objects import CardStatus, FizzyId


def _event(action: EventAction = EventAction.CARD_CREATED) -> CreateEventInput:
    return CreateEventInput(
        board_id=FizzyId.generate(),
        eventable_id=FizzyId.generate(),
        eventable_type="Card",
        creator_id=FizzyId.generate(),
        action=action,
    )


def _failing_events(error: BaseException) -> AsyncMock:
    events = AsyncMock(spec=EventRepository)
    events.create_event.side_effect = error
    return events


async def test_write_failure_is_logged_and_dropped(caplog):
    events = _failing_events(RuntimeError("events table locked"))
    event = _event()

    await emit_event_best_effort(events, FizzyId.generate(), event)

    events.create_event.assert_awaited_once()
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage().startswith("[audit] Dropped card_created event")
    assert "events table locked" in warnings[0].getMessage()


async def test_successful_write_logs_nothing_at_warning(caplog):
    events = AsyncMock(spec=EventRepository)

    await emit_event_best_effort(events, FizzyId.generate(), _event())

    events.create_event.assert_awaited_once()
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


async def test_cancellation_propagates():
    events = _failing_events(asyncio.CancelledError())

    with pytest.raises(asyncio.CancelledError):
        await emit_event_best_effort(events, FizzyId.generate(), _event())


class TestHandlersSurviveEventFailure:
    async def test_close_card_still_closes(self, memory_stores, world, caplog):
        card = world.card("Ship it")
        handler = CloseCardHandler(memory_stores.cards, _failing_events(RuntimeError("down")))

        closed = await handler.execute(
            CloseCardCommand(account_id=world.account_id, user_id=world.ana, card_number=card.number)
        )

        assert closed.status is CardStatus.CLOSED
        stored = await memory_stores.cards.find_by_number(world.account_id, card.number)
        assert stored.status is CardStatus.CLOSED
        assert "[audit] Dropped card_closed event" in caplog.text

    async def test_add_comment_still_commits(self, sqlite_stores, world):
        card = world.card("Ship it")
        before = sqlite_stores.count("comments")
        handler = AddCommentHandler(
            sqlite_stores.comments, sqlite_stores.cards, _failing_events(RuntimeError("down"))
        )

        comment = await handler.execute(
            AddCommentCommand(
                account_id=world.account_id, user_id=world.ben, card_number=card.number, content="ok"
            )
        )

        assert comment.content == "ok"
        assert sqlite_stores.count("comments") == before + 1
        assert sqlite_stores.count("events") == 0
