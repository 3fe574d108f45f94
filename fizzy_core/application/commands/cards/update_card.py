"""Update Card Command."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.application.common.interfaces import Command, CommandHandler
from fizzy_core.application.common.lookups import require_card
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.application.errors import InvalidInputError
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories import (
    BoardRepository,
    CardRepository,
    CreateEventInput,
    EventAction,
    EventRepository,
    UpdateCardInput,
)
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCardCommand(Command[Card]):
    """Only the fields that are not None are changed."""

    account_id: FizzyId
    user_id: FizzyId
    card_number: int
    title: Optional[str] = None
    description: Optional[str] = None
    column_id: Optional[FizzyId] = None
    due_on: Optional[date] = None


class UpdateCardHandler(CommandHandler[Card]):
    def __init__(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ):
        self._card_repository = card_repository
        self._board_repository = board_repository
        self._event_repository = event_repository

    async def execute(self, command: UpdateCardCommand) -> Card:
        if command.title is not None and not command.title.strip():
            raise InvalidInputError("Card title cannot be empty")

        changes = UpdateCardInput(
            title=command.title.strip() if command.title is not None else None,
            description=command.description,
            column_id=command.column_id,
            due_on=command.due_on,
        )
        if changes.is_empty():
            raise InvalidInputError("Nothing to update")

        card = await require_card(
            self._card_repository, command.account_id, command.card_number
        )

        # The store does not know which columns belong to which board
        if command.column_id is not None:
            with store_errors(f"card #{command.card_number}"):
                columns = await self._board_repository.get_columns(
                    command.account_id, card.board_id
                )
            if all(column.id != command.column_id for column in columns):
                raise InvalidInputError("Column not in this board")

        with store_errors(f"card #{command.card_number}"):
            updated = await self._card_repository.update(
                command.account_id, card.id, changes
            )

        logger.info(f"[update_card] {updated.formatted_number()} updated")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=command.user_id,
                action=EventAction.CARD_UPDATED,
            ),
        )
        return updated
