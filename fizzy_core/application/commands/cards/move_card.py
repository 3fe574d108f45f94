"""Move Card Command - place a card in a column of its board."""

import logging
from dataclasses import dataclass

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
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveCardCommand(Command[Card]):
    account_id: FizzyId
    user_id: FizzyId
    card_number: int
    column_id: FizzyId


class MoveCardHandler(CommandHandler[Card]):
    def __init__(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ):
        self._card_repository = card_repository
        self._board_repository = board_repository
        self._event_repository = event_repository

    async def execute(self, command: MoveCardCommand) -> Card:
        card = await require_card(
            self._card_repository, command.account_id, command.card_number
        )

        with store_errors(f"card #{command.card_number}"):
            columns = await self._board_repository.get_columns(
                command.account_id, card.board_id
            )
        if all(column.id != command.column_id for column in columns):
            raise InvalidInputError("Column not in this board")

        with store_errors(f"card #{command.card_number}"):
            moved = await self._card_repository.update(
                command.account_id,
                card.id,
                UpdateCardInput(column_id=command.column_id, status=CardStatus.TRIAGED),
            )

        logger.info(f"[move_card] {moved.formatted_number()} -> column {command.column_id}")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=command.user_id,
                action=EventAction.CARD_COLUMN_CHANGED,
                particulars={"column_id": str(command.column_id)},
            ),
        )
        return moved
