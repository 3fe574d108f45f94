"""Create Card Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.application.common.interfaces import Command, CommandHandler
from fizzy_core.application.common.lookups import require_board_access
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.application.errors import InvalidInputError
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories import (
    BoardRepository,
    CardRepository,
    CreateCardInput,
    CreateEventInput,
    EventAction,
    EventRepository,
)
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCardCommand(Command[Card]):
    account_id: FizzyId
    user_id: FizzyId
    board_id: FizzyId
    title: str
    description: Optional[str] = None


class CreateCardHandler(CommandHandler[Card]):
    """
    New cards always start unplaced: status drafted, no column. Placing a
    card is a separate move.
    """

    def __init__(
        self,
        card_repository: CardRepository,
        board_repository: BoardRepository,
        event_repository: EventRepository,
    ):
        self._card_repository = card_repository
        self._board_repository = board_repository
        self._event_repository = event_repository

    async def execute(self, command: CreateCardCommand) -> Card:
        title = command.title.strip()
        if not title:
            raise InvalidInputError("Card title cannot be empty")

        await require_board_access(
            self._board_repository,
            command.account_id,
            command.board_id,
            command.user_id,
        )

        with store_errors("create card"):
            card = await self._card_repository.create(
                command.account_id,
                CreateCardInput(
                    board_id=command.board_id,
                    creator_id=command.user_id,
                    title=title,
                    status=CardStatus.DRAFTED,
                    description=command.description,
                ),
            )

        logger.info(f"[create_card] {card.formatted_number()} on board {card.board_id}")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=command.user_id,
                action=EventAction.CARD_CREATED,
            ),
        )
        return card
