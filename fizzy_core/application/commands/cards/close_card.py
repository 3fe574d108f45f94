"""Close / Reopen Card Commands."""

import logging
from dataclasses import dataclass

from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.application.common.interfaces import Command, CommandHandler
from fizzy_core.application.common.lookups import require_card
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.application.errors import InvalidInputError
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories import (
    CardRepository,
    CreateEventInput,
    EventAction,
    EventRepository,
)
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloseCardCommand(Command[Card]):
    account_id: FizzyId
    user_id: FizzyId
    card_number: int


@dataclass(frozen=True)
class ReopenCardCommand(Command[Card]):
    account_id: FizzyId
    user_id: FizzyId
    card_number: int


class CloseCardHandler(CommandHandler[Card]):
    """Only an active, triaged card can be closed."""

    def __init__(
        self, card_repository: CardRepository, event_repository: EventRepository
    ):
        self._card_repository = card_repository
        self._event_repository = event_repository

    async def execute(self, command: CloseCardCommand) -> Card:
        card = await require_card(
            self._card_repository, command.account_id, command.card_number
        )
        if not card.status.can_transition_to(CardStatus.CLOSED):
            raise InvalidInputError(
                f"Card {card.formatted_number()} is {card.status.display_name.lower()}"
                " and cannot be closed"
            )

        with store_errors(f"card #{command.card_number}"):
            await self._card_repository.close(command.account_id, card.id)
            closed = await require_card(
                self._card_repository, command.account_id, command.card_number
            )

        logger.info(f"[close_card] {closed.formatted_number()} closed")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=command.user_id,
                action=EventAction.CARD_CLOSED,
            ),
        )
        return closed


class ReopenCardHandler(CommandHandler[Card]):
    """
    Only closed or postponed cards can be reopened. Reopen always lands on
    triaged, whatever the status was before closing.
    """

    def __init__(
        self, card_repository: CardRepository, event_repository: EventRepository
    ):
        self._card_repository = card_repository
        self._event_repository = event_repository

    async def execute(self, command: ReopenCardCommand) -> Card:
        card = await require_card(
            self._card_repository, command.account_id, command.card_number
        )
        if card.status.is_active:
            raise InvalidInputError(f"Card {card.formatted_number()} is not closed")

        with store_errors(f"card #{command.card_number}"):
            await self._card_repository.reopen(command.account_id, card.id)
            reopened = await require_card(
                self._card_repository, command.account_id, command.card_number
            )

        logger.info(f"[reopen_card] {reopened.formatted_number()} reopened")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=command.user_id,
                action=EventAction.CARD_REOPENED,
            ),
        )
        return reopened
