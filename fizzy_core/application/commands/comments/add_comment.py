"""Add Comment Command."""

import logging
from dataclasses import dataclass

from fizzy_core.application.common.audit import emit_event_best_effort
from fizzy_core.application.common.interfaces import Command, CommandHandler
from fizzy_core.application.common.lookups import require_card
from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.application.errors import InvalidInputError
from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.ports.repositories import (
    CardRepository,
    CommentRepository,
    CreateEventInput,
    EventAction,
    EventRepository,
)
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCommentCommand(Command[Comment]):
    account_id: FizzyId
    user_id: FizzyId
    card_number: int
    content: str


class AddCommentHandler(CommandHandler[Comment]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        card_repository: CardRepository,
        event_repository: EventRepository,
    ):
        self._comment_repository = comment_repository
        self._card_repository = card_repository
        self._event_repository = event_repository

    async def execute(self, command: AddCommentCommand) -> Comment:
        if not command.content.strip():
            raise InvalidInputError("Comment cannot be empty")

        card = await require_card(
            self._card_repository, command.account_id, command.card_number
        )

        with store_errors(f"card #{command.card_number}"):
            comment = await self._comment_repository.create(
                command.account_id, card.id, command.user_id, command.content
            )

        logger.info(f"[add_comment] Comment {comment.id} on {card.formatted_number()}")

        await emit_event_best_effort(
            self._event_repository,
            command.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=comment.id,
                eventable_type="Comment",
                creator_id=command.user_id,
                action=EventAction.COMMENT_CREATED,
                particulars={"card_id": str(card.id)},
            ),
        )
        return comment
