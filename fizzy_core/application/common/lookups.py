"""Resolve user-facing references (card numbers, board names) for handlers."""

from fizzy_core.application.common.store_errors import store_errors
from fizzy_core.application.errors import NotFoundError, UnauthorizedError
from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.ports.repositories.board_repository import BoardRepository
from fizzy_core.domain.ports.repositories.card_repository import CardRepository
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


async def require_card(
    card_repository: CardRepository, account_id: FizzyId, number: int
) -> Card:
    with store_errors(f"card #{number}"):
        card = await card_repository.find_by_number(account_id, number)
    if card is None:
        raise NotFoundError(f"Card #{number} not found")
    return card


async def require_board_by_name(
    board_repository: BoardRepository, account_id: FizzyId, name: str
) -> Board:
    with store_errors(f"board '{name}'"):
        board = await board_repository.find_by_name(account_id, name)
    if board is None:
        raise NotFoundError(f"Board '{name}' not found")
    return board


async def require_board_access(
    board_repository: BoardRepository,
    account_id: FizzyId,
    board_id: FizzyId,
    user_id: FizzyId,
) -> None:
    with store_errors(f"board {board_id}"):
        allowed = await board_repository.user_has_access(account_id, board_id, user_id)
    if not allowed:
        raise UnauthorizedError("No access to this board")
