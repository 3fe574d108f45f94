"""Card commands."""

from .close_card import (
    CloseCardCommand,
    CloseCardHandler,
    ReopenCardCommand,
    ReopenCardHandler,
)
from .create_card import CreateCardCommand, CreateCardHandler
from .move_card import MoveCardCommand, MoveCardHandler
from .update_card import UpdateCardCommand, UpdateCardHandler

__all__ = [
    "CloseCardCommand",
    "CloseCardHandler",
    "CreateCardCommand",
    "CreateCardHandler",
    "MoveCardCommand",
    "MoveCardHandler",
    "ReopenCardCommand",
    "ReopenCardHandler",
    "UpdateCardCommand",
    "UpdateCardHandler",
]
