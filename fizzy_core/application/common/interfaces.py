"""
Command/query split for the bot's use cases.

Commands change Fizzy state (and may emit an audit event); queries only
read. Both are frozen dataclasses carrying the acting account and user, and
each has exactly one handler that the DI container builds per request.

Usage:
    @dataclass(frozen=True)
    class CloseCardCommand(Command[Card]):
        account_id: FizzyId
        user_id: FizzyId
        card_number: int

    class CloseCardHandler(CommandHandler[Card]):
        def __init__(self, card_repository: CardRepository, ...):
            self._card_repository = card_repository

        async def execute(self, command: CloseCardCommand) -> Card:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

R = TypeVar("R")


class Command(ABC, Generic[R]):
    """A state change requested by a chat user; R is what the handler returns."""


class CommandHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, command: Command[R]) -> R:
        """Apply the command. Raises ApplicationError subclasses on refusal."""
        ...


class Query(ABC, Generic[R]):
    """A read-only request; R is the shape of the answer."""


class QueryHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, query: Query[R]) -> R:
        """Answer the query without writing anything."""
        ...
