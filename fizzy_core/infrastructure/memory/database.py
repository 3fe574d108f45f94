"""
In-Memory Database - Process-local stand-in for the Fizzy MySQL schema.

Holds the same facts the relational tables hold, keyed the same way, so the
in-memory repositories can answer every query the Prisma ones answer:

    accounts      account_id -> cards_count
    users         user_id -> name
    boards        board_id -> Board        (card_count left unset)
    columns       column_id -> Column
    cards         card_id -> Card          (display fields left unset)
    comments      comment_id -> Comment    (creator_name left unset)
    accesses      {(board_id, user_id)}
    assignments   {(card_id, user_id)}
    tags          tag_id -> title
    taggings      {(card_id, tag_id)}
    goldnesses    {card_id}
    events        [(account_id, CreateEventInput, created_at)]

Display fields are computed at read time, never stored.

Usage:
    db = InMemoryDatabase()
    account = db.add_account()
    user = db.add_user("Ana")
    board = db.add_board(account, user, "Roadmap")
    card = db.add_card(account, board, user, "Ship it")
"""

import copy
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterator, Optional

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.exceptions import EntityNotFoundError
from fizzy_core.domain.ports.repositories.event_repository import CreateEventInput
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

_STATE_FIELDS = (
    "accounts",
    "users",
    "boards",
    "columns",
    "cards",
    "comments",
    "accesses",
    "assignments",
    "tags",
    "taggings",
    "goldnesses",
    "events",
)


@dataclass
class InMemoryDatabase:
    accounts: dict[FizzyId, int] = field(default_factory=dict)
    users: dict[FizzyId, str] = field(default_factory=dict)
    boards: dict[FizzyId, Board] = field(default_factory=dict)
    columns: dict[FizzyId, Column] = field(default_factory=dict)
    cards: dict[FizzyId, Card] = field(default_factory=dict)
    comments: dict[FizzyId, Comment] = field(default_factory=dict)
    accesses: set[tuple[FizzyId, FizzyId]] = field(default_factory=set)
    assignments: set[tuple[FizzyId, FizzyId]] = field(default_factory=set)
    tags: dict[FizzyId, str] = field(default_factory=dict)
    taggings: set[tuple[FizzyId, FizzyId]] = field(default_factory=set)
    goldnesses: set[FizzyId] = field(default_factory=set)
    events: list[tuple[FizzyId, CreateEventInput, datetime]] = field(
        default_factory=list
    )
    _last_now: Optional[datetime] = field(default=None, repr=False)

    def now(self) -> datetime:
        """UTC wall clock, strictly increasing across calls on this database."""
        current = datetime.now(timezone.utc)
        if self._last_now is not None and current <= self._last_now:
            current = self._last_now + timedelta(microseconds=1)
        self._last_now = current
        return current

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        All-or-nothing block: on any exception every table is restored to
        its state at entry and the exception propagates.
        """
        snapshot = {name: copy.deepcopy(getattr(self, name)) for name in _STATE_FIELDS}
        try:
            yield
        except BaseException:
            for name, value in snapshot.items():
                setattr(self, name, value)
            raise

    def next_card_number(self, account_id: FizzyId) -> int:
        if account_id not in self.accounts:
            raise EntityNotFoundError("Account", str(account_id))
        self.accounts[account_id] += 1
        return self.accounts[account_id]

    # ==================== SEEDING ====================

    def add_account(self, cards_count: int = 0) -> FizzyId:
        account_id = FizzyId.generate()
        self.accounts[account_id] = cards_count
        return account_id

    def add_user(self, name: str) -> FizzyId:
        user_id = FizzyId.generate()
        self.users[user_id] = name
        return user_id

    def add_board(
        self,
        account_id: FizzyId,
        creator_id: FizzyId,
        name: str,
        all_access: bool = True,
        created_at: Optional[datetime] = None,
    ) -> Board:
        timestamp = created_at or self.now()
        board = Board(
            id=FizzyId.generate(),
            account_id=account_id,
            creator_id=creator_id,
            name=name,
            all_access=all_access,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.boards[board.id] = board
        return board

    def add_column(
        self, board: Board, name: str, color: str = "blue", position: Optional[int] = None
    ) -> Column:
        if position is None:
            position = sum(1 for c in self.columns.values() if c.board_id == board.id)
        column = Column(
            id=FizzyId.generate(),
            account_id=board.account_id,
            board_id=board.id,
            name=name,
            color=color,
            position=position,
        )
        self.columns[column.id] = column
        return column

    def add_card(
        self,
        account_id: FizzyId,
        board: Board,
        creator_id: FizzyId,
        title: str,
        status: CardStatus = CardStatus.TRIAGED,
        column: Optional[Column] = None,
        description: Optional[str] = None,
        due_on: Optional[date] = None,
        last_active_at: Optional[datetime] = None,
    ) -> Card:
        timestamp = self.now()
        card = Card(
            id=FizzyId.generate(),
            account_id=account_id,
            board_id=board.id,
            column_id=column.id if column else None,
            creator_id=creator_id,
            number=self.next_card_number(account_id),
            title=title,
            description=description,
            status=status,
            due_on=due_on,
            last_active_at=last_active_at or timestamp,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.cards[card.id] = card
        return card

    def add_comment(
        self,
        card: Card,
        creator_id: FizzyId,
        content: str,
        created_at: Optional[datetime] = None,
    ) -> Comment:
        timestamp = created_at or self.now()
        comment = Comment(
            id=FizzyId.generate(),
            account_id=card.account_id,
            card_id=card.id,
            creator_id=creator_id,
            content=content,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.comments[comment.id] = comment
        return comment

    def grant_access(self, board: Board, user_id: FizzyId) -> None:
        self.accesses.add((board.id, user_id))

    def assign(self, card: Card, user_id: FizzyId) -> None:
        self.assignments.add((card.id, user_id))

    def tag(self, card: Card, title: str) -> FizzyId:
        tag_id = next((tid for tid, t in self.tags.items() if t == title), None)
        if tag_id is None:
            tag_id = FizzyId.generate()
            self.tags[tag_id] = title
        self.taggings.add((card.id, tag_id))
        return tag_id

    def mark_golden(self, card: Card) -> None:
        self.goldnesses.add(card.id)

    # ==================== INSPECTION ====================

    def events_for(self, account_id: FizzyId) -> list[CreateEventInput]:
        return [event for owner, event, _ in self.events if owner == account_id]

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of every table, for before/after comparisons in tests."""
        return {name: copy.deepcopy(getattr(self, name)) for name in _STATE_FIELDS}
