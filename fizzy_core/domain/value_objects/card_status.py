"""
CardStatus Value Object - Where a card is in the Fizzy workflow.

- drafted: created, not yet placed in a column (awaiting triage)
- triaged: placed in a column, actively worked on
- closed: resolved
- not_now: postponed

Transitions: drafted -> triaged (move), triaged -> closed | not_now,
closed | not_now -> triaged (reopen).
"""

from __future__ import annotations

from enum import Enum

from fizzy_core.domain.exceptions.validation_error import ValidationFailedError


class CardStatus(str, Enum):
    DRAFTED = "drafted"
    TRIAGED = "triaged"
    CLOSED = "closed"
    NOT_NOW = "not_now"

    @classmethod
    def parse(cls, raw: str) -> CardStatus:
        """Parse the database string representation."""
        try:
            return cls(raw)
        except ValueError:
            raise ValidationFailedError("status", f"unknown card status {raw!r}")

    @classmethod
    def terminal(cls) -> tuple[CardStatus, ...]:
        return (cls.CLOSED, cls.NOT_NOW)

    @property
    def is_active(self) -> bool:
        return self not in CardStatus.terminal()

    def can_transition_to(self, target: CardStatus) -> bool:
        return target in _TRANSITIONS[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    def __str__(self) -> str:
        return self.value


_TRANSITIONS = {
    CardStatus.DRAFTED: frozenset({CardStatus.TRIAGED}),
    # moving a triaged card to another column keeps it triaged
    CardStatus.TRIAGED: frozenset({CardStatus.TRIAGED, CardStatus.CLOSED, CardStatus.NOT_NOW}),
    CardStatus.CLOSED: frozenset({CardStatus.TRIAGED}),
    CardStatus.NOT_NOW: frozenset({CardStatus.TRIAGED}),
}

_DISPLAY_NAMES = {
    CardStatus.DRAFTED: "Draft",
    CardStatus.TRIAGED: "Active",
    CardStatus.CLOSED: "Closed",
    CardStatus.NOT_NOW: "Postponed",
}

_EMOJI = {
    CardStatus.DRAFTED: "📝",
    CardStatus.TRIAGED: "📋",
    CardStatus.CLOSED: "✅",
    CardStatus.NOT_NOW: "⏸️",
}
