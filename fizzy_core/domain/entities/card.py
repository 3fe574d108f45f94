"""
Card Entity - The main work item of a Fizzy account.

A card is known to users by its account-scoped number (#42) and to the
database by its FizzyId. The display fields at the bottom are assembled by
the read path from joins and per-card lookups; the write path never stores
them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass
class Card:
    id: FizzyId
    account_id: FizzyId
    board_id: FizzyId
    creator_id: FizzyId
    number: int
    title: str
    status: CardStatus
    last_active_at: datetime
    created_at: datetime
    updated_at: datetime
    column_id: Optional[FizzyId] = None
    description: Optional[str] = None
    due_on: Optional[date] = None

    # Denormalized fields for display
    board_name: Optional[str] = None
    column_name: Optional[str] = None
    column_color: Optional[str] = None
    creator_name: Optional[str] = None
    assignee_names: list[str] = field(default_factory=list)
    tag_titles: list[str] = field(default_factory=list)
    is_golden: bool = False

    def formatted_number(self) -> str:
        return f"#{self.number}"

    def is_active(self) -> bool:
        return self.status.is_active

    def web_url(self, base_url: Optional[str]) -> Optional[str]:
        """Link to the card in the Fizzy web UI, if a base URL is configured."""
        if not base_url:
            return None
        return f"{base_url.rstrip('/')}/{self.account_id}/cards/{self.number}"
