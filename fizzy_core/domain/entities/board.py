"""
Board Entity - A named collection of cards, like a project.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass
class Board:
    id: FizzyId
    account_id: FizzyId
    creator_id: FizzyId
    name: str
    all_access: bool
    created_at: datetime
    updated_at: datetime
    # Denormalized: cards on the board that are not closed or postponed
    card_count: Optional[int] = None

    def is_public(self) -> bool:
        """True when every user of the account may read and write its cards."""
        return self.all_access
