"""
Comment Entity - A note left on a card.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fizzy_core.domain.value_objects.fizzy_id import FizzyId


@dataclass
class Comment:
    id: FizzyId
    account_id: FizzyId
    card_id: FizzyId
    creator_id: FizzyId
    content: str
    created_at: datetime
    updated_at: datetime
    creator_name: Optional[str] = None
