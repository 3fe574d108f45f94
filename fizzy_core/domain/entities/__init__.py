"""
ENTITIES - Business objects with identity

Each entity:
- Is identified by a FizzyId
- Carries denormalized display fields filled in at read time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.entities.comment import Comment

__all__ = [
    "Board",
    "Card",
    "Column",
    "Comment",
]
