"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value
- Is immutable (frozen dataclass or Enum)
- Validates itself on creation
"""

from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.domain.value_objects.card_status import CardStatus

__all__ = [
    "FizzyId",
    "CardStatus",
]
