"""
DTOs - Data Transfer Objects

DTOs for transferring data to the chat facade:
- card.py    → CardDTO, CardListDTO
- board.py   → BoardDTO, ColumnDTO
- comment.py → CommentDTO

Note: These are different from domain entities.
DTOs are serializable views, entities are for business logic.
"""

from fizzy_core.application.dto.board import BoardDTO, ColumnDTO
from fizzy_core.application.dto.card import CardDTO, CardListDTO
from fizzy_core.application.dto.comment import CommentDTO

__all__ = [
    "BoardDTO",
    "CardDTO",
    "CardListDTO",
    "ColumnDTO",
    "CommentDTO",
]
