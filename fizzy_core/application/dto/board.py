"""Board and column DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.column import Column


class BoardDTO(BaseModel):
    id: str
    name: str
    all_access: bool
    card_count: Optional[int] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, board: Board) -> "BoardDTO":
        return cls(
            id=str(board.id),
            name=board.name,
            all_access=board.all_access,
            card_count=board.card_count,
            created_at=board.created_at,
        )


class ColumnDTO(BaseModel):
    id: str
    name: str
    color: str
    position: int
    label: str  # name with colour marker, for pickers

    @classmethod
    def from_entity(cls, column: Column) -> "ColumnDTO":
        return cls(
            id=str(column.id),
            name=column.name,
            color=column.color,
            position=column.position,
            label=column.formatted_name(),
        )
