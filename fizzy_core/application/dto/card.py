"""Card DTOs handed to the chat facade."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from fizzy_core.config.settings import Config
from fizzy_core.domain.entities.card import Card


class CardDTO(BaseModel):
    """Card with its display fields, ids as base36 text."""

    id: str
    number: int
    title: str
    description: Optional[str] = None
    status: str
    status_label: str
    board_id: str
    board_name: Optional[str] = None
    column_id: Optional[str] = None
    column_name: Optional[str] = None
    column_color: Optional[str] = None
    creator_name: Optional[str] = None
    assignee_names: list[str] = []
    tag_titles: list[str] = []
    is_golden: bool = False
    due_on: Optional[date] = None
    last_active_at: datetime
    created_at: datetime
    updated_at: datetime
    url: Optional[str] = None

    @classmethod
    def from_entity(cls, card: Card, base_url: Optional[str] = None) -> "CardDTO":
        """``base_url`` overrides Config.FIZZY_BASE_URL for the card link."""
        return cls(
            id=str(card.id),
            number=card.number,
            title=card.title,
            description=card.description,
            status=card.status.value,
            status_label=f"{card.status.emoji} {card.status.display_name}",
            board_id=str(card.board_id),
            board_name=card.board_name,
            column_id=str(card.column_id) if card.column_id else None,
            column_name=card.column_name,
            column_color=card.column_color,
            creator_name=card.creator_name,
            assignee_names=list(card.assignee_names),
            tag_titles=list(card.tag_titles),
            is_golden=card.is_golden,
            due_on=card.due_on,
            last_active_at=card.last_active_at,
            created_at=card.created_at,
            updated_at=card.updated_at,
            url=card.web_url(base_url or Config.FIZZY_BASE_URL),
        )


class CardListDTO(BaseModel):
    cards: list[CardDTO]
    total: int
    board_name: Optional[str] = None
