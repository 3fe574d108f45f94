"""Comment DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from fizzy_core.domain.entities.comment import Comment


class CommentDTO(BaseModel):
    id: str
    card_id: str
    content: str
    creator_name: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentDTO":
        return cls(
            id=str(comment.id),
            card_id=str(comment.card_id),
            content=comment.content,
            creator_name=comment.creator_name,
            created_at=comment.created_at,
        )
