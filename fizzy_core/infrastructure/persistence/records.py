"""
Row mapping shared by the Prisma repositories.

Raw queries return plain dicts. Ids come back as hex text (selected through
HEX()), timestamps as datetimes or ISO strings depending on the driver, and
booleans as 0/1. These helpers turn them into domain entities and back.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any, AsyncIterator, Optional

from fizzy_core.domain.entities.board import Board
from fizzy_core.domain.entities.card import Card
from fizzy_core.domain.entities.column import Column
from fizzy_core.domain.entities.comment import Comment
from fizzy_core.domain.exceptions import DomainError, InfrastructureError
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_errors(operation: str) -> AsyncIterator[None]:
    """Wrap any driver/client failure as InfrastructureError; domain errors pass through."""
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"[persistence] {operation} failed: {e}")
        raise InfrastructureError(f"{operation} failed: {e}") from e


def to_db_timestamp(value: datetime) -> str:
    """UTC wall-clock text accepted by DATETIME(6) columns; sorts like the datetime."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")


def parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def id_param(identifier: Optional[FizzyId]) -> Optional[str]:
    """Bind form of an id, used as UNHEX(?)."""
    return identifier.to_hex() if identifier is not None else None


def optional_id(value: Optional[str]) -> Optional[FizzyId]:
    return FizzyId.from_hex(value) if value else None


def card_from_row(
    row: dict[str, Any], assignee_names: list[str], tag_titles: list[str]
) -> Card:
    return Card(
        id=FizzyId.from_hex(row["id"]),
        account_id=FizzyId.from_hex(row["account_id"]),
        board_id=FizzyId.from_hex(row["board_id"]),
        column_id=optional_id(row.get("column_id")),
        creator_id=FizzyId.from_hex(row["creator_id"]),
        number=int(row["number"]),
        title=row["title"],
        description=row.get("description"),
        status=CardStatus.parse(row["status"]),
        due_on=parse_date(row.get("due_on")),
        last_active_at=parse_timestamp(row["last_active_at"]),
        created_at=parse_timestamp(row["created_at"]),
        updated_at=parse_timestamp(row["updated_at"]),
        board_name=row.get("board_name"),
        column_name=row.get("column_name"),
        column_color=row.get("column_color"),
        creator_name=row.get("creator_name"),
        assignee_names=assignee_names,
        tag_titles=tag_titles,
        is_golden=bool(row.get("is_golden")),
    )


def board_from_row(row: dict[str, Any]) -> Board:
    card_count = row.get("card_count")
    return Board(
        id=FizzyId.from_hex(row["id"]),
        account_id=FizzyId.from_hex(row["account_id"]),
        creator_id=FizzyId.from_hex(row["creator_id"]),
        name=row["name"],
        all_access=bool(row["all_access"]),
        created_at=parse_timestamp(row["created_at"]),
        updated_at=parse_timestamp(row["updated_at"]),
        card_count=int(card_count) if card_count is not None else None,
    )


def column_from_row(row: dict[str, Any]) -> Column:
    return Column(
        id=FizzyId.from_hex(row["id"]),
        account_id=FizzyId.from_hex(row["account_id"]),
        board_id=FizzyId.from_hex(row["board_id"]),
        name=row["name"],
        color=row["color"],
        position=int(row["position"]),
    )


def comment_from_row(row: dict[str, Any]) -> Comment:
    return Comment(
        id=FizzyId.from_hex(row["id"]),
        account_id=FizzyId.from_hex(row["account_id"]),
        card_id=FizzyId.from_hex(row["card_id"]),
        creator_id=FizzyId.from_hex(row["creator_id"]),
        content=row["content"],
        created_at=parse_timestamp(row["created_at"]),
        updated_at=parse_timestamp(row["updated_at"]),
        creator_name=row.get("creator_name"),
    )
