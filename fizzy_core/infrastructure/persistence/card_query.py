"""
Card Query Builder - compiles CardFilters into account-scoped SQL.

Every filter field becomes one Clause that carries its SQL fragment AND the
values for that fragment's placeholders. Clauses are then joined in a single
pass, so the order of "?" in the text and the order of bound parameters come
from the same list and cannot drift apart:

    Clause("c.board_id = UNHEX(?)", ("0a1b...",))
    Clause("c.status NOT IN (?, ?)", ("closed", "not_now"))
        -> "... WHERE c.account_id = UNHEX(?) AND c.board_id = UNHEX(?)
               AND c.status NOT IN (?, ?) ..."
        -> [account_hex, board_hex, "closed", "not_now"]

The row carries only the card's own columns plus single-valued joins (board,
column, creator, description body, golden flag). Assignee names and tag titles
are one-to-many, so they are fetched per row by a second keyed query instead of
being joined in; this trades N+1 small queries for never duplicating rows.

Placeholders are positional "?" (MySQL flavour of Prisma's query_raw).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from fizzy_core.domain.ports.repositories.card_repository import CardFilters
from fizzy_core.domain.value_objects.card_status import CardStatus
from fizzy_core.domain.value_objects.fizzy_id import FizzyId
from fizzy_core.infrastructure.persistence.records import id_param

# Row count bound when an offset is given without a limit
MAX_ROWS = 9223372036854775807

CARD_SELECT = """
SELECT
    HEX(c.id) AS id,
    HEX(c.account_id) AS account_id,
    HEX(c.board_id) AS board_id,
    HEX(c.column_id) AS column_id,
    HEX(c.creator_id) AS creator_id,
    c.number AS number,
    c.title AS title,
    c.status AS status,
    c.due_on AS due_on,
    c.last_active_at AS last_active_at,
    c.created_at AS created_at,
    c.updated_at AS updated_at,
    d.body AS description,
    b.name AS board_name,
    col.name AS column_name,
    col.color AS column_color,
    u.name AS creator_name,
    CASE WHEN EXISTS (
        SELECT 1 FROM card_goldnesses cg WHERE cg.card_id = c.id
    ) THEN 1 ELSE 0 END AS is_golden
FROM cards c
INNER JOIN boards b ON b.id = c.board_id
LEFT JOIN columns col ON col.id = c.column_id
LEFT JOIN users u ON u.id = c.creator_id
LEFT JOIN action_text_rich_texts d
    ON d.record_type = 'Card' AND d.record_id = c.id AND d.name = 'description'
""".strip()

CARD_ORDER_BY = "ORDER BY c.last_active_at DESC, c.id DESC"

ASSIGNEE_NAMES_QUERY = """
SELECT u.name AS name
FROM assignments a
INNER JOIN users u ON u.id = a.assignee_id
WHERE a.card_id = UNHEX(?)
ORDER BY u.name ASC
""".strip()

TAG_TITLES_QUERY = """
SELECT t.title AS title
FROM taggings tg
INNER JOIN tags t ON t.id = tg.tag_id
WHERE tg.card_id = UNHEX(?)
ORDER BY t.title ASC
""".strip()


@dataclass(frozen=True)
class Clause:
    """One SQL fragment together with the values for its placeholders."""

    sql: str
    params: tuple[Any, ...] = ()

    def __post_init__(self):
        if self.sql.count("?") != len(self.params):
            raise ValueError(
                f"Clause has {self.sql.count('?')} placeholders "
                f"but {len(self.params)} params: {self.sql}"
            )


@dataclass(frozen=True)
class CompiledQuery:
    sql: str
    params: list[Any]


def join_clauses(clauses: Iterable[Clause], separator: str) -> tuple[str, list[Any]]:
    """Concatenate fragments and their params in one pass."""
    fragments: list[str] = []
    params: list[Any] = []
    for clause in clauses:
        fragments.append(clause.sql)
        params.extend(clause.params)
    return separator.join(fragments), params


def id_equals(column: str, identifier: FizzyId) -> Clause:
    return Clause(f"{column} = UNHEX(?)", (id_param(identifier),))


def status_in(statuses: Sequence[CardStatus], negate: bool = False) -> Clause:
    placeholders = ", ".join("?" for _ in statuses)
    operator = "NOT IN" if negate else "IN"
    return Clause(
        f"c.status {operator} ({placeholders})",
        tuple(status.value for status in statuses),
    )


def filter_clauses(filters: CardFilters) -> list[Clause]:
    """Predicates for the filters that are set, in a fixed field order."""
    clauses: list[Clause] = []

    if filters.assignee_id is not None:
        clauses.append(
            Clause(
                "EXISTS (SELECT 1 FROM assignments fa "
                "WHERE fa.card_id = c.id AND fa.assignee_id = UNHEX(?))",
                (id_param(filters.assignee_id),),
            )
        )
    if filters.creator_id is not None:
        clauses.append(id_equals("c.creator_id", filters.creator_id))
    if filters.board_id is not None:
        clauses.append(id_equals("c.board_id", filters.board_id))
    if filters.column_id is not None:
        clauses.append(id_equals("c.column_id", filters.column_id))
    if filters.status:
        clauses.append(status_in(filters.status))
    if filters.exclude_status:
        clauses.append(status_in(filters.exclude_status, negate=True))
    if filters.is_golden is not None:
        exists = "EXISTS" if filters.is_golden else "NOT EXISTS"
        clauses.append(
            Clause(
                f"{exists} (SELECT 1 FROM card_goldnesses fg WHERE fg.card_id = c.id)"
            )
        )

    return clauses


class CardQueryBuilder:
    """
    Accumulates clauses for one card SELECT.

    Usage:
        query = (
            CardQueryBuilder(account_id)
            .filter(CardFilters(board_id=board.id, limit=20))
            .build()
        )
        rows = await prisma.query_raw(query.sql, *query.params)
    """

    def __init__(self, account_id: FizzyId):
        self._clauses: list[Clause] = [id_equals("c.account_id", account_id)]
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def where(self, clause: Clause) -> CardQueryBuilder:
        self._clauses.append(clause)
        return self

    def filter(self, filters: CardFilters) -> CardQueryBuilder:
        self._clauses.extend(filter_clauses(filters))
        self._limit = filters.limit
        self._offset = filters.offset
        return self

    def build(self) -> CompiledQuery:
        where_sql, params = join_clauses(self._clauses, " AND ")
        parts = [CARD_SELECT, f"WHERE {where_sql}", CARD_ORDER_BY]

        if self._limit is not None or self._offset is not None:
            parts.append("LIMIT ? OFFSET ?")
            params.append(self._limit if self._limit is not None else MAX_ROWS)
            params.append(self._offset or 0)

        return CompiledQuery(sql="\n".join(parts), params=params)


def compile_card_query(account_id: FizzyId, filters: CardFilters) -> CompiledQuery:
    return CardQueryBuilder(account_id).filter(filters).build()
