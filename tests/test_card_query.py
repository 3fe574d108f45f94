"""Card query builder - clause/parameter pairing and SQL-vs-memory agreement.

Invariants:
    - For every combination of filters, the number and order of "?" equals
      the bound parameters
    - The account scope is always the first predicate
    - Running the compiled SQL (SQLite) returns exactly what filtering the
      same fixture in memory returns, in the same order
"""

from itertools import combinations

import pytest

from fizzy_core.domain.ports.repositories import CardFilters
from fizzy_core.domain.value_objects import CardStatus, FizzyId
from fizzy_core.infrastructure.persistence.card_query import (
    MAX_ROWS,
    CardQueryBuilder,
    Clause,
    compile_card_query,
    filter_clauses,
    join_clauses,
)

ACCOUNT = FizzyId.generate()
ASSIGNEE = FizzyId.generate()
CREATOR = FizzyId.generate()
BOARD = FizzyId.generate()
COLUMN = FizzyId.generate()

FILTER_VALUES = {
    "assignee_id": ASSIGNEE,
    "creator_id": CREATOR,
    "board_id": BOARD,
    "column_id": COLUMN,
    "status": (CardStatus.TRIAGED, CardStatus.DRAFTED),
    "exclude_status": (CardStatus.CLOSED, CardStatus.NOT_NOW),
    "is_golden": True,
}

EXPECTED_PARAMS = {
    "assignee_id": [ASSIGNEE.to_hex()],
    "creator_id": [CREATOR.to_hex()],
    "board_id": [BOARD.to_hex()],
    "column_id": [COLUMN.to_hex()],
    "status": ["triaged", "drafted"],
    "exclude_status": ["closed", "not_now"],
    "is_golden": [],
}

ALL_SUBSETS = [
    subset
    for size in range(len(FILTER_VALUES) + 1)
    for subset in combinations(FILTER_VALUES, size)
]


class TestClause:
    def test_mismatched_placeholder_count_is_rejected(self):
        with pytest.raises(ValueError):
            Clause("c.title = ?", ())
        with pytest.raises(ValueError):
            Clause("c.title = ?", ("a", "b"))

    def test_join_keeps_fragments_and_params_together(self):
        sql, params = join_clauses(
            [Clause("a = ?", (1,)), Clause("b IN (?, ?)", (2, 3)), Clause("c IS NULL")],
            " AND ",
        )
        assert sql == "a = ? AND b IN (?, ?) AND c IS NULL"
        assert params == [1, 2, 3]


class TestPlaceholderOrder:
    @pytest.mark.parametrize("subset", ALL_SUBSETS, ids=lambda s: "+".join(s) or "none")
    def test_placeholders_match_params_for_every_subset(self, subset):
        filters = CardFilters(**{name: FILTER_VALUES[name] for name in subset})
        query = compile_card_query(ACCOUNT, filters)

        assert query.sql.count("?") == len(query.params)

        expected = [ACCOUNT.to_hex()]
        for name in FILTER_VALUES:  # clause order is the field order
            if name in subset:
                expected.extend(EXPECTED_PARAMS[name])
        assert query.params == expected

    def test_account_scope_comes_first(self):
        query = compile_card_query(ACCOUNT, CardFilters(board_id=BOARD))
        assert "WHERE c.account_id = UNHEX(?)" in query.sql
        assert query.params[0] == ACCOUNT.to_hex()

    def test_empty_status_lists_add_no_clause(self):
        assert filter_clauses(CardFilters(status=(), exclude_status=())) == []

    def test_golden_false_uses_not_exists(self):
        (clause,) = filter_clauses(CardFilters(is_golden=False))
        assert clause.sql.startswith("NOT EXISTS")

    def test_assignee_filter_uses_exists_not_join(self):
        (clause,) = filter_clauses(CardFilters(assignee_id=ASSIGNEE))
        assert clause.sql.startswith("EXISTS (SELECT 1 FROM assignments")


class TestPaging:
    def test_no_limit_means_no_limit_clause(self):
        query = compile_card_query(ACCOUNT, CardFilters())
        assert "LIMIT" not in query.sql
        assert query.params == [ACCOUNT.to_hex()]

    def test_limit_and_offset_bound_last(self):
        query = compile_card_query(ACCOUNT, CardFilters(board_id=BOARD, limit=20, offset=40))
        assert query.sql.rstrip().endswith("LIMIT ? OFFSET ?")
        assert query.params[-2:] == [20, 40]

    def test_offset_without_limit_binds_max_rows(self):
        query = compile_card_query(ACCOUNT, CardFilters(offset=5))
        assert query.params[-2:] == [MAX_ROWS, 5]

    def test_ordering_is_activity_then_id(self):
        query = CardQueryBuilder(ACCOUNT).build()
        assert "ORDER BY c.last_active_at DESC, c.id DESC" in query.sql


def _oracle_cases(world):
    return [
        CardFilters(),
        CardFilters(board_id=world.roadmap.id),
        CardFilters(assignee_id=world.ana),
        CardFilters(creator_id=world.cy, board_id=world.roadmap.id),
        CardFilters(column_id=world.backlog.id),
        CardFilters(status=(CardStatus.TRIAGED,)),
        CardFilters(exclude_status=CardStatus.terminal()),
        CardFilters(status=(CardStatus.TRIAGED, CardStatus.CLOSED), exclude_status=(CardStatus.CLOSED,)),
        CardFilters(is_golden=True),
        CardFilters(is_golden=False, board_id=world.roadmap.id),
        CardFilters(assignee_id=world.cy, is_golden=True),
        CardFilters(limit=3),
        CardFilters(limit=2, offset=2),
        CardFilters(offset=6),
        CardFilters(limit=0),
    ]


class TestSqlMatchesMemory:
    async def test_every_case_agrees(self, world, memory_stores, sqlite_stores):
        for filters in _oracle_cases(world):
            expected = await memory_stores.cards.list(world.account_id, filters)
            actual = await sqlite_stores.cards.list(world.account_id, filters)
            assert [c.id for c in actual] == [c.id for c in expected], filters

    async def test_disjoint_filter_subsets_agree(self, world, memory_stores, sqlite_stores):
        fields = {
            "assignee_id": world.ana,
            "creator_id": world.ana,
            "board_id": world.roadmap.id,
            "exclude_status": CardStatus.terminal(),
            "is_golden": True,
        }
        for size in range(len(fields) + 1):
            for subset in combinations(fields, size):
                filters = CardFilters(**{name: fields[name] for name in subset})
                expected = await memory_stores.cards.list(world.account_id, filters)
                actual = await sqlite_stores.cards.list(world.account_id, filters)
                assert actual == expected, subset

    async def test_hydrated_cards_are_identical(self, world, memory_stores, sqlite_stores):
        expected = await memory_stores.cards.list(world.account_id, CardFilters())
        actual = await sqlite_stores.cards.list(world.account_id, CardFilters())
        assert actual == expected
