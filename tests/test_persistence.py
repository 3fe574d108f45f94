"""Prisma repositories - behaviour only visible at the SQL level.

Runs against SqlitePrisma (tests/support/sqlite_prisma.py).

Invariants:
    - Comment create is atomic: if the body insert fails, no comment row,
      no body row, and no activity bump survive
    - Driver failures surface as InfrastructureError, chained to the cause
    - Card create allocates its number in the same transaction as the insert
"""

import json
import sqlite3

import pytest

from fizzy_core.domain.exceptions import InfrastructureError
from fizzy_core.domain.ports.repositories import (
    CardFilters,
    CreateCardInput,
    CreateEventInput,
    EventAction,
)
from fizzy_core.infrastructure.persistence import PrismaCardRepository
from fizzy_core.infrastructure.persistence.records import (
    parse_date,
    parse_timestamp,
    to_db_timestamp,
    translate_errors,
)
from fizzy_core.infrastructure.persistence.rich_text import upsert_rich_text
from tests.support.world import BASE_TIME


class TestCommentAtomicity:
    async def test_failed_body_write_leaves_no_partial_state(self, sqlite_stores, world):
        client = sqlite_stores.client
        card = world.card("Write docs")
        comments_before = client.count("comments")
        bodies_before = client.count("action_text_rich_texts")
        client.fail_comment_bodies()

        with pytest.raises(InfrastructureError) as exc_info:
            await sqlite_stores.comments.create(world.account_id, card.id, world.ana, "hi")

        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
        assert client.count("comments") == comments_before
        assert client.count("action_text_rich_texts") == bodies_before
        unchanged = await sqlite_stores.cards.find_by_id(world.account_id, card.id)
        assert unchanged.last_active_at == card.last_active_at

    async def test_success_writes_three_tables(self, sqlite_stores, world):
        client = sqlite_stores.client
        bodies_before = client.count("action_text_rich_texts")

        comment = await sqlite_stores.comments.create(
            world.account_id, world.card("Ship it").id, world.ben, "Merged"
        )

        rows = await client.query_raw(
            "SELECT body FROM action_text_rich_texts "
            "WHERE record_type = 'Comment' AND record_id = UNHEX(?) AND name = 'body'",
            comment.id.to_hex(),
        )
        assert rows == [{"body": "Merged"}]
        assert client.count("action_text_rich_texts") == bodies_before + 1


class TestCardCreate:
    async def test_counter_and_row_written_together(self, sqlite_stores, world):
        client = sqlite_stores.client
        card = await sqlite_stores.cards.create(
            world.account_id,
            CreateCardInput(board_id=world.roadmap.id, creator_id=world.ana, title="New"),
        )
        rows = await client.query_raw(
            "SELECT cards_count FROM accounts WHERE id = UNHEX(?)", world.account_id.to_hex()
        )
        assert rows[0]["cards_count"] == card.number

    async def test_insert_failure_rolls_back_counter(self, sqlite_stores, world):
        client = sqlite_stores.client
        client.connection.executescript(
            "CREATE TRIGGER fail_cards BEFORE INSERT ON cards "
            "BEGIN SELECT RAISE(ABORT, 'disk full'); END;"
        )
        with pytest.raises(InfrastructureError):
            await sqlite_stores.cards.create(
                world.account_id,
                CreateCardInput(board_id=world.roadmap.id, creator_id=world.ana, title="New"),
            )
        rows = await client.query_raw(
            "SELECT cards_count FROM accounts WHERE id = UNHEX(?)", world.account_id.to_hex()
        )
        assert rows[0]["cards_count"] == 8


class TestHydration:
    async def test_relationships_loaded_per_row(self, sqlite_stores, world):
        client = sqlite_stores.client
        client.statements.clear()

        cards = await sqlite_stores.cards.list(world.account_id, CardFilters(limit=3))

        # One listing query, then assignees + tags for each row
        assert len(client.statements) == 1 + 2 * len(cards)


class TestErrorTranslation:
    async def test_closed_connection_becomes_infrastructure_error(self, sqlite_stores, world):
        sqlite_stores.client.close()
        with pytest.raises(InfrastructureError) as exc_info:
            await sqlite_stores.cards.list(world.account_id, CardFilters())
        assert isinstance(exc_info.value.__cause__, sqlite3.ProgrammingError)
        assert exc_info.value.message.startswith("Infrastructure error: list cards failed")

    async def test_translate_errors_logs_failure(self, caplog):
        with pytest.raises(InfrastructureError):
            async with translate_errors("ping"):
                raise OSError("connection reset")
        assert "ping failed: connection reset" in caplog.text

    async def test_broken_client_is_wrapped(self, world):
        class Broken:
            async def query_raw(self, sql, *params):
                raise ConnectionError("server has gone away")

        repo = PrismaCardRepository(Broken())
        with pytest.raises(InfrastructureError):
            await repo.find_by_number(world.account_id, 1)


class TestEventsTable:
    async def test_event_row_stores_action_and_json_particulars(self, sqlite_stores, world):
        card = world.card("Ship it")
        await sqlite_stores.events.create_event(
            world.account_id,
            CreateEventInput(
                board_id=card.board_id,
                eventable_id=card.id,
                eventable_type="Card",
                creator_id=world.ana,
                action=EventAction.CARD_COLUMN_CHANGED,
                particulars={"column_id": str(world.doing.id)},
            ),
        )
        rows = await sqlite_stores.client.query_raw(
            "SELECT action, eventable_type, particulars, HEX(eventable_id) AS eventable_id "
            "FROM events"
        )
        assert rows[0]["action"] == "card_column_changed"
        assert rows[0]["eventable_type"] == "Card"
        assert json.loads(rows[0]["particulars"]) == {"column_id": str(world.doing.id)}
        assert rows[0]["eventable_id"] == card.id.to_hex().upper()


class TestRecords:
    def test_timestamp_text_round_trips(self):
        assert parse_timestamp(to_db_timestamp(BASE_TIME)) == BASE_TIME

    def test_naive_datetimes_are_read_as_utc(self):
        parsed = parse_timestamp("2025-03-01 09:00:00")
        assert parsed == BASE_TIME

    def test_parse_date_accepts_datetime_and_text(self):
        assert parse_date(BASE_TIME) == BASE_TIME.date()
        assert parse_date("2025-03-01") == BASE_TIME.date()
        assert parse_date(None) is None

    async def test_upsert_rich_text_updates_in_place(self, sqlite_stores, world):
        client = sqlite_stores.client
        card = world.card("Ship it")
        stamp = to_db_timestamp(BASE_TIME)
        before = client.count("action_text_rich_texts")

        await upsert_rich_text(client, world.account_id, "Card", card.id, "description", "v2", stamp)

        assert client.count("action_text_rich_texts") == before
        reread = await sqlite_stores.cards.find_by_id(world.account_id, card.id)
        assert reread.description == "v2"
