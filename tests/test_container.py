"""Dishka container wiring."""

import pytest

from fizzy_core.application.commands.cards import CreateCardCommand, CreateCardHandler
from fizzy_core.application.queries.boards import ListBoardsHandler, ListBoardsQuery
from fizzy_core.infrastructure.memory import InMemoryDatabase
from fizzy_core.setup.ioc import create_container
from fizzy_core.setup.ioc.container import store_provider


async def test_memory_container_runs_handlers_on_shared_database(world):
    container = await create_container("memory", database=world.db)
    try:
        async with container() as request:
            handler = await request.get(CreateCardHandler)
            card = await handler.execute(
                CreateCardCommand(
                    account_id=world.account_id,
                    user_id=world.ana,
                    board_id=world.roadmap.id,
                    title="Wired",
                )
            )

        async with container() as request:
            db = await request.get(InMemoryDatabase)
            list_boards = await request.get(ListBoardsHandler)
            boards = await list_boards.execute(
                ListBoardsQuery(account_id=world.account_id, user_id=world.ana)
            )
    finally:
        await container.close()

    assert db is world.db
    assert card.id in world.db.cards
    assert [b.name for b in boards] == ["Ops", "Roadmap"]


async def test_backend_name_is_case_insensitive():
    container = await create_container("MEMORY")
    try:
        async with container() as request:
            assert isinstance(await request.get(InMemoryDatabase), InMemoryDatabase)
    finally:
        await container.close()


async def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="Unknown STORE_BACKEND"):
        await create_container("postgres")


def test_store_provider_rejects_unknown_backend():
    with pytest.raises(ValueError):
        store_provider("sqlite")
