import logging

import pytest

from tests.support.stores import Stores
from tests.support.world import World, build_world


@pytest.fixture()
def world() -> World:
    """Freshly seeded fixture data (see tests/support/world.py)."""
    return build_world()


@pytest.fixture(params=["memory", "sqlite"])
def stores(request, world) -> Stores:
    """Repositories for each backend, loaded with the same world."""
    if request.param == "memory":
        yield Stores.memory(world)
    else:
        built = Stores.sqlite(world)
        yield built
        built.client.close()


@pytest.fixture()
def sqlite_stores(world) -> Stores:
    built = Stores.sqlite(world)
    yield built
    built.client.close()


@pytest.fixture()
def memory_stores(world) -> Stores:
    return Stores.memory(world)


@pytest.fixture(autouse=True)
def _fizzy_logs_visible(caplog):
    caplog.set_level(logging.DEBUG, logger="fizzy_core")
