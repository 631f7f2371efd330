"""Container fixtures shared by unit and integration tests.

Integration tests expect a migrated PostgreSQL database at ``DATABASE__URL``.
"""

import pytest_asyncio

from hub.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped container.

    Every test gets a fresh APP container, so in-memory repositories, the
    rate limiter and the captured outbox start empty.

    Args:
        unmock: Components that should use their production implementation

    Example::

        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_group(unit_env):
            group_service = await unit_env.get(GroupService)
    """

    @pytest_asyncio.fixture
    async def environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return environment
