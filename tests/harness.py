"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL instance reachable through the
settings loaded from the environment (``DATABASE__URL``).
"""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh test container and yields a request-scoped
    container for service access, so every test starts with empty
    in-memory repositories.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
