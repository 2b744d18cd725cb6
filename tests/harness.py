"""Per-test DI environments.

``create_env_fixture`` returns a pytest fixture; bind it to a module-level
name and request that name in tests::

    unit_env = create_env_fixture()

    @pytest.mark.asyncio
    async def test_create_group(unit_env):
        service = await unit_env.get(GroupService)
        group = await service.create_group(UserId("alice"), "Algebra")
        assert group.post_count == 0
"""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a fixture yielding a request-scoped container.

    Each test gets a new container, so the in-memory database starts
    empty. Components named in ``unmock`` use their production provider.
    """

    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _environment
