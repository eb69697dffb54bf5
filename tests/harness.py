"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for per-test environment fixtures.

    Each test gets a fresh container, and with it a fresh in-memory board,
    lock map and reconciler. The fixture yields a request scope of that
    container, so repositories and services share one unit of work while
    APP-scoped singletons are reachable from the same handle.

    Args:
        unmock: Components to run with their production implementation

    Returns:
        Pytest fixture yielding a request-scoped AsyncContainer

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_transfer(unit_env):
            ledger = await unit_env.get(PointsLedgerService)
            outcome = await ledger.transfer(sender.id, recipient.id, 10)
            assert outcome.ok
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
