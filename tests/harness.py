"""Test harness for use case and service tests."""

import pytest_asyncio

from tests.di import build_test_container


def create_env_fixture():
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container and yields a
    request-scoped container for service access.

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_parse(unit_env):
            use_case = await unit_env.get(ParseInvitationUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container()

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
