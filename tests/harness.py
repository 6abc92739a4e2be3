"""Test harness for use case and end-to-end tests.

Everything runs against the mock providers by default: in-memory store
tables, a mock auth service and in-memory media storage.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional, TypeVar
from uuid import uuid4

import jwt
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from board.adapter.store import MockStoreIdentityProvider
from board.domain.model import AuthUser, SessionContext
from board.domain.value import UserId
from board.interface.api.app import create_app
from board.util.di import Component
from board.util.di.container import setup_di
from tests.di import build_test_container

T = TypeVar("T")


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        async def test_toggle(unit_env):
            use_case = await unit_env.get(ToggleVoteUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for a ``TestClient`` fixture wired to a test container.

    The client is entered as a context manager so that ``resolve`` can
    reach the container from the client's event loop.
    """

    @pytest.fixture
    def _client() -> Iterator[TestClient]:
        app_instance = create_app()
        container = build_test_container(unmock=unmock or set())
        setup_di(app_instance, container)
        with TestClient(app_instance) as client:
            yield client

    return _client


def resolve(client: TestClient, dependency: type[T]) -> T:
    """Fetch an APP-scoped dependency from the client's container."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency)


def make_user(email: Optional[str] = None) -> AuthUser:
    return AuthUser(
        id=UserId(uuid4()),
        email=email,
        created_at=datetime(2024, 6, 1, tzinfo=timezone.utc),
    )


def make_session(user: Optional[AuthUser] = None) -> SessionContext:
    user = user or make_user()
    return SessionContext(user=user, access_token=f"token-{user.id}")


def make_token(user: AuthUser, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Access token shaped like the store's, signed with a throwaway key."""
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, "test-signing-key-for-access-tokens-only", algorithm="HS256")


def sign_in(
    identity_provider: MockStoreIdentityProvider, user: Optional[AuthUser] = None
) -> tuple[AuthUser, dict[str, str]]:
    """Register a user with the mock auth service.

    Returns:
        The user and the headers to send with their requests
    """
    user = user or make_user()
    token = make_token(user)
    identity_provider.register(token, user)
    return user, {"Authorization": f"Bearer {token}"}
