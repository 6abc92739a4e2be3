"""Test configuration and fixtures."""

import pytest

from board.domain.model import AuthUser, SessionContext
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import make_session, make_user


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user() -> AuthUser:
    return make_user("member@example.org")


@pytest.fixture
def session(user: AuthUser) -> SessionContext:
    return make_session(user)
