"""Unit tests for the session and profile use cases."""

from uuid import uuid4

import pytest

from board.application.usecase.profile import (
    GetOwnProfileRequest,
    GetOwnProfileUseCase,
    GetPublicProfileRequest,
    GetPublicProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from board.application.usecase.session import StartSessionRequest, StartSessionUseCase
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, make_session, make_user

unit_env = create_env_fixture()


class TestStartSessionUseCase:
    """Tests for StartSessionUseCase."""

    @pytest.mark.asyncio
    async def test_creates_profile_row(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(StartSessionUseCase)
        session = make_session(make_user("new@example.org"))

        # Act
        response = await use_case.execute(StartSessionRequest(session=session))

        # Assert
        assert response.user_id == session.user_id
        assert response.email == "new@example.org"
        assert session.user_id in store.profiles
        assert response.profile.label.startswith("user-")


class TestProfileUseCases:
    """Tests for the profile use cases."""

    @pytest.mark.asyncio
    async def test_update_then_read_own_and_public(self, unit_env):
        update = await unit_env.get(UpdateProfileUseCase)
        own = await unit_env.get(GetOwnProfileUseCase)
        public = await unit_env.get(GetPublicProfileUseCase)
        session = make_session()

        await update.execute(
            UpdateProfileRequest(session=session, display_name=" Curie ", bio="Physics")
        )
        mine = await own.execute(GetOwnProfileRequest(session=session))
        theirs = await public.execute(GetPublicProfileRequest(user_id=session.user_id))

        assert mine.display_name == "Curie"
        assert theirs.label == "Curie"
        assert theirs.bio == "Physics"

    @pytest.mark.asyncio
    async def test_own_profile_without_row_uses_account_date(self, unit_env):
        own = await unit_env.get(GetOwnProfileUseCase)
        session = make_session()

        profile = await own.execute(GetOwnProfileRequest(session=session))

        assert profile.display_name is None
        assert profile.created_at == session.user.created_at

    @pytest.mark.asyncio
    async def test_unknown_member_gets_placeholder(self, unit_env):
        public = await unit_env.get(GetPublicProfileUseCase)
        user_id = uuid4()

        profile = await public.execute(GetPublicProfileRequest(user_id=user_id))

        assert profile.id == user_id
        assert profile.label == f"user-{str(user_id)[:8]}"
