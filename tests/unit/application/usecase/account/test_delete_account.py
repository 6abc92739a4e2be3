"""Unit tests for DeleteAccountUseCase."""

import pytest

from board.adapter.store import MockStoreIdentityProvider
from board.application.usecase.account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
)
from board.domain.error import StoreError
from tests.harness import create_env_fixture, make_session

unit_env = create_env_fixture()


class TestDeleteAccountUseCase:
    """Tests for DeleteAccountUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_user_and_signs_out(self, unit_env):
        # Arrange
        identity_provider = await unit_env.get(MockStoreIdentityProvider)
        use_case = await unit_env.get(DeleteAccountUseCase)
        session = make_session()
        user_id = session.user_id

        # Act
        response = await use_case.execute(DeleteAccountRequest(session=session))

        # Assert
        assert response.success is True
        assert identity_provider.deleted_user_ids == [user_id]
        assert not session.is_active

    @pytest.mark.asyncio
    async def test_failed_deletion_keeps_session(self, unit_env):
        identity_provider = await unit_env.get(MockStoreIdentityProvider)
        use_case = await unit_env.get(DeleteAccountUseCase)
        identity_provider.fail_deletes = True
        session = make_session()

        with pytest.raises(StoreError):
            await use_case.execute(DeleteAccountRequest(session=session))

        assert session.is_active
        assert identity_provider.deleted_user_ids == []
