"""Unit tests for the admin use cases."""

import pytest

from board.application.usecase.admin import (
    GetRecentActivityRequest,
    GetRecentActivityUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    RemoveThreadRequest,
    RemoveThreadUseCase,
)
from board.domain.error import NotAuthorizedError, StoreError
from board.domain.model import Comment, Thread
from board.domain.value import CommentId, ThreadId
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, make_session

unit_env = create_env_fixture()


async def seed(unit_env) -> InMemoryStore:
    store = await unit_env.get(InMemoryStore)
    store.threads[1] = Thread(
        id=ThreadId(1), title="Spam", body="Buy now", created_at=store.now()
    )
    store.comments[2] = Comment(
        id=CommentId(2), thread_id=ThreadId(1), body="Also spam", created_at=store.now()
    )
    return store


class TestRemoveContentUseCases:
    """Tests for RemoveThreadUseCase and RemoveCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_removes_thread(self, unit_env):
        # Arrange
        store = await seed(unit_env)
        use_case = await unit_env.get(RemoveThreadUseCase)
        admin = make_session()
        store.admins.add(admin.user_id)

        # Act
        response = await use_case.execute(
            RemoveThreadRequest(session=admin, thread_id=1, reason="spam")
        )

        # Assert
        assert response.success is True
        assert store.threads[1].is_deleted
        assert store.removal_reasons[("thread", 1)] == "spam"

    @pytest.mark.asyncio
    async def test_member_cannot_remove_comment(self, unit_env):
        store = await seed(unit_env)
        use_case = await unit_env.get(RemoveCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RemoveCommentRequest(session=make_session(), comment_id=2)
            )

        assert not store.comments[2].is_deleted

    @pytest.mark.asyncio
    async def test_rpc_failure(self, unit_env):
        store = await seed(unit_env)
        use_case = await unit_env.get(RemoveCommentUseCase)
        admin = make_session()
        store.admins.add(admin.user_id)
        store.failing.add("admin_soft_delete_comment")

        with pytest.raises(StoreError):
            await use_case.execute(RemoveCommentRequest(session=admin, comment_id=2))

    @pytest.mark.asyncio
    async def test_recent_activity(self, unit_env):
        store = await seed(unit_env)
        use_case = await unit_env.get(GetRecentActivityUseCase)
        admin = make_session()
        store.admins.add(admin.user_id)

        response = await use_case.execute(GetRecentActivityRequest(session=admin))

        assert [t.id for t in response.threads] == [1]
        assert [c.id for c in response.comments] == [2]
