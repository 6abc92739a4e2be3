"""Unit tests for the moderation domain service."""

from datetime import datetime, timezone

import pytest

from board.domain.error import NotAuthorizedError, StoreError
from board.domain.model import Comment, Thread
from board.domain.service import ModerationService, normalize_reason
from board.domain.value import CommentId, ThreadId
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryModerationRepository,
    InMemoryThreadRepository,
)

NOW = datetime(2025, 2, 1, tzinfo=timezone.utc)


@pytest.fixture
def service(store) -> ModerationService:
    return ModerationService(
        moderation_repository=InMemoryModerationRepository(store),
        thread_repository=InMemoryThreadRepository(store),
        comment_repository=InMemoryCommentRepository(store),
    )


@pytest.fixture
def seeded(store):
    store.threads[1] = Thread(id=ThreadId(1), title="T", body="B", created_at=NOW)
    store.comments[2] = Comment(
        id=CommentId(2), thread_id=ThreadId(1), body="C", created_at=NOW
    )
    return store


class TestNormalizeReason:
    @pytest.mark.parametrize(
        "raw, expected",
        [("  spam  ", "spam"), ("   ", None), (None, None), (42, None)],
    )
    def test_normalize_reason(self, raw, expected):
        assert normalize_reason(raw) == expected


class TestModerationService:
    """Unit tests for ModerationService."""

    @pytest.mark.asyncio
    async def test_non_admin_is_refused_before_removal(self, service, seeded, session):
        with pytest.raises(NotAuthorizedError):
            await service.remove_thread(session, ThreadId(1), "spam")

        assert not seeded.threads[1].is_deleted

    @pytest.mark.asyncio
    async def test_admin_removes_thread_with_reason(self, service, seeded, session):
        # Arrange
        seeded.admins.add(session.user_id)

        # Act
        await service.remove_thread(session, ThreadId(1), "  off topic ")

        # Assert
        assert seeded.threads[1].is_deleted
        assert seeded.removal_reasons[("thread", 1)] == "off topic"

    @pytest.mark.asyncio
    async def test_admin_removes_comment(self, service, seeded, session):
        seeded.admins.add(session.user_id)

        await service.remove_comment(session, CommentId(2), None)

        assert seeded.comments[2].is_deleted

    @pytest.mark.asyncio
    async def test_removal_of_missing_thread_fails(self, service, seeded, session):
        seeded.admins.add(session.user_id)

        with pytest.raises(StoreError):
            await service.remove_thread(session, ThreadId(99), None)

    @pytest.mark.asyncio
    async def test_recent_activity_includes_removed(self, service, seeded, session):
        seeded.admins.add(session.user_id)
        seeded.threads[1] = seeded.threads[1].model_copy(update={"is_deleted": True})

        threads, comments = await service.recent_activity(session, 50)

        assert [t.id for t in threads] == [1]
        assert threads[0].is_deleted
        assert [c.id for c in comments] == [2]
