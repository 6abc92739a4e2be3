"""Unit tests for the comment domain service."""

import pytest

from board.domain.error import NotFoundError, StoreError, ValidationError
from board.domain.model import NewThread
from board.domain.service import CommentService
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
)
from tests.harness import make_session


class TestCommentService:
    """Unit tests for CommentService."""

    @pytest.fixture
    def service(self, store) -> CommentService:
        return CommentService(InMemoryCommentRepository(store), body_max_length=50)

    @pytest.fixture
    async def thread(self, store, session):
        return await InMemoryThreadRepository(store).create(
            session, NewThread(title="Title", body="Body")
        )

    @pytest.mark.asyncio
    async def test_create_comment_trims_body(self, service, session, thread):
        comment = await service.create_comment(session, thread.id, "  Nice  ")

        assert comment.body == "Nice"
        assert comment.parent_id is None
        assert comment.author_id == session.user_id

    @pytest.mark.asyncio
    async def test_blank_body_rejected(self, service, session, thread):
        with pytest.raises(ValidationError, match="Comment cannot be empty."):
            await service.create_comment(session, thread.id, "   ")

    @pytest.mark.asyncio
    async def test_long_body_rejected(self, service, session, thread):
        with pytest.raises(ValidationError):
            await service.create_comment(session, thread.id, "x" * 51)

    @pytest.mark.asyncio
    async def test_reply_parent_must_be_on_thread(self, service, session, store, thread):
        other = await InMemoryThreadRepository(store).create(
            session, NewThread(title="Other", body="Body")
        )
        parent = await service.create_comment(session, other.id, "Elsewhere")

        with pytest.raises(NotFoundError):
            await service.create_comment(session, thread.id, "Reply", parent.id)

    @pytest.mark.asyncio
    async def test_thread_comments_come_with_tree(self, service, session, thread):
        top = await service.create_comment(session, thread.id, "Top")
        reply = await service.create_comment(session, thread.id, "Reply", top.id)

        comments, forest, navigation = await service.get_thread_comments(thread.id)

        assert [c.id for c in comments] == [top.id, reply.id]
        assert forest[0].children[0].comment.id == reply.id
        assert navigation.parent_link(reply.id) == top.id

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, service, session, store, thread):
        comment = await service.create_comment(session, thread.id, "Mine")

        with pytest.raises(StoreError):
            await service.delete_comment(make_session(), comment.id)

        await service.delete_comment(session, comment.id)
        assert store.comments[comment.id].is_deleted

    @pytest.mark.asyncio
    async def test_indentation_capped_at_configured_depth(self, store, session, thread):
        service = CommentService(InMemoryCommentRepository(store), max_nesting_depth=1)
        top = await service.create_comment(session, thread.id, "Top")
        reply = await service.create_comment(session, thread.id, "Reply", top.id)
        await service.create_comment(session, thread.id, "Deeper", reply.id)

        _, forest, _ = await service.get_thread_comments(thread.id)

        deepest = forest[0].children[0].children[0]
        assert deepest.depth == 2
        assert deepest.visual_depth == 1
