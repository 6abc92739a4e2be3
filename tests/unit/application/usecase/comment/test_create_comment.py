"""Unit tests for CreateCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Thread
from board.domain.value import ThreadId
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, make_session

unit_env = create_env_fixture()


async def seed(unit_env, deleted: bool = False) -> InMemoryStore:
    store = await unit_env.get(InMemoryStore)
    store.threads[1] = Thread(
        id=ThreadId(1),
        title="Thread",
        body="Body",
        created_at=store.now(),
        is_deleted=deleted,
    )
    return store


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_comment_and_reply(self, unit_env):
        # Arrange
        store = await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        session = make_session()

        # Act
        top = await use_case.execute(
            CreateCommentRequest(session=session, thread_id=1, body="  First!  ")
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                session=session, thread_id=1, body="Reply", parent_id=top.id
            )
        )

        # Assert
        assert top.body == "First!"
        assert top.score == 0
        assert top.current_vote == 0
        assert reply.parent_id == top.id
        assert reply.links.parent == top.id
        assert store.comments[reply.id].author_id == session.user_id

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Comment cannot be empty."):
            await use_case.execute(
                CreateCommentRequest(session=make_session(), thread_id=1, body="   ")
            )

    @pytest.mark.asyncio
    async def test_removed_thread_takes_no_comments(self, unit_env):
        await seed(unit_env, deleted=True)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="This thread has been removed."):
            await use_case.execute(
                CreateCommentRequest(session=make_session(), thread_id=1, body="hi")
            )

    @pytest.mark.asyncio
    async def test_parent_must_exist(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    session=make_session(), thread_id=1, body="hi", parent_id=77
                )
            )
