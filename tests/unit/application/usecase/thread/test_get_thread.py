"""Unit tests for GetThreadUseCase."""

from datetime import datetime, timezone

from unittest.mock import patch

import pytest

from board.application.usecase.thread import GetThreadRequest, GetThreadUseCase
from board.domain.error import NotFoundError
from board.domain.model import Comment, Profile, Thread
from board.domain.service import VoteLedger
from board.domain.value import CommentId, ThreadId
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, make_session, make_user

unit_env = create_env_fixture()


def seed_thread(store: InMemoryStore) -> Thread:
    """Thread 1 with comments: 10 <- 11 <- 12, and a later root 13 (removed)."""
    author = make_user()
    store.profiles[author.id] = Profile(id=author.id, display_name="Ada")
    thread = Thread(
        id=ThreadId(1),
        title="Negative result",
        body="We tried.",
        created_at=store.now(),
        author_id=author.id,
    )
    store.threads[thread.id] = thread
    for cid, parent in ((10, None), (11, 10), (12, 11), (13, None)):
        store.comments[cid] = Comment(
            id=CommentId(cid),
            thread_id=thread.id,
            body=f"comment {cid}",
            created_at=store.now(),
            author_id=author.id if cid != 11 else None,
            parent_id=CommentId(parent) if parent else None,
            is_deleted=cid == 13,
        )
    return thread


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_page_with_tree_scores_and_links(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(GetThreadUseCase)
        seed_thread(store)
        session = make_session()
        store.votes[(session.user_id, "thread", 1)] = 1
        store.votes[(make_user().id, "comment", 12)] = -1
        store.votes[(session.user_id, "comment", 12)] = -1

        # Act
        page = await use_case.execute(GetThreadRequest(thread_id=1, session=session))

        # Assert
        assert page.thread.title == "Negative result"
        assert page.thread.author_label == "Ada"
        assert page.thread.score == 1
        assert page.thread.current_vote == 1
        assert page.thread.comment_count == 4

        assert [c.id for c in page.comments] == [13, 10]
        removed, root = page.comments
        assert removed.body == "[removed]"
        assert removed.links.next == 10
        assert root.links.previous == 13

        reply = root.children[0]
        assert reply.author_label == "anonymous"
        assert reply.links.parent == 10
        assert reply.links.root is None

        nested = reply.children[0]
        assert nested.depth == 2
        assert nested.links.root == 10
        assert nested.score == -2
        assert nested.current_vote == -1

    @pytest.mark.asyncio
    async def test_anonymous_reader_has_no_votes(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(GetThreadUseCase)
        seed_thread(store)
        store.votes[(make_user().id, "thread", 1)] = 1

        page = await use_case.execute(GetThreadRequest(thread_id=1))

        assert page.thread.score == 1
        assert page.thread.current_vote == 0

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(thread_id=404))

    @pytest.mark.asyncio
    async def test_page_renders_when_votes_cannot_be_read(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        use_case = await unit_env.get(GetThreadUseCase)
        seed_thread(store)
        session = make_session()
        store.votes[(session.user_id, "thread", 1)] = 1
        store.failing.add("vote_scores")

        # Act
        with patch.object(VoteLedger, "close", autospec=True) as close:
            page = await use_case.execute(
                GetThreadRequest(thread_id=1, session=session)
            )

        # Assert
        assert page.thread.title == "Negative result"
        assert page.thread.score == 0
        assert page.thread.current_vote == 0
        assert [c.id for c in page.comments] == [13, 10]
        assert all(c.score == 0 for c in page.comments)
        close.assert_called_once()
