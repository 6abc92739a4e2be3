"""In-memory moderation and invite repositories for testing."""

from typing import Optional

from board.domain.error import NotAuthorizedError, StoreError
from board.domain.model import SessionContext
from board.domain.repository import InviteRepository, ModerationRepository
from board.domain.value import CommentId, InviteToken, ThreadId

from .store import InMemoryStore


class InMemoryModerationRepository(ModerationRepository):
    """In-memory implementation of ModerationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def enforce_admin(self, session: SessionContext) -> None:
        if session.user_id not in self.store.admins:
            raise NotAuthorizedError("moderate", str(session.user_id))

    async def remove_thread(
        self, session: SessionContext, thread_id: ThreadId, reason: Optional[str]
    ) -> None:
        self.store.check("admin_soft_delete_thread")
        thread = self.store.threads.get(thread_id)
        if thread is None:
            raise StoreError("admin_soft_delete_thread", "thread does not exist")
        self.store.threads[thread_id] = thread.model_copy(update={"is_deleted": True})
        self.store.removal_reasons[("thread", thread_id)] = reason

    async def remove_comment(
        self, session: SessionContext, comment_id: CommentId, reason: Optional[str]
    ) -> None:
        self.store.check("admin_soft_delete_comment")
        comment = self.store.comments.get(comment_id)
        if comment is None:
            raise StoreError("admin_soft_delete_comment", "comment does not exist")
        self.store.comments[comment_id] = comment.model_copy(
            update={"is_deleted": True}
        )
        self.store.removal_reasons[("comment", comment_id)] = reason


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    Tokens are single use.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def enforce_invite(
        self, session: SessionContext, token: Optional[InviteToken]
    ) -> None:
        if session.user_id in self.store.invited_users:
            return
        if token is None or token.root not in self.store.invite_tokens:
            raise NotAuthorizedError("join without an invite", str(session.user_id))
        self.store.invite_tokens.discard(token.root)
        self.store.invited_users.add(session.user_id)
