"""In-memory comment repository for testing."""

from typing import List, Optional

from board.domain.error import StoreError
from board.domain.model import Comment, SessionContext
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, ThreadId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _with_author(self, comment: Comment) -> Comment:
        return comment.model_copy(
            update={"author_display_name": self.store.display_name(comment.author_id)}
        )

    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        comments = [c for c in self.store.comments.values() if c.thread_id == thread_id]
        comments.sort(key=lambda c: c.created_at)
        return [self._with_author(c) for c in comments]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        comment = self.store.comments.get(comment_id)
        return self._with_author(comment) if comment else None

    async def create(
        self,
        session: SessionContext,
        thread_id: ThreadId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        self.store.check("create_comment")
        if thread_id not in self.store.threads:
            raise StoreError("create_comment", "thread does not exist")
        comment = Comment(
            id=CommentId(self.store.next_id()),
            thread_id=thread_id,
            body=body,
            created_at=self.store.now(),
            author_id=session.user_id,
            parent_id=parent_id,
        )
        self.store.comments[comment.id] = comment
        return self._with_author(comment)

    async def soft_delete(
        self, session: SessionContext, comment_id: CommentId
    ) -> None:
        self.store.check("soft_delete_comment")
        comment = self.store.comments.get(comment_id)
        if comment is None or comment.author_id != session.user_id:
            raise StoreError("soft_delete_comment", "not found or not owner")
        self.store.comments[comment_id] = comment.model_copy(
            update={"is_deleted": True}
        )

    async def list_recent(self, limit: int) -> List[Comment]:
        comments = sorted(
            self.store.comments.values(), key=lambda c: c.created_at, reverse=True
        )
        return [self._with_author(c) for c in comments[:limit]]
