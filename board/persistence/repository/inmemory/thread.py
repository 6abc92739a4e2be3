"""In-memory thread repository for testing."""

from typing import List, Optional

from board.domain.error import StoreError
from board.domain.model import NewThread, SessionContext, Thread, ThreadSummary
from board.domain.repository import ThreadRepository
from board.domain.value import TargetType, ThreadId

from .store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _with_author(self, thread: Thread) -> Thread:
        return thread.model_copy(
            update={"author_display_name": self.store.display_name(thread.author_id)}
        )

    async def list_with_meta(self) -> List[ThreadSummary]:
        self.store.check("get_threads_with_meta")
        summaries = []
        for thread in self.store.threads.values():
            if thread.is_deleted:
                continue
            score = sum(
                value
                for (_, target_type, target_id), value in self.store.votes.items()
                if target_type == TargetType.THREAD.value and target_id == thread.id
            )
            comment_count = sum(
                1
                for c in self.store.comments.values()
                if c.thread_id == thread.id and not c.is_deleted
            )
            summaries.append(
                ThreadSummary(
                    **self._with_author(thread).model_dump(),
                    score=score,
                    comment_count=comment_count,
                )
            )
        return sorted(summaries, key=lambda t: t.created_at, reverse=True)

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        thread = self.store.threads.get(thread_id)
        return self._with_author(thread) if thread else None

    async def create(self, session: SessionContext, thread: NewThread) -> Thread:
        self.store.check("create_thread")
        stored = Thread(
            id=ThreadId(self.store.next_id()),
            created_at=self.store.now(),
            author_id=session.user_id,
            **thread.model_dump(),
        )
        self.store.threads[stored.id] = stored
        return self._with_author(stored)

    async def soft_delete(self, session: SessionContext, thread_id: ThreadId) -> None:
        self.store.check("soft_delete_thread")
        thread = self.store.threads.get(thread_id)
        if thread is None or thread.author_id != session.user_id:
            raise StoreError("soft_delete_thread", "not found or not owner")
        self.store.threads[thread_id] = thread.model_copy(update={"is_deleted": True})

    async def list_recent(self, limit: int) -> List[Thread]:
        threads = sorted(
            self.store.threads.values(), key=lambda t: t.created_at, reverse=True
        )
        return [self._with_author(t) for t in threads[:limit]]
