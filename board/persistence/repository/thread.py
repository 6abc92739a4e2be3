"""Store-backed thread repository."""

from typing import List, Optional

from board.adapter.error import ProviderError
from board.adapter.store import StoreClient
from board.domain.error import StoreError
from board.domain.model import NewThread, SessionContext, Thread, ThreadSummary
from board.domain.repository import ThreadRepository
from board.domain.value import ThreadId
from board.persistence.mappers import (
    THREAD_COLUMNS,
    row_to_thread,
    row_to_thread_summary,
)


class StoreThreadRepository(ThreadRepository):
    """Thread repository over the store's REST surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def list_with_meta(self) -> List[ThreadSummary]:
        try:
            rows = await self.client.rpc("get_threads_with_meta")
        except ProviderError as e:
            raise StoreError("get_threads_with_meta", str(e)) from e
        return [row_to_thread_summary(row) for row in rows or []]

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        try:
            rows = await self.client.select(
                "threads",
                {"select": THREAD_COLUMNS, "id": f"eq.{thread_id}", "limit": 1},
            )
        except ProviderError as e:
            raise StoreError("find_thread", str(e)) from e
        return row_to_thread(rows[0]) if rows else None

    async def create(self, session: SessionContext, thread: NewThread) -> Thread:
        try:
            rows = await self.client.insert(
                "threads",
                {"author_id": str(session.user_id), **thread.model_dump()},
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("create_thread", str(e)) from e
        if not rows:
            raise StoreError("create_thread", "no row returned")
        return row_to_thread(rows[0])

    async def soft_delete(self, session: SessionContext, thread_id: ThreadId) -> None:
        try:
            await self.client.rpc(
                "soft_delete_thread",
                {"p_thread_id": thread_id},
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("soft_delete_thread", str(e)) from e

    async def list_recent(self, limit: int) -> List[Thread]:
        try:
            rows = await self.client.select(
                "threads",
                {
                    "select": THREAD_COLUMNS,
                    "order": "created_at.desc",
                    "limit": limit,
                },
            )
        except ProviderError as e:
            raise StoreError("list_recent_threads", str(e)) from e
        return [row_to_thread(row) for row in rows]
