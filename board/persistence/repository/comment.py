"""Store-backed comment repository."""

from typing import List, Optional

from board.adapter.error import ProviderError
from board.adapter.store import StoreClient
from board.domain.error import StoreError
from board.domain.model import Comment, SessionContext
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, ThreadId
from board.persistence.mappers import COMMENT_COLUMNS, row_to_comment


class StoreCommentRepository(CommentRepository):
    """Comment repository over the store's REST surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        try:
            rows = await self.client.select(
                "comments",
                {
                    "select": COMMENT_COLUMNS,
                    "thread_id": f"eq.{thread_id}",
                    "order": "created_at.asc",
                },
            )
        except ProviderError as e:
            raise StoreError("find_comments", str(e)) from e
        return [row_to_comment(row) for row in rows]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        try:
            rows = await self.client.select(
                "comments",
                {"select": COMMENT_COLUMNS, "id": f"eq.{comment_id}", "limit": 1},
            )
        except ProviderError as e:
            raise StoreError("find_comment", str(e)) from e
        return row_to_comment(rows[0]) if rows else None

    async def create(
        self,
        session: SessionContext,
        thread_id: ThreadId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        row = {
            "thread_id": thread_id,
            "author_id": str(session.user_id),
            "body": body,
        }
        if parent_id is not None:
            row["parent_id"] = parent_id
        try:
            rows = await self.client.insert("comments", row, session.access_token)
        except ProviderError as e:
            raise StoreError("create_comment", str(e)) from e
        if not rows:
            raise StoreError("create_comment", "no row returned")
        return row_to_comment(rows[0])

    async def soft_delete(
        self, session: SessionContext, comment_id: CommentId
    ) -> None:
        try:
            await self.client.rpc(
                "soft_delete_comment",
                {"p_comment_id": comment_id},
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("soft_delete_comment", str(e)) from e

    async def list_recent(self, limit: int) -> List[Comment]:
        try:
            rows = await self.client.select(
                "comments",
                {
                    "select": COMMENT_COLUMNS,
                    "order": "created_at.desc",
                    "limit": limit,
                },
            )
        except ProviderError as e:
            raise StoreError("list_recent_comments", str(e)) from e
        return [row_to_comment(row) for row in rows]
