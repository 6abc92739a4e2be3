"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model import Comment, SessionContext
from board.domain.value import CommentId, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find all comments on a thread as a flat list.

        Args:
            thread_id: The thread's identifier

        Returns:
            Comments ordered by creation time, oldest first
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def create(
        self,
        session: SessionContext,
        thread_id: ThreadId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment authored by the session user.

        Args:
            session: Acting session
            thread_id: Thread being commented on
            body: Trimmed comment body
            parent_id: Comment being replied to, None for top-level

        Returns:
            The stored comment

        Raises:
            StoreError: If the store rejects the insert
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, session: SessionContext, comment_id: CommentId
    ) -> None:
        """Soft-delete a comment owned by the session user.

        Raises:
            StoreError: If the store rejects the call
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Comment]:
        """List the most recent comments across all threads, removed included."""
        pass
