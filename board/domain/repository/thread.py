"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model import NewThread, SessionContext, Thread, ThreadSummary
from board.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def list_with_meta(self) -> List[ThreadSummary]:
        """List threads with score and comment count.

        Returns:
            Threads ordered newest first, removed threads excluded
        """
        pass

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's identifier

        Returns:
            The thread if found (including removed ones), None otherwise
        """
        pass

    @abstractmethod
    async def create(self, session: SessionContext, thread: NewThread) -> Thread:
        """Create a thread authored by the session user.

        Args:
            session: Acting session
            thread: Validated thread input

        Returns:
            The stored thread

        Raises:
            StoreError: If the store rejects the insert
        """
        pass

    @abstractmethod
    async def soft_delete(self, session: SessionContext, thread_id: ThreadId) -> None:
        """Soft-delete a thread owned by the session user.

        Raises:
            StoreError: If the store rejects the call
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Thread]:
        """List the most recent threads, removed ones included.

        Args:
            limit: Maximum number of threads

        Returns:
            Threads ordered newest first
        """
        pass
