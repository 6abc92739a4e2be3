"""Moderation domain service."""

from typing import Optional

import logfire

from board.domain.error import NotAuthorizedError, StoreError
from board.domain.model import Comment, SessionContext, Thread
from board.domain.repository import (
    CommentRepository,
    ModerationRepository,
    ThreadRepository,
)
from board.domain.value import CommentId, ThreadId

from .base import Service


def normalize_reason(reason: object) -> Optional[str]:
    """Trim a removal reason; anything blank or non-text becomes None."""
    if not isinstance(reason, str):
        return None
    reason = reason.strip()
    return reason or None


class ModerationService(Service):
    """Domain service for admin moderation.

    The store decides who is an admin; every admin action is gated by
    ``require_admin`` first.
    """

    def __init__(
        self,
        moderation_repository: ModerationRepository,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize moderation service.

        Args:
            moderation_repository: Admin procedures
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.moderation_repository = moderation_repository
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def require_admin(self, session: SessionContext) -> None:
        """Raise NotAuthorizedError unless the session user is an admin."""
        with logfire.span("moderation_service.require_admin"):
            try:
                await self.moderation_repository.enforce_admin(session)
            except NotAuthorizedError:
                logfire.warn("Admin gate failed", user_id=str(session.user_id))
                raise

    async def remove_thread(
        self, session: SessionContext, thread_id: ThreadId, reason: Optional[str]
    ) -> None:
        """Soft-delete a thread as an admin.

        Raises:
            NotAuthorizedError: If the user is not an admin
            StoreError: If the removal failed
        """
        await self.require_admin(session)
        with logfire.span(
            "moderation_service.remove_thread", thread_id=thread_id, reason=reason
        ):
            try:
                await self.moderation_repository.remove_thread(
                    session, thread_id, normalize_reason(reason)
                )
            except StoreError as e:
                logfire.error(
                    "Thread removal failed", thread_id=thread_id, error=str(e)
                )
                raise
            logfire.info("Thread removed", thread_id=thread_id)

    async def remove_comment(
        self, session: SessionContext, comment_id: CommentId, reason: Optional[str]
    ) -> None:
        """Soft-delete a comment as an admin.

        Raises:
            NotAuthorizedError: If the user is not an admin
            StoreError: If the removal failed
        """
        await self.require_admin(session)
        with logfire.span(
            "moderation_service.remove_comment", comment_id=comment_id, reason=reason
        ):
            try:
                await self.moderation_repository.remove_comment(
                    session, comment_id, normalize_reason(reason)
                )
            except StoreError as e:
                logfire.error(
                    "Comment removal failed", comment_id=comment_id, error=str(e)
                )
                raise
            logfire.info("Comment removed", comment_id=comment_id)

    async def recent_activity(
        self, session: SessionContext, limit: int
    ) -> tuple[list[Thread], list[Comment]]:
        """Latest threads and comments, removed ones included.

        Raises:
            NotAuthorizedError: If the user is not an admin
        """
        await self.require_admin(session)
        threads = await self.thread_repository.list_recent(limit)
        comments = await self.comment_repository.list_recent(limit)
        return threads, comments
