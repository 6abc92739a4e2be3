"""Moderation and invite repository interfaces.

Both are thin wrappers over store procedures that own the actual rules
(who is an admin, which invite tokens are valid).
"""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model import SessionContext
from board.domain.value import CommentId, InviteToken, ThreadId


class ModerationRepository(ABC):
    """Admin-only procedures."""

    @abstractmethod
    async def enforce_admin(self, session: SessionContext) -> None:
        """Check the session user is an admin.

        Raises:
            NotAuthorizedError: If the store rejects the check
        """
        pass

    @abstractmethod
    async def remove_thread(
        self, session: SessionContext, thread_id: ThreadId, reason: Optional[str]
    ) -> None:
        """Soft-delete any thread as an admin.

        Raises:
            StoreError: If the store rejects the call
        """
        pass

    @abstractmethod
    async def remove_comment(
        self, session: SessionContext, comment_id: CommentId, reason: Optional[str]
    ) -> None:
        """Soft-delete any comment as an admin.

        Raises:
            StoreError: If the store rejects the call
        """
        pass


class InviteRepository(ABC):
    """Invite gate procedure."""

    @abstractmethod
    async def enforce_invite(
        self, session: SessionContext, token: Optional[InviteToken]
    ) -> None:
        """Redeem an invite for the session user, or confirm one was redeemed.

        Args:
            session: Acting session
            token: Invite token, None when the user has none to present

        Raises:
            NotAuthorizedError: If the user has no valid invite
        """
        pass
