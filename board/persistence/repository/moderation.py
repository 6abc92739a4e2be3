"""Store-backed moderation and invite repositories.

The procedures raise when the acting user fails the gate, so any error
from a gate procedure is treated as a refusal.
"""

from typing import Optional

from board.adapter.error import ProviderError
from board.adapter.store import StoreClient
from board.domain.error import NotAuthorizedError, StoreError
from board.domain.model import SessionContext
from board.domain.repository import InviteRepository, ModerationRepository
from board.domain.value import CommentId, InviteToken, ThreadId


class StoreModerationRepository(ModerationRepository):
    """Moderation procedures over the store's RPC surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def enforce_admin(self, session: SessionContext) -> None:
        try:
            await self.client.rpc("enforce_admin_for_user", None, session.access_token)
        except ProviderError as e:
            raise NotAuthorizedError("moderate", str(session.user_id)) from e

    async def remove_thread(
        self, session: SessionContext, thread_id: ThreadId, reason: Optional[str]
    ) -> None:
        try:
            await self.client.rpc(
                "admin_soft_delete_thread",
                {"p_thread_id": thread_id, "p_reason": reason},
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("admin_soft_delete_thread", str(e)) from e

    async def remove_comment(
        self, session: SessionContext, comment_id: CommentId, reason: Optional[str]
    ) -> None:
        try:
            await self.client.rpc(
                "admin_soft_delete_comment",
                {"p_comment_id": comment_id, "p_reason": reason},
                session.access_token,
            )
        except ProviderError as e:
            raise StoreError("admin_soft_delete_comment", str(e)) from e


class StoreInviteRepository(InviteRepository):
    """Invite gate procedure over the store's RPC surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def enforce_invite(
        self, session: SessionContext, token: Optional[InviteToken]
    ) -> None:
        try:
            await self.client.rpc(
                "enforce_invite_for_user",
                {"p_invite_token": token.root if token else None},
                session.access_token,
            )
        except ProviderError as e:
            raise NotAuthorizedError("join without an invite", str(session.user_id)) from e
