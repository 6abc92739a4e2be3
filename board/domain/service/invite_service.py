"""Invite domain service."""

from typing import Optional

import logfire

from board.domain.error import NotAuthorizedError
from board.domain.model import SessionContext
from board.domain.repository import InviteRepository
from board.domain.value import InviteToken

from .base import Service


def normalize_invite_token(raw: Optional[str]) -> Optional[InviteToken]:
    """Trim an invite token; blank or missing becomes None."""
    if raw is None or not raw.strip():
        return None
    return InviteToken(raw)


class InviteService(Service):
    """Domain service for the invite gate.

    New members must redeem an invite before they can post. Existing
    members pass the gate without a token.
    """

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    async def enforce(self, session: SessionContext, raw_token: Optional[str]) -> None:
        """Redeem an invite or confirm the session user already has one.

        Raises:
            NotAuthorizedError: If the user is not invited
        """
        token = normalize_invite_token(raw_token)
        with logfire.span(
            "invite_service.enforce",
            user_id=str(session.user_id),
            has_token=token is not None,
        ):
            try:
                await self.invite_repository.enforce_invite(session, token)
            except NotAuthorizedError:
                logfire.warn("Invite gate failed", user_id=str(session.user_id))
                raise
