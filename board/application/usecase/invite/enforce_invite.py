"""Enforce invite use case."""

from typing import Optional

from board.application.usecase.base import BaseUseCase, SessionRequest, SuccessResponse
from board.domain.service import InviteService


class EnforceInviteRequest(SessionRequest):
    """Enforce invite request."""

    invite_token: Optional[str] = None


class EnforceInviteUseCase(BaseUseCase):
    """Use case for the invite gate run after sign-in."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize enforce invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: EnforceInviteRequest) -> SuccessResponse:
        """Pass the gate.

        Raises:
            NotAuthorizedError: If the user has no valid invite
        """
        await self.invite_service.enforce(request.session, request.invite_token)
        return SuccessResponse()
