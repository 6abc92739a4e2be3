"""Start session use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.application.usecase.profile.views import ProfileView
from board.domain.service import ProfileService


class StartSessionRequest(SessionRequest):
    """Start session request, sent once after sign-in."""


class StartSessionResponse(BaseModel):
    """The signed-in user and their profile."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: UUID
    email: Optional[str]
    profile: ProfileView


class StartSessionUseCase(BaseUseCase):
    """Use case run right after sign-in.

    Makes sure the new member has a profile row so their pseudonym resolves
    everywhere.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize start session use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: StartSessionRequest) -> StartSessionResponse:
        session = request.session
        await self.profile_service.ensure_profile(session)
        profile = await self.profile_service.get_profile(session.user_id)
        return StartSessionResponse(
            user_id=session.user_id,
            email=session.user.email if session.user else None,
            profile=ProfileView.from_profile(profile),
        )
