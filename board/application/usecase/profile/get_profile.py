"""Get profile use cases."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.application.usecase.profile.views import ProfileView
from board.domain.service import ProfileService
from board.domain.value import UserId


class GetOwnProfileRequest(SessionRequest):
    """Own profile request."""


class GetPublicProfileRequest(BaseModel):
    """Public profile request."""

    user_id: UUID


class GetOwnProfileUseCase(BaseUseCase):
    """Use case for the signed-in user's profile page."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get own profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetOwnProfileRequest) -> ProfileView:
        user = request.session.user
        profile = await self.profile_service.get_profile(request.session.user_id)
        if profile.created_at is None and user is not None:
            # No row yet: fall back to when the account was created
            profile = profile.model_copy(update={"created_at": user.created_at})
        return ProfileView.from_profile(profile)


class GetPublicProfileUseCase(BaseUseCase):
    """Use case for a member's public page.

    Unknown members get a placeholder rather than a 404.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get public profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetPublicProfileRequest) -> ProfileView:
        profile = await self.profile_service.get_profile(UserId(request.user_id))
        return ProfileView.from_profile(profile)
