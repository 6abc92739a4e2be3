"""Update profile use case."""

from typing import Optional

from pydantic import Field

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.application.usecase.profile.views import ProfileView
from board.domain.service import ProfileService


class UpdateProfileRequest(SessionRequest):
    """Update profile request."""

    display_name: Optional[str] = Field(default=None, max_length=80)
    bio: Optional[str] = Field(default=None, max_length=1000)


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing the signed-in user's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileView:
        """Update display name and bio; blanks clear the field.

        Raises:
            StoreError: If the store rejected the upsert
        """
        profile = await self.profile_service.update_profile(
            request.session, request.display_name, request.bio
        )
        return ProfileView.from_profile(profile)
