"""Profile domain service."""

from typing import Optional

import logfire

from board.domain.model import Profile, SessionContext
from board.domain.repository import ProfileRepository
from board.domain.value import UserId

from .base import Service


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a profile, or a placeholder when no row exists yet."""
        profile = await self.profile_repository.find_by_id(user_id)
        return profile or Profile.placeholder(user_id)

    async def ensure_profile(self, session: SessionContext) -> None:
        """Make sure the session user has a profile row."""
        with logfire.span("profile_service.ensure_profile", user_id=str(session.user_id)):
            await self.profile_repository.ensure(session)

    async def update_profile(
        self,
        session: SessionContext,
        display_name: Optional[str],
        bio: Optional[str],
    ) -> Profile:
        """Update the session user's display name and bio.

        Both are trimmed; blank values clear the field.

        Raises:
            StoreError: If the store rejected the upsert
        """
        user_id = session.user_id
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            current = await self.get_profile(user_id)
            updated = Profile(
                id=user_id,
                display_name=_blank_to_none(display_name),
                bio=_blank_to_none(bio),
                created_at=current.created_at,
            )
            saved = await self.profile_repository.save(session, updated)
            logfire.info("Profile updated", user_id=str(user_id))
            return saved
