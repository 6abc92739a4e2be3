"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model import Profile, SessionContext
from board.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Returns:
            The profile if a row exists, None otherwise
        """
        pass

    @abstractmethod
    async def ensure(self, session: SessionContext) -> None:
        """Create an empty profile row for the session user if none exists.

        Existing rows are left untouched.
        """
        pass

    @abstractmethod
    async def save(self, session: SessionContext, profile: Profile) -> Profile:
        """Upsert the session user's profile.

        Raises:
            StoreError: If the store rejects the call
        """
        pass
