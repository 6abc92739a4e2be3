"""In-memory profile repository for testing."""

from typing import Optional

from board.domain.model import Profile, SessionContext
from board.domain.repository import ProfileRepository
from board.domain.value import UserId

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        return self.store.profiles.get(user_id)

    async def ensure(self, session: SessionContext) -> None:
        self.store.check("ensure_profile")
        if session.user_id not in self.store.profiles:
            self.store.profiles[session.user_id] = Profile(
                id=session.user_id, created_at=self.store.now()
            )

    async def save(self, session: SessionContext, profile: Profile) -> Profile:
        self.store.check("save_profile")
        existing = self.store.profiles.get(profile.id)
        created_at = existing.created_at if existing else self.store.now()
        saved = profile.model_copy(update={"created_at": created_at})
        self.store.profiles[profile.id] = saved
        return saved
