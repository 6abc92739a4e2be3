"""Store-backed profile repository."""

from typing import Optional

from board.adapter.error import ProviderError
from board.adapter.store import StoreClient
from board.domain.error import StoreError
from board.domain.model import Profile, SessionContext
from board.domain.repository import ProfileRepository
from board.domain.value import UserId
from board.persistence.mappers import PROFILE_COLUMNS, profile_to_dict, row_to_profile


class StoreProfileRepository(ProfileRepository):
    """Profile repository over the store's REST surface."""

    def __init__(self, client: StoreClient) -> None:
        self.client = client

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        try:
            rows = await self.client.select(
                "profiles",
                {"select": PROFILE_COLUMNS, "id": f"eq.{user_id}", "limit": 1},
            )
        except ProviderError as e:
            raise StoreError("find_profile", str(e)) from e
        return row_to_profile(rows[0]) if rows else None

    async def ensure(self, session: SessionContext) -> None:
        try:
            await self.client.insert(
                "profiles",
                {"id": str(session.user_id)},
                session.access_token,
                on_conflict="id",
                ignore_duplicates=True,
            )
        except ProviderError as e:
            raise StoreError("ensure_profile", str(e)) from e

    async def save(self, session: SessionContext, profile: Profile) -> Profile:
        try:
            rows = await self.client.insert(
                "profiles",
                profile_to_dict(profile),
                session.access_token,
                on_conflict="id",
            )
        except ProviderError as e:
            raise StoreError("save_profile", str(e)) from e
        return row_to_profile(rows[0]) if rows else profile
