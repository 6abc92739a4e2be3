"""Store auth service adapter."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire

from board.adapter.error import ProviderError
from board.domain.error import StoreError
from board.domain.model import AuthUser
from board.domain.service.session_service import IdentityProvider
from board.domain.value import UserId

from .client import StoreClient


class RealStoreIdentityProvider(IdentityProvider):
    """Identity provider backed by the store's ``/auth/v1`` surface."""

    def __init__(self, client: StoreClient) -> None:
        """Initialize identity provider.

        Args:
            client: Store client
        """
        self.client = client

    @property
    def is_configured(self) -> bool:
        return self.client.is_configured

    @property
    def can_delete_users(self) -> bool:
        return self.client.has_service_role

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        try:
            payload = await self.client.get_user(access_token)
        except ProviderError as e:
            logfire.error("Failed to resolve user from access token", error=str(e))
            return None

        if not payload or not payload.get("id"):
            return None

        created_at = payload.get("created_at")
        return AuthUser(
            id=UserId(UUID(payload["id"])),
            email=payload.get("email") or None,
            created_at=datetime.fromisoformat(created_at.replace("Z", "+00:00"))
            if created_at
            else None,
        )

    async def delete_user(self, user_id: UserId) -> None:
        try:
            await self.client.delete_user(str(user_id))
        except ProviderError as e:
            raise StoreError("delete_user", str(e)) from e


class MockStoreIdentityProvider(IdentityProvider):
    """Mock identity provider for testing.

    Accepts only tokens registered with ``register``; records deletions
    instead of performing them.
    """

    def __init__(self) -> None:
        self.users: dict[str, AuthUser] = {}
        self.deleted_user_ids: list[UserId] = []
        self.get_user_calls = 0
        self.configured = True
        self.service_role = True
        self.fail_deletes = False

    def register(self, access_token: str, user: AuthUser) -> None:
        self.users[access_token] = user

    @property
    def is_configured(self) -> bool:
        return self.configured

    @property
    def can_delete_users(self) -> bool:
        return self.configured and self.service_role

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        self.get_user_calls += 1
        user = self.users.get(access_token)
        if user is not None and user.id in self.deleted_user_ids:
            return None
        return user

    async def delete_user(self, user_id: UserId) -> None:
        if self.fail_deletes:
            raise StoreError("delete_user", "mock failure")
        self.deleted_user_ids.append(user_id)
