"""Store infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from board.adapter.store import RealStoreIdentityProvider, StoreClient
from board.config import StoreSettings
from board.domain.repository import (
    CommentRepository,
    InviteRepository,
    ModerationRepository,
    ProfileRepository,
    ThreadRepository,
    VoteRepository,
)
from board.domain.service import IdentityProvider
from board.persistence.repository import (
    StoreCommentRepository,
    StoreInviteRepository,
    StoreModerationRepository,
    StoreProfileRepository,
    StoreThreadRepository,
    StoreVoteRepository,
)
from board.util.di.base import ProviderBase


class StoreProvider(ProviderBase):
    """Store component base."""

    __mock_component__ = "store"


class ProdStoreProvider(StoreProvider):
    """Production store provider using the managed store's HTTP API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_client(self, settings: StoreSettings) -> AsyncIterator[StoreClient]:
        """Provide the shared store client, closed on shutdown."""
        client = StoreClient(settings)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_identity_provider(self, client: StoreClient) -> IdentityProvider:
        """Provide store auth service client."""
        return RealStoreIdentityProvider(client)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, client: StoreClient) -> ThreadRepository:
        """Provide Thread repository."""
        return StoreThreadRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, client: StoreClient) -> CommentRepository:
        """Provide Comment repository."""
        return StoreCommentRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, client: StoreClient) -> VoteRepository:
        """Provide Vote repository."""
        return StoreVoteRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, client: StoreClient) -> ProfileRepository:
        """Provide Profile repository."""
        return StoreProfileRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_moderation_repository(self, client: StoreClient) -> ModerationRepository:
        """Provide Moderation repository."""
        return StoreModerationRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, client: StoreClient) -> InviteRepository:
        """Provide Invite repository."""
        return StoreInviteRepository(client)
