"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import ForumSettings, StorageSettings
from board.domain.repository import (
    CommentRepository,
    InviteRepository,
    ModerationRepository,
    ProfileRepository,
    ThreadRepository,
)
from board.domain.service import (
    AccountService,
    CommentService,
    IdentityProvider,
    InviteService,
    MediaService,
    MediaStorage,
    ModerationService,
    ProfileService,
    SessionService,
    ThreadService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repositories, which
    act on behalf of the caller's session.
    """

    scope = Scope.REQUEST

    @provide
    def get_session_service(
        self, identity_provider: IdentityProvider
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(identity_provider=identity_provider)

    @provide
    def get_account_service(
        self, identity_provider: IdentityProvider
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(identity_provider=identity_provider)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, forum_settings: ForumSettings
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            title_max_length=forum_settings.title_max_length,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, forum_settings: ForumSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            body_max_length=forum_settings.comment_max_length,
            max_nesting_depth=forum_settings.max_nesting_depth,
        )

    @provide
    def get_moderation_service(
        self,
        moderation_repository: ModerationRepository,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            moderation_repository=moderation_repository,
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_invite_service(self, invite_repository: InviteRepository) -> InviteService:
        """Provide invite domain service."""
        return InviteService(invite_repository=invite_repository)

    @provide
    def get_media_service(
        self, storage: MediaStorage, storage_settings: StorageSettings
    ) -> MediaService:
        """Provide media upload domain service."""
        return MediaService(
            storage=storage, max_upload_bytes=storage_settings.max_upload_bytes
        )
