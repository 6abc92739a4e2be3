"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.account import DeleteAccountUseCase
from board.application.usecase.admin import (
    GetRecentActivityUseCase,
    RemoveCommentUseCase,
    RemoveThreadUseCase,
)
from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
)
from board.application.usecase.invite import EnforceInviteUseCase
from board.application.usecase.profile import (
    GetOwnProfileUseCase,
    GetPublicProfileUseCase,
    UpdateProfileUseCase,
)
from board.application.usecase.session import StartSessionUseCase
from board.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
)
from board.application.usecase.upload import UploadMediaUseCase
from board.application.usecase.vote import ToggleVoteUseCase
from board.config import ForumSettings
from board.domain.repository import VoteRepository
from board.domain.service import (
    AccountService,
    CommentService,
    InviteService,
    MediaService,
    ModerationService,
    ProfileService,
    ThreadService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, account_service: AccountService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_start_session_use_case(
        self, profile_service: ProfileService
    ) -> StartSessionUseCase:
        """Provide start session use case."""
        return StartSessionUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_enforce_invite_use_case(
        self, invite_service: InviteService
    ) -> EnforceInviteUseCase:
        """Provide enforce invite use case."""
        return EnforceInviteUseCase(invite_service=invite_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_remove_thread_use_case(
        self, moderation_service: ModerationService
    ) -> RemoveThreadUseCase:
        """Provide remove thread use case."""
        return RemoveThreadUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, moderation_service: ModerationService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_recent_activity_use_case(
        self, moderation_service: ModerationService, forum_settings: ForumSettings
    ) -> GetRecentActivityUseCase:
        """Provide moderation dashboard use case."""
        return GetRecentActivityUseCase(
            moderation_service=moderation_service,
            page_size=forum_settings.moderation_page_size,
        )

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService, vote_repository: VoteRepository
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            thread_service=thread_service, vote_repository=vote_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_repository: VoteRepository,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            vote_repository=vote_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService, vote_repository: VoteRepository
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service, vote_repository=vote_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, thread_service: ThreadService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, thread_service=thread_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self, vote_repository: VoteRepository
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_repository=vote_repository)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_own_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetOwnProfileUseCase:
        """Provide own profile use case."""
        return GetOwnProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_public_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetPublicProfileUseCase:
        """Provide public profile use case."""
        return GetPublicProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Upload use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_media_use_case(
        self, media_service: MediaService
    ) -> UploadMediaUseCase:
        """Provide upload media use case."""
        return UploadMediaUseCase(media_service=media_service)
