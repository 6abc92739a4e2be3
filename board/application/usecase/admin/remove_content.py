"""Admin content removal use cases."""

from typing import Optional

from board.application.usecase.base import BaseUseCase, SessionRequest, SuccessResponse
from board.domain.service import ModerationService
from board.domain.value import CommentId, ThreadId


class RemoveThreadRequest(SessionRequest):
    """Remove thread request."""

    thread_id: int
    reason: Optional[str] = None


class RemoveCommentRequest(SessionRequest):
    """Remove comment request."""

    comment_id: int
    reason: Optional[str] = None


class RemoveThreadUseCase(BaseUseCase):
    """Use case for an admin removing a thread."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize remove thread use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: RemoveThreadRequest) -> SuccessResponse:
        """Soft-delete the thread.

        Raises:
            NotAuthorizedError: If the user is not an admin
            StoreError: If the removal failed
        """
        await self.moderation_service.remove_thread(
            request.session, ThreadId(request.thread_id), request.reason
        )
        return SuccessResponse()


class RemoveCommentUseCase(BaseUseCase):
    """Use case for an admin removing a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize remove comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: RemoveCommentRequest) -> SuccessResponse:
        """Soft-delete the comment.

        Raises:
            NotAuthorizedError: If the user is not an admin
            StoreError: If the removal failed
        """
        await self.moderation_service.remove_comment(
            request.session, CommentId(request.comment_id), request.reason
        )
        return SuccessResponse()
