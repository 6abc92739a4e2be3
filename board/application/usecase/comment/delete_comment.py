"""Delete comment use case."""

from board.application.usecase.base import BaseUseCase, SessionRequest, SuccessResponse
from board.domain.service import CommentService
from board.domain.value import CommentId


class DeleteCommentRequest(SessionRequest):
    """Delete comment request."""

    comment_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for an author deleting their own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        await self.comment_service.delete_comment(
            request.session, CommentId(request.comment_id)
        )
        return SuccessResponse()
