"""Create comment use case."""

from typing import Optional

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.application.usecase.thread.views import CommentLinks, CommentView
from board.domain.error import ValidationError
from board.domain.service import CommentService, ThreadService
from board.domain.value import CommentId, ThreadId
from board.util.time import format_time_ago


class CreateCommentRequest(SessionRequest):
    """Create comment request."""

    thread_id: int
    body: str
    parent_id: Optional[int] = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, thread_service: ThreadService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread domain service
        """
        self.comment_service = comment_service
        self.thread_service = thread_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Create the comment.

        Raises:
            NotFoundError: If the thread or parent comment does not exist
            ValidationError: If the thread was removed or the body is invalid
            StoreError: If the store rejected the insert
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        if thread.is_deleted:
            raise ValidationError("This thread has been removed.")

        parent_id = CommentId(request.parent_id) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            request.session, thread.id, request.body, parent_id
        )
        # A fresh comment has score 0 and no replies
        return CommentView(
            id=comment.id,
            parent_id=comment.parent_id,
            body=comment.body,
            created_at=comment.created_at,
            time_ago=format_time_ago(comment.created_at),
            author_id=comment.author_id,
            author_label=comment.author_label,
            is_deleted=False,
            depth=0,
            visual_depth=0,
            score=0,
            current_vote=0,
            links=CommentLinks(parent=comment.parent_id),
            children=[],
        )
