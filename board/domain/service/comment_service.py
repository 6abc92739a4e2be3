"""Comment domain service."""

from typing import Optional

import logfire

from board.domain.error import NotFoundError, ValidationError
from board.domain.model import Comment, SessionContext
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, ThreadId

from .base import Service
from .comment_tree import (
    MAX_NESTING_DEPTH,
    CommentNavigation,
    CommentNode,
    build_comment_tree,
    build_navigation_index,
)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        body_max_length: int = 10000,
        max_nesting_depth: int = MAX_NESTING_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            body_max_length: Longest accepted comment body
            max_nesting_depth: Deepest indentation level rendered
        """
        self.comment_repository = comment_repository
        self.body_max_length = body_max_length
        self.max_nesting_depth = max_nesting_depth

    async def get_thread_comments(
        self, thread_id: ThreadId
    ) -> tuple[list[Comment], list[CommentNode], CommentNavigation]:
        """Load a thread's comments with their tree and navigation index.

        Returns:
            Tuple of (flat comments, forest, navigation index)
        """
        with logfire.span("comment_service.get_thread_comments", thread_id=thread_id):
            comments = await self.comment_repository.find_by_thread(thread_id)
            forest = build_comment_tree(comments, self.max_nesting_depth)
            navigation = build_navigation_index(comments)
            return comments, forest, navigation

    async def create_comment(
        self,
        session: SessionContext,
        thread_id: ThreadId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Raises:
            ValidationError: If the body is blank or too long
            NotFoundError: If the parent comment is not on this thread
            StoreError: If the store rejected the insert
        """
        body = body.strip()
        if not body:
            raise ValidationError("Comment cannot be empty.")
        if len(body) > self.body_max_length:
            raise ValidationError(
                f"Comment must be {self.body_max_length} characters or fewer."
            )

        if parent_id is not None:
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None or (
                parent.thread_id is not None and parent.thread_id != thread_id
            ):
                raise NotFoundError("Comment", str(parent_id))

        with logfire.span(
            "comment_service.create_comment",
            thread_id=thread_id,
            parent_id=parent_id,
        ):
            comment = await self.comment_repository.create(
                session, thread_id, body, parent_id
            )
            logfire.info("Comment created", comment_id=comment.id, thread_id=thread_id)
            return comment

    async def delete_comment(
        self, session: SessionContext, comment_id: CommentId
    ) -> None:
        """Soft-delete a comment owned by the session user.

        Replies stay in place under the ``[removed]`` placeholder.
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            await self.comment_repository.soft_delete(session, comment_id)
            logfire.info("Comment deleted by owner", comment_id=comment_id)
