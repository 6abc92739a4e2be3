"""Get thread use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, ConfigDict, InstanceOf

from board.application.usecase.base import BaseUseCase
from board.application.usecase.thread.views import (
    CommentView,
    ThreadView,
    comment_views,
    thread_view,
)
from board.domain.error import StoreError
from board.domain.model import SessionContext
from board.domain.repository import VoteRepository
from board.domain.service import CommentService, ThreadService, VoteLedger
from board.domain.value import VoteTarget


class GetThreadRequest(BaseModel):
    """Get thread request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    thread_id: int
    session: Optional[InstanceOf[SessionContext]] = None


class GetThreadResponse(BaseModel):
    """Thread page: the thread and its comment forest, freshest first."""

    thread: ThreadView
    comments: list[CommentView]


class GetThreadUseCase(BaseUseCase):
    """Use case for the thread page."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            vote_repository: Vote repository, for scores and the caller's votes
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.vote_repository = vote_repository

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Load the thread page.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(request.thread_id)
        comments, forest, navigation = await self.comment_service.get_thread_comments(
            thread.id
        )

        ledger = VoteLedger(self.vote_repository, request.session)
        targets = [VoteTarget.thread(thread.id)]
        targets.extend(VoteTarget.comment(c.id) for c in comments)
        try:
            try:
                await ledger.resync(targets)
            except StoreError as e:
                # The page still renders, with zero scores and no votes
                logfire.warn(
                    "Failed to load thread votes", thread_id=thread.id, error=str(e)
                )

            return GetThreadResponse(
                thread=thread_view(thread, ledger, comment_count=len(comments)),
                comments=comment_views(forest, navigation, ledger),
            )
        finally:
            ledger.close()
