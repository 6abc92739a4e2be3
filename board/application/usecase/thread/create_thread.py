"""Create thread use case."""

from typing import Optional

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.application.usecase.thread.views import ThreadView, thread_view
from board.domain.repository import VoteRepository
from board.domain.service import ThreadService, VoteLedger


class CreateThreadRequest(SessionRequest):
    """Create thread request."""

    title: str
    body: str
    url: Optional[str] = None
    media_url: Optional[str] = None
    media_mime_type: Optional[str] = None


class CreateThreadUseCase(BaseUseCase):
    """Use case for posting a new thread."""

    def __init__(
        self, thread_service: ThreadService, vote_repository: VoteRepository
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            vote_repository: Vote repository
        """
        self.thread_service = thread_service
        self.vote_repository = vote_repository

    async def execute(self, request: CreateThreadRequest) -> ThreadView:
        """Create the thread.

        Raises:
            ValidationError: If title, body or URL are invalid
            StoreError: If the store rejected the insert
        """
        thread = await self.thread_service.create_thread(
            request.session,
            title=request.title,
            body=request.body,
            url=request.url,
            media_url=request.media_url,
            media_mime_type=request.media_mime_type,
        )
        # New threads start with no votes
        return thread_view(thread, VoteLedger(self.vote_repository, request.session))
