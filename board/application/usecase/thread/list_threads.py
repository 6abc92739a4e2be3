"""List threads use case."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, InstanceOf

from board.application.usecase.base import BaseUseCase
from board.application.usecase.thread.views import ThreadView, thread_view
from board.domain.model import SessionContext
from board.domain.repository import VoteRepository
from board.domain.service import ThreadService, VoteLedger
from board.domain.value import TargetType, VoteTarget


class ListThreadsRequest(BaseModel):
    """List threads request; anonymous readers have no session."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: Optional[InstanceOf[SessionContext]] = None


class ListThreadsResponse(BaseModel):
    """Front page threads, newest first."""

    threads: list[ThreadView]


class ListThreadsUseCase(BaseUseCase):
    """Use case for listing threads with scores and the caller's votes."""

    def __init__(
        self, thread_service: ThreadService, vote_repository: VoteRepository
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            vote_repository: Vote repository, for the caller's votes
        """
        self.thread_service = thread_service
        self.vote_repository = vote_repository

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        threads = await self.thread_service.list_threads()

        ledger = VoteLedger(self.vote_repository, request.session)
        scores = {VoteTarget.thread(t.id): t.score for t in threads}
        votes = {}
        if request.session is not None and threads:
            mine = await self.vote_repository.find_user_votes(
                request.session, TargetType.THREAD, [t.id for t in threads]
            )
            votes = {VoteTarget.thread(tid): value for tid, value in mine.items()}
        ledger.hydrate(scores, votes)

        try:
            return ListThreadsResponse(
                threads=[
                    thread_view(t, ledger, comment_count=t.comment_count)
                    for t in threads
                ]
            )
        finally:
            ledger.close()
