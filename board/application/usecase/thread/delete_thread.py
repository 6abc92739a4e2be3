"""Delete thread use case."""

from board.application.usecase.base import BaseUseCase, SessionRequest, SuccessResponse
from board.domain.service import ThreadService
from board.domain.value import ThreadId


class DeleteThreadRequest(SessionRequest):
    """Delete thread request."""

    thread_id: int


class DeleteThreadUseCase(BaseUseCase):
    """Use case for an author deleting their own thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize delete thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> SuccessResponse:
        await self.thread_service.delete_thread(
            request.session, ThreadId(request.thread_id)
        )
        return SuccessResponse()
