"""Moderation dashboard use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import BaseUseCase, SessionRequest
from board.domain.service import ModerationService


class GetRecentActivityRequest(SessionRequest):
    """Recent activity request."""


class RecentThread(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    body: Optional[str]
    created_at: datetime
    is_deleted: bool


class RecentComment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    thread_id: Optional[int]
    body: str
    created_at: datetime
    is_deleted: bool


class GetRecentActivityResponse(BaseModel):
    """Latest threads and comments, removed ones included."""

    threads: list[RecentThread]
    comments: list[RecentComment]


class GetRecentActivityUseCase(BaseUseCase):
    """Use case for the moderation dashboard."""

    def __init__(self, moderation_service: ModerationService, page_size: int) -> None:
        """Initialize recent activity use case.

        Args:
            moderation_service: Moderation domain service
            page_size: Number of threads and of comments to list
        """
        self.moderation_service = moderation_service
        self.page_size = page_size

    async def execute(
        self, request: GetRecentActivityRequest
    ) -> GetRecentActivityResponse:
        threads, comments = await self.moderation_service.recent_activity(
            request.session, self.page_size
        )
        return GetRecentActivityResponse(
            threads=[
                RecentThread(
                    id=t.id,
                    title=t.title,
                    body=t.body,
                    created_at=t.created_at,
                    is_deleted=t.is_deleted,
                )
                for t in threads
            ],
            comments=[
                RecentComment(
                    id=c.id,
                    thread_id=c.thread_id,
                    body=c.body,
                    created_at=c.created_at,
                    is_deleted=c.is_deleted,
                )
                for c in comments
            ],
        )
