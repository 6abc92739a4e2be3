"""Thread routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import SuccessResponse
from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.application.usecase.thread import (
    CommentView,
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    ThreadView,
)
from board.domain.error import NotFoundError, StoreError, ValidationError
from board.domain.service import SessionService
from board.interface.api.auth import optional_session, require_session

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    body: str
    url: Optional[str] = None
    media_url: Optional[str] = None
    media_mime_type: Optional[str] = None


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment or a reply."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    body: str
    parent_id: Optional[int] = None


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    session_service: FromDishka[SessionService],
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ListThreadsResponse:
    """List threads, newest first, with scores and comment counts.

    Anyone can read; a signed-in caller also gets their own votes.
    """
    session = await optional_session(session_service, authorization)
    try:
        return await list_threads_use_case.execute(ListThreadsRequest(session=session))
    except StoreError as e:
        logfire.error("Failed to list threads", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load threads.",
        )


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: int,
    session_service: FromDishka[SessionService],
    get_thread_use_case: FromDishka[GetThreadUseCase],
    authorization: Optional[str] = Header(default=None),
) -> GetThreadResponse:
    """Thread page: the thread and its comment tree with navigation links."""
    session = await optional_session(session_service, authorization)
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=thread_id, session=session)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Thread not found."
        )
    except StoreError as e:
        logfire.error("Failed to load thread", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load thread.",
        )


@router.post("", response_model=ThreadView, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: CreateThreadAPIRequest,
    session_service: FromDishka[SessionService],
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ThreadView:
    """Start a thread.

    Title and body are required; the link and image are optional.
    """
    session = await require_session(session_service, authorization)
    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                session=session,
                title=request.title,
                body=request.body,
                url=request.url,
                media_url=request.media_url,
                media_mime_type=request.media_mime_type,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logfire.error("Failed to create thread", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to create thread.",
        )


@router.delete("/{thread_id}", response_model=SuccessResponse)
async def delete_thread(
    thread_id: int,
    session_service: FromDishka[SessionService],
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Soft-delete one of the caller's own threads."""
    session = await require_session(session_service, authorization)
    try:
        return await delete_thread_use_case.execute(
            DeleteThreadRequest(session=session, thread_id=thread_id)
        )
    except StoreError as e:
        logfire.warn("Thread deletion refused", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to delete thread.",
        )


@router.post(
    "/{thread_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    thread_id: int,
    request: CreateCommentAPIRequest,
    session_service: FromDishka[SessionService],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    authorization: Optional[str] = Header(default=None),
) -> CommentView:
    """Comment on a thread, or reply to a comment with ``parentId``."""
    session = await require_session(session_service, authorization)
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                session=session,
                thread_id=thread_id,
                body=request.body,
                parent_id=request.parent_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment target not found", thread_id=thread_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logfire.error("Failed to create comment", thread_id=thread_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to post comment.",
        )
