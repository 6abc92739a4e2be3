"""Comment routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from board.application.usecase.base import SuccessResponse
from board.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from board.domain.error import StoreError
from board.domain.service import SessionService
from board.interface.api.auth import require_session

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.delete("/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: int,
    session_service: FromDishka[SessionService],
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Soft-delete one of the caller's own comments.

    Replies stay where they are; the comment renders as ``[removed]``.
    """
    session = await require_session(session_service, authorization)
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(session=session, comment_id=comment_id)
        )
    except StoreError as e:
        logfire.warn("Comment deletion refused", comment_id=comment_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to delete comment.",
        )
