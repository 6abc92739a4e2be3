"""Moderation routes.

Every action is gated by the store's ``enforce_admin_for_user`` procedure;
the API keeps no admin list of its own.
"""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Request, status

from board.application.usecase.admin import (
    GetRecentActivityRequest,
    GetRecentActivityResponse,
    GetRecentActivityUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    RemoveThreadRequest,
    RemoveThreadUseCase,
)
from board.application.usecase.base import SuccessResponse
from board.domain.error import NotAuthorizedError, StoreError
from board.domain.service import SessionService, normalize_reason
from board.interface.api.auth import (
    bearer_token,
    parse_numeric_id,
    read_json_object,
    require_session,
    require_store,
    resolve_session,
)
from board.interface.error import InvalidBodyError

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)

NOT_ALLOWED = "You are not allowed to perform this action."


async def _read_removal(request: Request, id_field: str) -> tuple[int, Optional[str]]:
    """Read ``{<id_field>, reason?}`` from the body.

    Raises:
        HTTPException: 400 if the body or the id is invalid
    """
    try:
        payload: dict[str, Any] = await read_json_object(request)
    except InvalidBodyError as e:
        logfire.warn("Failed to parse removal body", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    target_id = parse_numeric_id(payload.get(id_field))
    if target_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{id_field} is required and must be a number.",
        )
    return target_id, normalize_reason(payload.get("reason"))


@router.post("/threads/remove", response_model=SuccessResponse)
async def remove_thread(
    request: Request,
    session_service: FromDishka[SessionService],
    remove_thread_use_case: FromDishka[RemoveThreadUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Soft-delete a thread as an admin.

    Body: ``{"threadId": number, "reason"?: string}``. The thread keeps its
    row; title and body render as ``[removed]``.
    """
    require_store(session_service)
    token = bearer_token(authorization)
    thread_id, reason = await _read_removal(request, "threadId")

    try:
        session = await resolve_session(session_service, token)
        return await remove_thread_use_case.execute(
            RemoveThreadRequest(session=session, thread_id=thread_id, reason=reason)
        )
    except HTTPException:
        raise
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_ALLOWED)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to remove thread.",
        )
    except Exception:
        logfire.exception("Unexpected error while removing thread", thread_id=thread_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error while removing thread.",
        )


@router.post("/comments/remove", response_model=SuccessResponse)
async def remove_comment(
    request: Request,
    session_service: FromDishka[SessionService],
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Soft-delete a comment as an admin.

    Body: ``{"commentId": number, "reason"?: string}``. Replies stay in place.
    """
    require_store(session_service)
    token = bearer_token(authorization)
    comment_id, reason = await _read_removal(request, "commentId")

    try:
        session = await resolve_session(session_service, token)
        return await remove_comment_use_case.execute(
            RemoveCommentRequest(session=session, comment_id=comment_id, reason=reason)
        )
    except HTTPException:
        raise
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_ALLOWED)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to remove comment.",
        )
    except Exception:
        logfire.exception(
            "Unexpected error while removing comment", comment_id=comment_id
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error while removing comment.",
        )


@router.get("/recent", response_model=GetRecentActivityResponse)
async def recent_activity(
    session_service: FromDishka[SessionService],
    get_recent_activity_use_case: FromDishka[GetRecentActivityUseCase],
    authorization: Optional[str] = Header(default=None),
) -> GetRecentActivityResponse:
    """Latest threads and comments for the moderation dashboard."""
    require_store(session_service)
    session = await require_session(session_service, authorization)

    try:
        return await get_recent_activity_use_case.execute(
            GetRecentActivityRequest(session=session)
        )
    except NotAuthorizedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_ALLOWED)
    except StoreError as e:
        logfire.error("Failed to load recent activity", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load recent activity.",
        )
