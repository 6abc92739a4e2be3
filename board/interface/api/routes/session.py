"""Session routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from board.application.usecase.session import (
    StartSessionRequest,
    StartSessionResponse,
    StartSessionUseCase,
)
from board.domain.error import StoreError
from board.domain.service import SessionService
from board.interface.api.auth import require_session, require_store

router = APIRouter(prefix="/session", tags=["session"], route_class=DishkaRoute)


@router.post("", response_model=StartSessionResponse)
async def start_session(
    session_service: FromDishka[SessionService],
    start_session_use_case: FromDishka[StartSessionUseCase],
    authorization: Optional[str] = Header(default=None),
) -> StartSessionResponse:
    """Called by the client right after sign-in.

    Returns who the token belongs to and makes sure they have a profile.
    """
    require_store(session_service)
    session = await require_session(session_service, authorization)
    try:
        return await start_session_use_case.execute(
            StartSessionRequest(session=session)
        )
    except StoreError as e:
        logfire.error("Failed to start session", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to start session.",
        )
