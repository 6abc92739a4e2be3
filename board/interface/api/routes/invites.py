"""Invite routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.base import SuccessResponse
from board.application.usecase.invite import (
    EnforceInviteRequest,
    EnforceInviteUseCase,
)
from board.domain.error import NotAuthorizedError
from board.domain.service import SessionService
from board.interface.api.auth import require_session, require_store

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class EnforceInviteAPIRequest(BaseModel):
    """API request carrying the invite token from the sign-up link."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    invite_token: Optional[str] = None


@router.post("/enforce", response_model=SuccessResponse)
async def enforce_invite(
    request: EnforceInviteAPIRequest,
    session_service: FromDishka[SessionService],
    enforce_invite_use_case: FromDishka[EnforceInviteUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Check the caller was invited, redeeming the token if needed.

    Members who already passed the gate succeed without a token.
    """
    require_store(session_service)
    session = await require_session(session_service, authorization)
    try:
        return await enforce_invite_use_case.execute(
            EnforceInviteRequest(session=session, invite_token=request.invite_token)
        )
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="A valid invite is required to join.",
        )
