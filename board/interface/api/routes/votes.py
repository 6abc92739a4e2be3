"""Vote routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from board.domain.error import (
    AuthenticationRequiredError,
    StoreError,
    VoteUpdateError,
)
from board.domain.service import SessionService
from board.domain.value import TargetType, VoteDirection
from board.interface.api.auth import require_session

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class ToggleVoteAPIRequest(BaseModel):
    """API request for clicking a vote button.

    ``direction`` is 1 for up and -1 for down. Clicking the direction
    already held clears the vote.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    target_type: TargetType
    target_id: int
    direction: VoteDirection


@router.post("", response_model=ToggleVoteResponse)
async def toggle_vote(
    request: ToggleVoteAPIRequest,
    session_service: FromDishka[SessionService],
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ToggleVoteResponse:
    """Toggle the caller's vote on a thread or comment."""
    session = await require_session(session_service, authorization)
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(
                session=session,
                target_type=request.target_type,
                target_id=request.target_id,
                direction=request.direction,
            )
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except VoteUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logfire.error(
            "Failed to load vote state",
            target_type=request.target_type.value,
            target_id=request.target_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update your vote.",
        )
