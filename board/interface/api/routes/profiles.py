"""Profile routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from board.application.usecase.profile import (
    GetOwnProfileRequest,
    GetOwnProfileUseCase,
    GetPublicProfileRequest,
    GetPublicProfileUseCase,
    ProfileView,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from board.domain.error import StoreError
from board.domain.service import SessionService
from board.interface.api.auth import require_session

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    display_name: Optional[str] = Field(default=None, max_length=80)
    bio: Optional[str] = Field(default=None, max_length=1000)


@router.get("/profiles/me", response_model=ProfileView)
async def get_own_profile(
    session_service: FromDishka[SessionService],
    get_own_profile_use_case: FromDishka[GetOwnProfileUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ProfileView:
    """The caller's profile."""
    session = await require_session(session_service, authorization)
    try:
        return await get_own_profile_use_case.execute(
            GetOwnProfileRequest(session=session)
        )
    except StoreError as e:
        logfire.error("Failed to load profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load profile.",
        )


@router.put("/profiles/me", response_model=ProfileView)
async def update_own_profile(
    request: UpdateProfileAPIRequest,
    session_service: FromDishka[SessionService],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ProfileView:
    """Edit the caller's pseudonym and bio. Blank values clear the field."""
    session = await require_session(session_service, authorization)
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                session=session, display_name=request.display_name, bio=request.bio
            )
        )
    except StoreError as e:
        logfire.error("Failed to save profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to save profile.",
        )


@router.get("/u/{user_id}", response_model=ProfileView)
async def get_public_profile(
    user_id: UUID,
    get_public_profile_use_case: FromDishka[GetPublicProfileUseCase],
) -> ProfileView:
    """A member's public page."""
    try:
        return await get_public_profile_use_case.execute(
            GetPublicProfileRequest(user_id=user_id)
        )
    except StoreError as e:
        logfire.error("Failed to load profile", user_id=str(user_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load profile.",
        )
