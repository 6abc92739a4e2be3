"""Account routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from board.application.usecase.account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
)
from board.application.usecase.base import SuccessResponse
from board.domain.error import StoreError
from board.domain.service import SessionService
from board.interface.api.auth import require_session, require_store

router = APIRouter(prefix="/api", tags=["account"], route_class=DishkaRoute)


@router.post("/delete-account", response_model=SuccessResponse)
async def delete_account(
    session_service: FromDishka[SessionService],
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    authorization: Optional[str] = Header(default=None),
) -> SuccessResponse:
    """Delete the caller's account.

    Authored threads and comments stay, shown as anonymous. The caller's
    session is signed out on success.

    Raises:
        HTTPException: 500 if misconfigured or the deletion failed, 401 if
            the session is missing or invalid
    """
    require_store(session_service, service_role=True)
    session = await require_session(session_service, authorization)

    try:
        return await delete_account_use_case.execute(
            DeleteAccountRequest(session=session)
        )
    except StoreError as e:
        logfire.error("Account deletion failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete account.",
        )
    except Exception:
        logfire.exception("Unexpected error while deleting account")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error while deleting account.",
        )
