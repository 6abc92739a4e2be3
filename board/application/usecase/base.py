"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, InstanceOf

from board.domain.model import SessionContext


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class SessionRequest(BaseModel):
    """Request made on behalf of a signed-in user.

    The session is passed through as is (not copied) so that signing out
    is visible to the caller.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: InstanceOf[SessionContext]


class SuccessResponse(BaseModel):
    """Acknowledgement for commands without a payload."""

    success: bool = True
