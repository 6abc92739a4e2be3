"""Admin use cases."""

from .get_recent_activity import (
    GetRecentActivityRequest,
    GetRecentActivityResponse,
    GetRecentActivityUseCase,
)
from .remove_content import (
    RemoveCommentRequest,
    RemoveCommentUseCase,
    RemoveThreadRequest,
    RemoveThreadUseCase,
)

__all__ = [
    "GetRecentActivityRequest",
    "GetRecentActivityResponse",
    "GetRecentActivityUseCase",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
    "RemoveThreadRequest",
    "RemoveThreadUseCase",
]
