"""Domain value objects for the forum."""

from board.domain.value.identifiers import CommentId, ThreadId, UserId
from board.domain.value.types import (
    InviteToken,
    TargetType,
    VoteDirection,
    VoteTarget,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    # Types
    "InviteToken",
    "TargetType",
    "VoteDirection",
    "VoteTarget",
    "VoteValue",
]
