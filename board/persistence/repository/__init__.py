"""Store-backed repository implementations."""

from .comment import StoreCommentRepository
from .moderation import StoreInviteRepository, StoreModerationRepository
from .profile import StoreProfileRepository
from .thread import StoreThreadRepository
from .vote import StoreVoteRepository

__all__ = [
    "StoreCommentRepository",
    "StoreInviteRepository",
    "StoreModerationRepository",
    "StoreProfileRepository",
    "StoreThreadRepository",
    "StoreVoteRepository",
]
