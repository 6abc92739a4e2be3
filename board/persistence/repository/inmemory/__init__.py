"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .moderation import InMemoryInviteRepository, InMemoryModerationRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryStore
from .thread import InMemoryThreadRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryInviteRepository",
    "InMemoryModerationRepository",
    "InMemoryProfileRepository",
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryVoteRepository",
]
