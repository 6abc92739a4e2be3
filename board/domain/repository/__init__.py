"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.moderation import InviteRepository, ModerationRepository
from board.domain.repository.profile import ProfileRepository
from board.domain.repository.thread import ThreadRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "InviteRepository",
    "ModerationRepository",
    "ProfileRepository",
    "ThreadRepository",
    "VoteRepository",
]
