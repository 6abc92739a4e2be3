"""Domain model entities for the forum."""

from board.domain.model.comment import Comment
from board.domain.model.common import REMOVED_PLACEHOLDER, author_label
from board.domain.model.profile import AuthUser, Profile
from board.domain.model.session import SessionContext
from board.domain.model.thread import NewThread, Thread, ThreadSummary

__all__ = [
    "AuthUser",
    "Comment",
    "NewThread",
    "Profile",
    "REMOVED_PLACEHOLDER",
    "SessionContext",
    "Thread",
    "ThreadSummary",
    "author_label",
]
