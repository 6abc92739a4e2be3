"""Domain services."""

from .account_service import AccountService
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    MAX_NESTING_DEPTH,
    CommentNavigation,
    CommentNode,
    build_comment_tree,
    build_navigation_index,
)
from .invite_service import InviteService, normalize_invite_token
from .media_service import (
    MediaService,
    MediaStorage,
    MediaStorageError,
    UploadedMedia,
)
from .moderation_service import ModerationService, normalize_reason
from .profile_service import ProfileService
from .session_service import IdentityProvider, SessionService, parse_bearer
from .thread_service import ThreadService, normalize_url
from .vote_ledger import VoteLedger, next_vote

__all__ = [
    "AccountService",
    "CommentNavigation",
    "CommentNode",
    "CommentService",
    "IdentityProvider",
    "InviteService",
    "MAX_NESTING_DEPTH",
    "MediaService",
    "MediaStorage",
    "MediaStorageError",
    "ModerationService",
    "ProfileService",
    "Service",
    "SessionService",
    "ThreadService",
    "UploadedMedia",
    "VoteLedger",
    "build_comment_tree",
    "build_navigation_index",
    "next_vote",
    "normalize_invite_token",
    "normalize_reason",
    "normalize_url",
    "parse_bearer",
]
