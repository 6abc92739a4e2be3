"""Mappers for converting between store rows and domain models.

Rows arrive as JSON objects from the store's REST surface. Author display
names come from an embedded ``profiles`` object on direct table reads and
from a flat ``author_display_name`` column on procedure results.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from board.domain.model import Comment, Profile, Thread, ThreadSummary
from board.domain.value import CommentId, ThreadId, UserId, VoteValue

THREAD_COLUMNS = (
    "id, title, body, created_at, author_id, url, url_domain, media_url, "
    "media_mime_type, is_deleted, profiles!threads_author_id_fkey(display_name)"
)
COMMENT_COLUMNS = (
    "id, thread_id, body, created_at, author_id, parent_id, is_deleted, "
    "profiles!comments_author_id_fkey(display_name)"
)
PROFILE_COLUMNS = "id, display_name, bio, created_at"


def _user_id(value: Any) -> Optional[UserId]:
    if value is None:
        return None
    return UserId(value if isinstance(value, UUID) else UUID(str(value)))


def _display_name(row: Dict[str, Any]) -> Optional[str]:
    if row.get("author_display_name") is not None:
        return row["author_display_name"]
    embedded = row.get("profiles")
    if isinstance(embedded, list):
        embedded = embedded[0] if embedded else None
    if isinstance(embedded, dict):
        return embedded.get("display_name")
    return None


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert a thread row to Thread domain model.

    Args:
        row: Store row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(int(row["id"])),
        title=row["title"],
        body=row.get("body"),
        created_at=row["created_at"],
        author_id=_user_id(row.get("author_id")),
        author_display_name=_display_name(row),
        url=row.get("url"),
        url_domain=row.get("url_domain"),
        media_url=row.get("media_url"),
        media_mime_type=row.get("media_mime_type"),
        is_deleted=bool(row.get("is_deleted") or False),
    )


def row_to_thread_summary(row: Dict[str, Any]) -> ThreadSummary:
    """Convert a ``get_threads_with_meta`` row to ThreadSummary."""
    thread = row_to_thread(row)
    return ThreadSummary(
        **thread.model_dump(),
        score=int(row.get("score") or 0),
        comment_count=int(row.get("comment_count") or 0),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a comment row to Comment domain model."""
    parent_id = row.get("parent_id")
    thread_id = row.get("thread_id")
    return Comment(
        id=CommentId(int(row["id"])),
        thread_id=ThreadId(int(thread_id)) if thread_id is not None else None,
        body=row.get("body") or "",
        created_at=row["created_at"],
        author_id=_user_id(row.get("author_id")),
        parent_id=CommentId(int(parent_id)) if parent_id is not None else None,
        author_display_name=_display_name(row),
        is_deleted=bool(row.get("is_deleted") or False),
    )


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert a profile row to Profile domain model."""
    return Profile(
        id=_user_id(row["id"]),
        display_name=row.get("display_name"),
        bio=row.get("bio"),
        created_at=row.get("created_at"),
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to an upsert payload.

    ``created_at`` is owned by the store and never sent.
    """
    return {
        "id": str(profile.id),
        "display_name": profile.display_name,
        "bio": profile.bio,
    }


def row_to_vote_value(row: Dict[str, Any]) -> VoteValue:
    """Stored votes are +1 or -1; anything positive counts as up."""
    return VoteValue.UP if int(row["value"]) > 0 else VoteValue.DOWN
