"""Thread entity.

Threads are the top-level discussion posts. A thread may carry an external
link and one uploaded image.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import REMOVED_PLACEHOLDER, DomainModel, author_label
from board.domain.value import ThreadId, UserId


class Thread(DomainModel):
    """Thread entity.

    ``author_id`` is None once the author deleted their account; the
    thread itself is kept and shown as anonymous.
    """

    id: ThreadId
    title: str
    body: Optional[str] = None
    created_at: datetime
    author_id: Optional[UserId] = None
    author_display_name: Optional[str] = None
    url: Optional[str] = None
    url_domain: Optional[str] = None
    media_url: Optional[str] = None
    media_mime_type: Optional[str] = None
    is_deleted: bool = False

    @property
    def author_label(self) -> str:
        return author_label(self.author_display_name, self.author_id)

    @property
    def display_title(self) -> str:
        return REMOVED_PLACEHOLDER if self.is_deleted else self.title

    @property
    def display_body(self) -> Optional[str]:
        return REMOVED_PLACEHOLDER if self.is_deleted else self.body

    @property
    def has_image(self) -> bool:
        """Whether the attached media should be rendered as an image."""
        if not self.media_url:
            return False
        return self.media_mime_type is None or self.media_mime_type.startswith(
            "image/"
        )


class ThreadSummary(Thread):
    """Thread row as listed on the front page, with pre-aggregated meta."""

    score: int = 0
    comment_count: int = Field(default=0, ge=0)


class NewThread(DomainModel):
    """Validated input for creating a thread."""

    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    url: Optional[str] = None
    url_domain: Optional[str] = None
    media_url: Optional[str] = None
    media_mime_type: Optional[str] = None
