"""Comment entity.

Comments are replies to a thread or to another comment. The store returns
them as a flat list; the tree is rebuilt locally on every read.
"""

from datetime import datetime
from typing import Optional

from board.domain.model.common import REMOVED_PLACEHOLDER, DomainModel, author_label
from board.domain.value import CommentId, ThreadId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is expressed only through ``parent_id`` (None for top-level).
    A parent is expected to belong to the same thread; this is upheld by the
    store, not checked here.
    """

    id: CommentId
    thread_id: Optional[ThreadId] = None
    body: str
    created_at: datetime
    author_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    author_display_name: Optional[str] = None
    is_deleted: bool = False

    @property
    def author_label(self) -> str:
        return author_label(self.author_display_name, self.author_id)

    @property
    def display_body(self) -> str:
        return REMOVED_PLACEHOLDER if self.is_deleted else self.body
