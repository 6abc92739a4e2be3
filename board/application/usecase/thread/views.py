"""Read models shared by the thread and comment use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.domain.model import Thread
from board.domain.service import CommentNavigation, CommentNode, VoteLedger
from board.domain.value import VoteTarget
from board.util.time import format_time_ago


class ThreadView(BaseModel):
    """A thread as shown to the caller."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    body: Optional[str]
    created_at: datetime
    time_ago: str
    author_id: Optional[UUID]
    author_label: str
    url: Optional[str]
    url_domain: Optional[str]
    media_url: Optional[str]
    media_mime_type: Optional[str]
    has_image: bool
    is_deleted: bool
    score: int
    current_vote: int
    comment_count: int = 0


class CommentLinks(BaseModel):
    """Navigation targets for a comment, None where not offered."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    root: Optional[int] = None
    parent: Optional[int] = None
    previous: Optional[int] = None
    next: Optional[int] = None


class CommentView(BaseModel):
    """A comment with its replies as shown to the caller."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    parent_id: Optional[int]
    body: str
    created_at: datetime
    time_ago: str
    author_id: Optional[UUID]
    author_label: str
    is_deleted: bool
    depth: int
    visual_depth: int
    score: int
    current_vote: int
    links: CommentLinks
    children: list["CommentView"]


def thread_view(
    thread: Thread,
    ledger: VoteLedger,
    comment_count: int = 0,
    now: Optional[datetime] = None,
) -> ThreadView:
    target = VoteTarget.thread(thread.id)
    return ThreadView(
        id=thread.id,
        title=thread.display_title,
        body=thread.display_body,
        created_at=thread.created_at,
        time_ago=format_time_ago(thread.created_at, now),
        author_id=thread.author_id,
        author_label=thread.author_label,
        url=None if thread.is_deleted else thread.url,
        url_domain=None if thread.is_deleted else thread.url_domain,
        media_url=None if thread.is_deleted else thread.media_url,
        media_mime_type=None if thread.is_deleted else thread.media_mime_type,
        has_image=thread.has_image and not thread.is_deleted,
        is_deleted=thread.is_deleted,
        score=ledger.score(target),
        current_vote=int(ledger.current_vote(target)),
        comment_count=comment_count,
    )


def comment_views(
    forest: list[CommentNode],
    navigation: CommentNavigation,
    ledger: VoteLedger,
    now: Optional[datetime] = None,
) -> list[CommentView]:
    """Convert a comment forest to views, iteratively."""

    def _view(node: CommentNode) -> CommentView:
        comment = node.comment
        target = VoteTarget.comment(comment.id)
        return CommentView(
            id=comment.id,
            parent_id=comment.parent_id,
            body=comment.display_body,
            created_at=comment.created_at,
            time_ago=format_time_ago(comment.created_at, now),
            author_id=comment.author_id,
            author_label=comment.author_label,
            is_deleted=comment.is_deleted,
            depth=node.depth,
            visual_depth=node.visual_depth,
            score=ledger.score(target),
            current_vote=int(ledger.current_vote(target)),
            links=CommentLinks(
                root=navigation.root_shortcut(comment.id),
                parent=navigation.parent_link(comment.id),
                previous=navigation.previous_of(comment.id),
                next=navigation.next_of(comment.id),
            ),
            children=[],
        )

    roots = [_view(node) for node in forest]
    stack = list(zip(forest, roots))
    while stack:
        node, view = stack.pop()
        for child in node.children:
            child_view = _view(child)
            view.children.append(child_view)
            stack.append((child, child_view))
    return roots
