"""Comment tree building and navigation.

The store returns a thread's comments as a flat list in ascending creation
order. This module rebuilds the reply hierarchy for rendering and the
indices behind the root/parent/prev/next controls shown on each comment.

Both builders are pure and iterative. A ``parent_id`` cycle (which the
store should never produce) cannot make a comment disappear or loop
forever: any comment not reachable from a root is promoted to a root.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from board.domain.model import Comment
from board.domain.value import CommentId

# Replies deeper than this are rendered without further indentation
MAX_NESTING_DEPTH = 6


@dataclass
class CommentNode:
    """A comment and its direct replies.

    ``children`` keeps insertion order, which is ascending creation order
    because the input is ascending. Nodes are built fresh on every call and
    are not meant to be mutated afterwards.
    """

    comment: Comment
    depth: int = 0
    max_visual_depth: int = MAX_NESTING_DEPTH
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def visual_depth(self) -> int:
        """Indentation level, capped at ``max_visual_depth``."""
        return min(self.depth, self.max_visual_depth)

    def walk(self) -> Iterable["CommentNode"]:
        """Yield this node and all descendants in display order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def _newest_first(nodes: list[CommentNode]) -> list[CommentNode]:
    # Stable sort: equal timestamps keep input order
    return sorted(nodes, key=lambda n: n.comment.created_at, reverse=True)


def build_comment_tree(
    comments: Iterable[Comment], max_nesting_depth: int = MAX_NESTING_DEPTH
) -> list[CommentNode]:
    """Build a forest of comment nodes from a flat list.

    Algorithm:
    1. Index pass: one node per comment, keyed by id.
    2. Attach pass: each node whose parent is in the batch is appended to
       that parent's children; every other node is a root. Orphans (parent
       missing from the batch) are therefore indistinguishable from true
       top-level comments.
    3. Walk down from the roots assigning depth and marking visited nodes.
       Nodes never reached hang off a parent cycle; the earliest unreached
       comment becomes a root, which breaks the cycle for the rest.
    4. Sort roots by ``created_at`` descending.

    Args:
        comments: Comments of one thread, ascending by creation time
        max_nesting_depth: Deepest indentation level rendered

    Returns:
        Root nodes, freshest first
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(
            comment=comment, max_visual_depth=max_nesting_depth
        )

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_id
        if parent_id is not None and parent_id in nodes:
            nodes[parent_id].children.append(node)
        else:
            roots.append(node)

    visited: set[CommentId] = set()

    def _mark(root: CommentNode) -> None:
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if node.id in visited:
                continue
            visited.add(node.id)
            node.depth = depth
            for child in node.children:
                stack.append((child, depth + 1))

    for root in roots:
        _mark(root)

    for node in nodes.values():
        if node.id in visited:
            continue
        # Unreached: promote, and detach from its cyclic parent
        parent = nodes.get(node.comment.parent_id)
        if parent is not None:
            parent.children = [c for c in parent.children if c.id != node.id]
        roots.append(node)
        _mark(node)

    return _newest_first(roots)


@dataclass
class CommentNavigation:
    """Lookup indices for moving between comments of one thread.

    Attributes:
        parents: Comment id to its ``parent_id`` as stored (may be None)
        top_level_order: Root ids, freshest first
        siblings: Parent id to reply ids, ascending creation order
    """

    parents: dict[CommentId, Optional[CommentId]]
    top_level_order: list[CommentId]
    siblings: dict[CommentId, list[CommentId]]
    _roots: dict[CommentId, CommentId] = field(default_factory=dict, repr=False)
    _top_level_index: dict[CommentId, int] = field(default_factory=dict, repr=False)
    _sibling_index: dict[CommentId, int] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._top_level_index = {
            cid: i for i, cid in enumerate(self.top_level_order)
        }
        for ids in self.siblings.values():
            for i, cid in enumerate(ids):
                self._sibling_index[cid] = i

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self.parents

    def _is_root(self, comment_id: CommentId) -> bool:
        return comment_id in self._top_level_index

    def parent_of(self, comment_id: CommentId) -> Optional[CommentId]:
        """Direct parent id, None for roots and unknown ids."""
        if comment_id not in self.parents or self._is_root(comment_id):
            return None
        return self.parents[comment_id]

    def root_of(self, comment_id: CommentId) -> Optional[CommentId]:
        """Id of the top-level ancestor.

        Walks upwards and memoises every node on the path. The walk is
        bounded by a visited set: if it runs into a cycle, the starting
        comment is its own root.

        Returns:
            Root id, or None for an unknown id
        """
        if comment_id not in self.parents:
            return None
        if comment_id in self._roots:
            return self._roots[comment_id]

        path: list[CommentId] = []
        seen: set[CommentId] = set()
        current = comment_id
        root: Optional[CommentId] = None
        while True:
            if current in self._roots:
                root = self._roots[current]
                break
            if current in seen:
                break
            seen.add(current)
            path.append(current)
            parent = self.parents.get(current)
            if (
                self._is_root(current)
                or parent is None
                or parent not in self.parents
            ):
                root = current
                break
            current = parent

        if root is None:
            # Cycle: no memoisation, each member resolves to itself
            self._roots[comment_id] = comment_id
            return comment_id

        for cid in path:
            self._roots[cid] = root
        return root

    def top_level_position(self, comment_id: CommentId) -> Optional[int]:
        return self._top_level_index.get(comment_id)

    def sibling_order(self, parent_id: CommentId) -> list[CommentId]:
        """Reply ids of ``parent_id``, ascending creation order."""
        return list(self.siblings.get(parent_id, []))

    def sibling_position(self, comment_id: CommentId) -> Optional[int]:
        if self._is_root(comment_id):
            return None
        return self._sibling_index.get(comment_id)

    def _peers(self, comment_id: CommentId) -> tuple[list[CommentId], Optional[int]]:
        if self._is_root(comment_id):
            return self.top_level_order, self._top_level_index[comment_id]
        parent = self.parent_of(comment_id)
        if parent is None:
            return [], None
        return self.siblings.get(parent, []), self._sibling_index.get(comment_id)

    def previous_of(self, comment_id: CommentId) -> Optional[CommentId]:
        """Previous comment at the same level, None at the first position."""
        peers, index = self._peers(comment_id)
        if index is None or index == 0:
            return None
        return peers[index - 1]

    def next_of(self, comment_id: CommentId) -> Optional[CommentId]:
        """Next comment at the same level, None at the last position."""
        peers, index = self._peers(comment_id)
        if index is None or index >= len(peers) - 1:
            return None
        return peers[index + 1]

    def parent_link(self, comment_id: CommentId) -> Optional[CommentId]:
        return self.parent_of(comment_id)

    def root_shortcut(self, comment_id: CommentId) -> Optional[CommentId]:
        """Root id when it is at least two levels up, None otherwise."""
        root = self.root_of(comment_id)
        if root is None or root == comment_id or root == self.parent_of(comment_id):
            return None
        return root


def build_navigation_index(comments: Iterable[Comment]) -> CommentNavigation:
    """Build the navigation indices for one thread's comments.

    Top-level order matches the forest returned by ``build_comment_tree``
    (including orphans and cycle breakers). Sibling order is ascending
    creation order among replies to the same parent.

    Args:
        comments: Comments of one thread, ascending by creation time

    Returns:
        Navigation index
    """
    comments = list(comments)
    forest = build_comment_tree(comments)

    parents: dict[CommentId, Optional[CommentId]] = {
        c.id: c.parent_id for c in comments
    }
    siblings: dict[CommentId, list[CommentId]] = {}
    for root in forest:
        for node in root.walk():
            if node.children:
                ordered = sorted(
                    node.children, key=lambda n: n.comment.created_at
                )
                siblings[node.id] = [child.id for child in ordered]

    return CommentNavigation(
        parents=parents,
        top_level_order=[root.id for root in forest],
        siblings=siblings,
    )
