"""Comment thread construction."""

from collections import defaultdict
from dataclasses import dataclass, field

from remarks.domain.model.comment import Comment
from remarks.domain.value import CommentId


@dataclass
class CommentThreadNode:
    """Node in a post's comment forest."""

    comment: Comment
    children: list["CommentThreadNode"] = field(default_factory=list)


class ThreadBuilder:
    """Turns a flat list of approved comments into a display forest.

    Input is expected in display order (``parent_id`` ascending with
    top-level comments first, then ``created_at`` ascending); groups keep
    that order.

    By default replies are nested one level deep: a top-level comment gets
    its direct replies as children, and replies to replies are not shown.
    With ``recursive=True`` every reply is attached under its parent down
    to the deepest level.
    """

    def __init__(self, recursive: bool = False) -> None:
        self.recursive = recursive

    def build(self, comments: list[Comment]) -> list[CommentThreadNode]:
        """Build the forest.

        Algorithm:
        1. Single pass: split comments into roots and a parent_id -> replies map
        2. Attach each root's direct replies as its children
        3. In recursive mode, keep attaching from an explicit work list
           instead of recursing, so thread depth never touches the stack

        Args:
            comments: Approved comments of one post in display order

        Returns:
            Top-level nodes in creation order
        """
        replies: dict[CommentId, list[Comment]] = defaultdict(list)
        roots: list[CommentThreadNode] = []
        for comment in comments:
            if not comment.is_reply:
                roots.append(CommentThreadNode(comment=comment))
            else:
                replies[comment.parent_id].append(comment)

        for root in roots:
            root.children = self._children_of(root, replies)

        if self.recursive:
            frontier = [child for root in roots for child in root.children]
            while frontier:
                node = frontier.pop()
                node.children = self._children_of(node, replies)
                frontier.extend(node.children)

        return roots

    @staticmethod
    def _children_of(
        node: CommentThreadNode, replies: dict[CommentId, list[Comment]]
    ) -> list[CommentThreadNode]:
        return [
            CommentThreadNode(comment=reply)
            for reply in replies.get(node.comment.id, [])
        ]
