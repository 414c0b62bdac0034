"""Nested comment trees built from flat, path-tagged comment lists."""

from dataclasses import dataclass, field

import logfire

from remark.domain.model.comment import Comment
from remark.domain.value import CommentId


@dataclass
class CommentTreeNode:
    """Node in a reply tree: a comment and its direct replies."""

    comment: Comment
    children: list["CommentTreeNode"] = field(default_factory=list)

    def size(self) -> int:
        """Number of comments in this subtree, including this one."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total


def assemble_tree(root: Comment, descendants: list[Comment]) -> CommentTreeNode:
    """Attach ``descendants`` under ``root`` following their parent ids.

    Algorithm:
    1. Create one node per comment, keyed by id
    2. Walk the descendants in chronological order and append each node to
       its parent's children

    Runs in time linear in the subtree size. Children keep created_at order.
    Comments whose parent is not part of the subtree are dropped.

    Args:
        root: Comment at the top of the subtree
        descendants: Every comment below ``root``

    Returns:
        Tree rooted at ``root``
    """
    ordered = sorted(descendants, key=lambda c: c.created_at)
    nodes: dict[CommentId, CommentTreeNode] = {root.id: CommentTreeNode(root)}
    for comment in ordered:
        if comment.id != root.id:
            nodes[comment.id] = CommentTreeNode(comment)

    for comment in ordered:
        if comment.id == root.id:
            continue
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is None:
            logfire.warn(
                "Orphaned comment skipped while assembling tree",
                comment_id=str(comment.id),
                parent_id=str(comment.parent_id),
                root_id=str(root.id),
            )
            continue
        parent.children.append(nodes[comment.id])

    return nodes[root.id]
