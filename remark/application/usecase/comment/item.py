"""Comment representation shared by comment use case responses."""

from datetime import datetime

from pydantic import BaseModel

from remark.domain.model.comment import Comment
from remark.domain.service import CommentTreeNode


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    author_id: str
    author_username: str | None
    content: str  # Masked while deleted
    original_content: str | None
    parent_id: str | None
    depth: int
    path: str
    children_count: int
    is_edited: bool
    edited_at: datetime | None
    is_deleted: bool
    deleted_at: datetime | None
    restored_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert a domain comment to its response model."""
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            content=comment.display_content,
            original_content=None if comment.is_deleted else comment.original_content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            path=str(comment.path),
            children_count=comment.children_count,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            is_deleted=comment.is_deleted,
            deleted_at=comment.deleted_at,
            restored_at=comment.restored_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentTreeItem(BaseModel):
    """Comment with its replies nested beneath it.

    Recursive structure mirroring the domain CommentTreeNode.
    """

    comment: CommentItem
    children: list["CommentTreeItem"]

    @classmethod
    def from_domain(cls, node: CommentTreeNode) -> "CommentTreeItem":
        """Convert a domain tree node to its response model.

        Args:
            node: Domain comment tree node

        Returns:
            Response model with children recursively converted
        """
        return cls(
            comment=CommentItem.from_domain(node.comment),
            children=[cls.from_domain(child) for child in node.children],
        )
