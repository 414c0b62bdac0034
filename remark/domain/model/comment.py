"""Comment entity.

Comments form a forest: each comment optionally replies to one parent and
may have any number of direct replies. Ancestry is stored as a materialized
path so a whole subtree can be read with one prefix query.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel, utc_now
from remark.domain.value import CommentId, CommentPath, UserId

DELETED_PLACEHOLDER = "[Comment deleted]"


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for roots)
    - depth: Nesting level (0 for roots, parent.depth + 1 otherwise)
    - path: Ancestor chain, root first, excluding the comment itself

    id, author_id, parent_id, depth and path are write-once. Content and the
    edit/delete/restore flags change only through the mutation operations.
    """

    id: CommentId
    author_id: UserId
    author_username: Optional[str] = None  # Read from users, never written
    content: str = Field(min_length=1)
    original_content: Optional[str] = None  # Captured on first edit
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    path: CommentPath = CommentPath(())
    children_count: int = Field(default=0, ge=0)
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    restored_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def display_content(self) -> str:
        """Text shown to readers; deleted comments are masked."""
        return DELETED_PLACEHOLDER if self.is_deleted else self.content

    def descendant_prefix(self) -> CommentPath:
        """Path prefix shared by every descendant of this comment."""
        return CommentPath.child_path(self.id, self.path)


class CommentPage(DomainModel):
    """One page of a filtered comment listing."""

    items: list[Comment]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)


class CommentStats(DomainModel):
    """Aggregate counters over every stored comment."""

    total_comments: int = 0
    total_replies: int = 0
    total_deleted: int = 0
    average_depth: float = 0.0
