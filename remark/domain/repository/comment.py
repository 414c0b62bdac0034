"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import Field

from remark.domain.model.comment import Comment, CommentPage, CommentStats
from remark.domain.value import CommentId, CommentPath, UserId
from remark.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Filters for listing comments.

    ``parent_id`` is tri-state. Leave it out to skip parent filtering, pass
    ``None`` to match only root comments, or pass an id to match the direct
    children of that comment.
    """

    author_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    include_deleted: bool = False
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def filters_by_parent(self) -> bool:
        return "parent_id" in self.model_fields_set

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (deleted or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_many(self, filters: CommentFilter) -> CommentPage:
        """Find a page of comments, newest first.

        Args:
            filters: Author, parent, deletion and pagination filters

        Returns:
            The requested page plus the total for the whole filter set
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments, including deleted ones
        """
        pass

    @abstractmethod
    async def find_by_path_prefix(self, prefix: CommentPath) -> List[Comment]:
        """Find every comment whose path starts with ``prefix``.

        Used for subtree and thread retrieval. A comment matches when its
        path equals the prefix or extends it with further segments.

        Args:
            prefix: Ancestor chain shared by all wanted comments

        Returns:
            Matching comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment as stored
        """
        pass

    @abstractmethod
    async def increment_children_count(self, comment_id: CommentId) -> None:
        """Atomically add one to a comment's children_count.

        Must be a single add against the stored value, never a write of a
        previously read counter.

        Args:
            comment_id: The parent comment ID
        """
        pass

    @abstractmethod
    async def get_stats(self) -> CommentStats:
        """Compute aggregate counters over all stored comments.

        Returns:
            Totals for comments, replies, deleted comments and average depth
        """
        pass
