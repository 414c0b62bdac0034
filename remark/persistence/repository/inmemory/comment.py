"""In-memory comment repository for testing."""

from typing import Optional

from remark.domain.model.comment import Comment, CommentPage, CommentStats
from remark.domain.repository.comment import CommentFilter, CommentRepository
from remark.domain.value import CommentId, CommentPath


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def _matches(self, comment: Comment, filters: CommentFilter) -> bool:
        if not filters.include_deleted and comment.is_deleted:
            return False
        if filters.author_id is not None and comment.author_id != filters.author_id:
            return False
        if filters.filters_by_parent and comment.parent_id != filters.parent_id:
            return False
        return True

    async def find_many(self, filters: CommentFilter) -> CommentPage:
        """Find a page of comments, newest first."""
        comments = [c for c in self._comments.values() if self._matches(c, filters)]

        # Sort by created_at descending
        comments.sort(key=lambda c: c.created_at, reverse=True)

        return CommentPage(
            items=comments[filters.offset : filters.offset + filters.limit],
            total=len(comments),
            page=filters.page,
            limit=filters.limit,
        )

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_path_prefix(self, prefix: CommentPath) -> list[Comment]:
        """Find every comment whose path starts with ``prefix``."""
        comments = [c for c in self._comments.values() if prefix.is_prefix_of(c.path)]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment.

        Updates keep the stored children_count, which only
        increment_children_count may change.
        """
        existing = self._comments.get(comment.id)
        if existing and existing.children_count != comment.children_count:
            comment = comment.model_copy(
                update={"children_count": existing.children_count}
            )
        self._comments[comment.id] = comment
        return comment

    async def increment_children_count(self, comment_id: CommentId) -> None:
        """Atomically increment children_count by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            # Create updated comment (since comments are immutable)
            self._comments[comment_id] = comment.model_copy(
                update={"children_count": comment.children_count + 1}
            )

    async def get_stats(self) -> CommentStats:
        """Compute aggregate counters over all stored comments."""
        comments = list(self._comments.values())
        if not comments:
            return CommentStats()

        return CommentStats(
            total_comments=len(comments),
            total_replies=sum(1 for c in comments if c.parent_id is not None),
            total_deleted=sum(1 for c in comments if c.is_deleted),
            average_depth=sum(c.depth for c in comments) / len(comments),
        )
