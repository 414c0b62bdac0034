"""Comment domain service."""

from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from remark.domain.error import (
    ContentDeletedException,
    InvalidStateError,
    MutationWindowClosedError,
    NotFoundError,
)
from remark.domain.model.comment import Comment, CommentPage, CommentStats
from remark.domain.model.common import utc_now
from remark.domain.repository import CommentFilter, CommentRepository
from remark.domain.value import CommentId, CommentPath, MutationWindow, UserId

from . import mutation_policy
from .base import Service
from .comment_tree import CommentTreeNode, assemble_tree
from .reply_notifier import ReplyNotifier


def _minutes(window: timedelta) -> float:
    return window.total_seconds() / 60


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_notifier: ReplyNotifier,
        window: MutationWindow | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reply_notifier: Notifier for replies to other users' comments
            window: Edit/delete and restore time limits
            clock: Source of the current time
        """
        self.comment_repository = comment_repository
        self.reply_notifier = reply_notifier
        self.window = window or MutationWindow()
        self.clock = clock

    async def assign_path(
        self, parent_id: CommentId | None
    ) -> tuple[int, CommentPath, Comment | None]:
        """Compute depth and path for a new comment.

        Args:
            parent_id: Parent comment ID (None for a root comment)

        Returns:
            Tuple of (depth, path, parent comment or None)

        Raises:
            NotFoundError: If the parent does not exist
            ContentDeletedException: If the parent is soft-deleted
        """
        if parent_id is None:
            return 0, CommentPath(()), None

        parent = await self.comment_repository.find_by_id(parent_id)
        if not parent:
            logfire.warn("Parent comment not found", parent_id=str(parent_id))
            raise NotFoundError("Parent comment", str(parent_id))
        if parent.is_deleted:
            logfire.warn("Reply to deleted comment rejected", parent_id=str(parent_id))
            raise ContentDeletedException("comment", str(parent_id), action="reply to")

        return parent.depth + 1, parent.descendant_prefix(), parent

    async def create_comment(
        self,
        content: str,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a root comment or a reply.

        Steps:
        1. Resolve depth and path from the parent
        2. Persist the comment
        3. Atomically bump the parent's children_count
        4. Queue a notification for the parent's author, sent after commit

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for roots)

        Returns:
            The stored comment, reloaded after the write

        Raises:
            NotFoundError: If the parent does not exist
            ContentDeletedException: If the parent is soft-deleted
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            depth, path, parent = await self.assign_path(parent_id)

            now = self.clock()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                path=path,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            if parent is not None:
                await self.comment_repository.increment_children_count(parent.id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                author_id=str(author_id),
                depth=depth,
            )

            self.reply_notifier.notify(parent, saved)

            return await self.comment_repository.find_by_id(saved.id) or saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_children(self, comment_id: CommentId) -> list[Comment]:
        """Get the direct replies to a comment, oldest first."""
        return await self.comment_repository.find_children(comment_id)

    async def list_comments(self, filters: CommentFilter) -> CommentPage:
        """List comments newest first with pagination.

        Args:
            filters: Author, parent, deletion and pagination filters

        Returns:
            Page of comments with the total for the filter set
        """
        with logfire.span(
            "comment_service.list_comments",
            author_id=str(filters.author_id) if filters.author_id else None,
            parent_id=str(filters.parent_id) if filters.parent_id else None,
            filters_by_parent=filters.filters_by_parent,
            include_deleted=filters.include_deleted,
            page=filters.page,
            limit=filters.limit,
        ):
            result = await self.comment_repository.find_many(filters)
            logfire.info(
                "Comments listed", count=len(result.items), total=result.total
            )
            return result

    async def get_subtree(self, comment_id: CommentId) -> CommentTreeNode:
        """Get a comment with all of its descendants nested under it.

        Args:
            comment_id: Comment at the top of the subtree

        Returns:
            Tree rooted at the comment, children in chronological order

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_subtree", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            descendants = await self.comment_repository.find_by_path_prefix(
                comment.descendant_prefix()
            )
            tree = assemble_tree(comment, descendants)
            logfire.info(
                "Subtree assembled",
                comment_id=str(comment_id),
                size=len(descendants) + 1,
            )
            return tree

    async def get_thread(self, comment_id: CommentId) -> list[Comment]:
        """Get the whole thread a comment belongs to as a flat list.

        The thread is the root ancestor plus every one of its descendants.

        Args:
            comment_id: Any comment in the thread

        Returns:
            Root and descendants ordered by created_at ascending

        Raises:
            NotFoundError: If the comment or its root does not exist
        """
        with logfire.span("comment_service.get_thread", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)

            root_id = comment.path.root_id or comment.id
            root = (
                comment
                if root_id == comment.id
                else await self.comment_repository.find_by_id(root_id)
            )
            if root is None:
                logfire.error(
                    "Thread root missing",
                    comment_id=str(comment_id),
                    root_id=str(root_id),
                )
                raise NotFoundError("Comment", str(root_id))

            descendants = await self.comment_repository.find_by_path_prefix(
                root.descendant_prefix()
            )
            thread = sorted([root, *descendants], key=lambda c: c.created_at)
            logfire.info(
                "Thread retrieved",
                comment_id=str(comment_id),
                root_id=str(root_id),
                count=len(thread),
            )
            return thread

    async def edit_comment(
        self, comment_id: CommentId, requester_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's text.

        The text at creation is kept in original_content on the first edit
        only.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the edit (must be the author)
            content: New text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the author
            ContentDeletedException: If the comment is deleted
            MutationWindowClosedError: If the edit window has elapsed
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
            content_length=len(content),
        ):
            comment = await self.get_comment(comment_id)
            mutation_policy.ensure_owner(comment, requester_id, "edit")
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))

            now = self.clock()
            if not mutation_policy.is_editable(comment, now, self.window):
                logfire.warn("Edit window elapsed", comment_id=str(comment_id))
                raise MutationWindowClosedError("edited", _minutes(self.window.edit))

            updated = comment.model_copy(
                update={
                    "content": content,
                    "original_content": comment.original_content
                    if comment.is_edited
                    else comment.content,
                    "is_edited": True,
                    "edited_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment edited", comment_id=str(comment_id))
            return saved

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Soft-delete a comment.

        Replies stay in place and the parent's children_count is unchanged.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the delete (must be the author)

        Returns:
            Deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the author
            InvalidStateError: If the comment is already deleted
            MutationWindowClosedError: If the delete window has elapsed
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            mutation_policy.ensure_owner(comment, requester_id, "delete")
            if comment.is_deleted:
                raise InvalidStateError(f"Comment {comment_id} is already deleted")

            now = self.clock()
            if not mutation_policy.is_deletable(comment, now, self.window):
                logfire.warn("Delete window elapsed", comment_id=str(comment_id))
                raise MutationWindowClosedError("deleted", _minutes(self.window.edit))

            updated = comment.model_copy(
                update={"is_deleted": True, "deleted_at": now, "updated_at": now}
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return saved

    async def restore_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Undo a soft delete.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the restore (must be the author)

        Returns:
            Restored comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the author
            InvalidStateError: If the comment is not deleted
            MutationWindowClosedError: If the restore window has elapsed
        """
        with logfire.span(
            "comment_service.restore_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            mutation_policy.ensure_owner(comment, requester_id, "restore")
            if not comment.is_deleted:
                raise InvalidStateError(f"Comment {comment_id} is not deleted")

            now = self.clock()
            if not mutation_policy.is_restorable(comment, now, self.window):
                logfire.warn("Restore window elapsed", comment_id=str(comment_id))
                raise MutationWindowClosedError(
                    "restored", _minutes(self.window.restore), since="deletion"
                )

            updated = comment.model_copy(
                update={
                    "is_deleted": False,
                    "deleted_at": None,
                    "restored_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment restored", comment_id=str(comment_id))
            return saved

    async def get_stats(self) -> CommentStats:
        """Get aggregate comment counters."""
        with logfire.span("comment_service.get_stats"):
            stats = await self.comment_repository.get_stats()
            logfire.info(
                "Comment stats computed",
                total_comments=stats.total_comments,
                total_deleted=stats.total_deleted,
            )
            return stats
