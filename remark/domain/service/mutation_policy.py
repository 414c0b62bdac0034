"""Time-window and ownership rules for comment mutations.

All predicates are pure: they look only at the comment snapshot, the
instant being evaluated and the configured window. Windows are inclusive,
so an action exactly at the boundary is still allowed.
"""

from datetime import datetime

from remark.domain.error import NotAuthorizedError
from remark.domain.model.comment import Comment
from remark.domain.value import MutationWindow, UserId

DEFAULT_WINDOW = MutationWindow()


def is_editable(
    comment: Comment, now: datetime, window: MutationWindow = DEFAULT_WINDOW
) -> bool:
    """Whether the comment may be edited at ``now``."""
    return now - comment.created_at <= window.edit and not comment.is_deleted


def is_deletable(
    comment: Comment, now: datetime, window: MutationWindow = DEFAULT_WINDOW
) -> bool:
    """Whether the comment is still inside its delete window at ``now``.

    Does not look at ``is_deleted``; callers decide how to treat a repeat
    delete.
    """
    return now - comment.created_at <= window.edit


def is_restorable(
    comment: Comment, now: datetime, window: MutationWindow = DEFAULT_WINDOW
) -> bool:
    """Whether the deleted comment may be restored at ``now``."""
    if not comment.is_deleted or comment.deleted_at is None:
        return False
    return now - comment.deleted_at <= window.restore


def is_owner(comment: Comment, user_id: UserId) -> bool:
    return comment.author_id == user_id


def ensure_owner(comment: Comment, user_id: UserId, action: str) -> None:
    """Raise NotAuthorizedError unless ``user_id`` authored the comment.

    Raises:
        NotAuthorizedError: If the requester is not the author
    """
    if not is_owner(comment, user_id):
        raise NotAuthorizedError("comment", str(comment.id), str(user_id), action)
