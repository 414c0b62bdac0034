"""Domain value objects for remark."""

from remark.domain.value.identifiers import CommentId, NotificationId, UserId
from remark.domain.value.types import (
    PATH_SEPARATOR,
    CommentPath,
    MutationWindow,
    NotificationType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "NotificationId",
    # Types
    "CommentPath",
    "MutationWindow",
    "NotificationType",
    "PATH_SEPARATOR",
]
