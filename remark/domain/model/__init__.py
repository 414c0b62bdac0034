"""Domain model entities for remark."""

from remark.domain.model.comment import Comment, CommentPage, CommentStats
from remark.domain.model.notification import Notification

__all__ = [
    "Comment",
    "CommentPage",
    "CommentStats",
    "Notification",
]
