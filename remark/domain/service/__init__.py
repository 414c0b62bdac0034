"""Domain services."""

from . import mutation_policy
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentTreeNode, assemble_tree
from .dispatch import BackgroundJobs, CommitSignal
from .notification_service import NotificationService
from .reply_notifier import ReplyNotifier

__all__ = [
    "BackgroundJobs",
    "CommentService",
    "CommentTreeNode",
    "CommitSignal",
    "NotificationService",
    "ReplyNotifier",
    "Service",
    "assemble_tree",
    "mutation_policy",
]
