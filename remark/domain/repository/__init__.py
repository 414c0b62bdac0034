"""Repository interfaces for remark domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from remark.domain.repository.comment import CommentFilter, CommentRepository
from remark.domain.repository.notification import NotificationRepository

__all__ = [
    "CommentFilter",
    "CommentRepository",
    "NotificationRepository",
]
