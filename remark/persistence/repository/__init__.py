"""PostgreSQL repository implementations."""

from remark.persistence.repository.comment import PostgresCommentRepository
from remark.persistence.repository.notification import PostgresNotificationRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
