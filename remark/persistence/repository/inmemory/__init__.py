"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
]
