"""In-memory notification repository for testing."""

from remark.domain.model.notification import Notification
from remark.domain.repository.notification import NotificationRepository
from remark.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Notification]:
        """Find notifications for a recipient, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]
