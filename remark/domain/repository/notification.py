"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from remark.domain.model.notification import Notification
from remark.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification.

        Implementations must isolate the write so that a failure here
        leaves any surrounding unit of work usable.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Notification]:
        """Find notifications for a recipient, newest first.

        Args:
            user_id: Recipient user ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass
