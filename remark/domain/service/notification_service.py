"""Notification domain service."""

from uuid import uuid4

import logfire

from remark.domain.model.notification import Notification
from remark.domain.repository import NotificationRepository
from remark.domain.value import CommentId, NotificationId, NotificationType, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for creating notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_reply(
        self,
        recipient_id: UserId,
        comment_id: CommentId,
        actor_id: UserId,
    ) -> Notification:
        """Record that ``actor_id`` replied to one of ``recipient_id``'s comments.

        Args:
            recipient_id: Author of the parent comment
            comment_id: The new reply
            actor_id: Author of the reply

        Returns:
            The created notification
        """
        with logfire.span(
            "notification_service.notify_reply",
            recipient_id=str(recipient_id),
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=NotificationType.COMMENT_REPLY,
                title="New reply to your comment",
                message="Someone replied to your comment",
                user_id=recipient_id,
                comment_id=comment_id,
                triggered_by_id=actor_id,
                metadata={"comment_id": str(comment_id)},
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Reply notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved

    async def get_notifications_for_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Notification]:
        """Get a recipient's notifications, newest first."""
        with logfire.span(
            "notification_service.get_notifications_for_user", user_id=str(user_id)
        ):
            return await self.notification_repository.find_by_user(
                user_id, limit=limit, offset=offset
            )
