"""List notifications use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.model.notification import Notification
from remark.domain.service import NotificationService
from remark.domain.value import UserId


class NotificationItem(BaseModel):
    """Notification item in responses."""

    notification_id: str
    type: str
    title: str
    message: str
    comment_id: str | None
    triggered_by_id: str | None
    is_read: bool
    read_at: datetime | None
    metadata: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=str(notification.id),
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            comment_id=str(notification.comment_id) if notification.comment_id else None,
            triggered_by_id=(
                str(notification.triggered_by_id)
                if notification.triggered_by_id
                else None
            ),
            is_read=notification.is_read,
            read_at=notification.read_at,
            metadata=notification.metadata,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Recipient UUID string
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    items: list[NotificationItem]


class ListNotificationsUseCase:
    """Use case for reading a user's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: Recipient and page window

        Returns:
            The recipient's notifications

        Raises:
            ValueError: If user_id is not a UUID
        """
        notifications = await self.notification_service.get_notifications_for_user(
            UserId(UUID(request.user_id)),
            limit=request.limit,
            offset=request.offset,
        )
        return ListNotificationsResponse(
            items=[NotificationItem.from_domain(n) for n in notifications]
        )
