"""Notification entity.

Notifications tell a user that something happened to content they own,
for example a reply to one of their comments.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from remark.domain.model.common import DomainModel, utc_now
from remark.domain.value import CommentId, NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """Notification addressed to a single recipient."""

    id: NotificationId
    type: NotificationType = NotificationType.COMMENT_REPLY
    title: str = Field(max_length=255)
    message: str
    user_id: UserId  # Recipient
    comment_id: Optional[CommentId] = None
    triggered_by_id: Optional[UserId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)
