"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from remark.domain.model import Comment, Notification
from remark.domain.value import (
    CommentId,
    CommentPath,
    NotificationId,
    NotificationType,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row.get("author_username"),
        content=row["content"],
        original_content=row.get("original_content"),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        path=CommentPath.parse(row.get("path")),
        children_count=row["children_count"],
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        is_deleted=row["is_deleted"],
        deleted_at=row.get("deleted_at"),
        restored_at=row.get("restored_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(exclude={"path", "author_username"})
    data["path"] = str(comment.path)
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])) if row.get("comment_id") else None,
        triggered_by_id=UserId(_uuid(row["triggered_by_id"]))
        if row.get("triggered_by_id")
        else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        metadata=row.get("metadata") or {},
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
