"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from remark.domain.model import Notification
from remark.domain.repository import NotificationRepository
from remark.domain.value import UserId
from remark.persistence.mappers import notification_to_dict, row_to_notification
from remark.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Notifications are written after the triggering comment has committed,
    outside any request, so each call runs in its own short transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification and commit it."""
        async with self.session_factory() as session, session.begin():
            stmt = notifications_table.insert().values(
                **notification_to_dict(notification)
            )
            await session.execute(stmt)
        return notification

    async def find_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Notification]:
        """Find notifications for a recipient, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [row_to_notification(row._asdict()) for row in result.fetchall()]
