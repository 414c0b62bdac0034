"""Reply notifications triggered by comment creation."""

import logfire

from remark.domain.model.comment import Comment

from .dispatch import BackgroundJobs, CommitSignal
from .notification_service import NotificationService

# Seconds a queued notification waits for the reply's transaction to finish
DEFAULT_COMMIT_TIMEOUT = 30.0


class ReplyNotifier:
    """Notifies a parent comment's author about a new reply.

    Delivery runs as a background job once the reply's transaction has
    committed, so a slow or failing notification store never delays or
    undoes the reply. A rolled-back reply sends nothing.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        jobs: BackgroundJobs,
        commit_signal: CommitSignal,
        commit_timeout: float = DEFAULT_COMMIT_TIMEOUT,
    ) -> None:
        self.notification_service = notification_service
        self.jobs = jobs
        self.commit_signal = commit_signal
        self.commit_timeout = commit_timeout

    @staticmethod
    def should_notify(parent: Comment | None, reply: Comment) -> bool:
        """Only replies to someone else's live comment trigger a notification."""
        return (
            parent is not None
            and not parent.is_deleted
            and parent.author_id != reply.author_id
        )

    def notify(self, parent: Comment | None, reply: Comment) -> bool:
        """Queue the reply notification if one is warranted.

        Args:
            parent: Comment being replied to (None for roots)
            reply: The newly created comment

        Returns:
            True if a notification was queued, False otherwise
        """
        if parent is None or not self.should_notify(parent, reply):
            return False

        self.jobs.spawn(f"reply-notification:{reply.id}", self._deliver(parent, reply))
        return True

    async def _deliver(self, parent: Comment, reply: Comment) -> None:
        if not await self.commit_signal.wait(self.commit_timeout):
            logfire.warn(
                "Reply notification dropped, reply was not committed",
                comment_id=str(reply.id),
                parent_id=str(parent.id),
            )
            return

        try:
            await self.notification_service.notify_reply(
                recipient_id=parent.author_id,
                comment_id=reply.id,
                actor_id=reply.author_id,
            )
        except Exception:
            logfire.exception(
                "Reply notification failed",
                parent_id=str(parent.id),
                comment_id=str(reply.id),
                recipient_id=str(parent.author_id),
            )
