"""Domain layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from remark.domain.repository import CommentRepository, NotificationRepository
from remark.domain.service import (
    BackgroundJobs,
    CommentService,
    CommitSignal,
    NotificationService,
    ReplyNotifier,
)
from remark.domain.value import MutationWindow
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Background jobs outlive requests and are closed with the container.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_background_jobs(self) -> AsyncIterator[BackgroundJobs]:
        """Provide the container-wide background job tracker."""
        jobs = BackgroundJobs()
        yield jobs
        await jobs.close()

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_reply_notifier(
        self,
        notification_service: NotificationService,
        jobs: BackgroundJobs,
        commit_signal: CommitSignal,
    ) -> ReplyNotifier:
        """Provide reply notifier bound to this request's transaction."""
        return ReplyNotifier(
            notification_service=notification_service,
            jobs=jobs,
            commit_signal=commit_signal,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reply_notifier: ReplyNotifier,
        window: MutationWindow,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reply_notifier=reply_notifier,
            window=window,
        )
