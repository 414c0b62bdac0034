"""Restore comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class RestoreCommentRequest(BaseModel):
    """Restore comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class RestoreCommentResponse(BaseModel):
    """Restore comment response."""

    comment: CommentItem


class RestoreCommentUseCase:
    """Use case for undoing a soft delete within the restore window."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RestoreCommentRequest) -> RestoreCommentResponse:
        """Execute restore comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
            InvalidStateError: If the comment is not deleted
            MutationWindowClosedError: If the restore window has elapsed
        """
        comment = await self.comment_service.restore_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )

        return RestoreCommentResponse(comment=CommentItem.from_domain(comment))
